"""Interpretation of accumulated body fragments and credentials."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping, Sequence
from typing import Any

from curlparse.models import AuthInfo

_BEARER_RE = re.compile(r"^bearer\s+(.+)$", re.IGNORECASE | re.DOTALL)


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def interpret_body(fragments: Sequence[str]) -> Any:
    """Turn collected -d/--data values into a request body.

    Args:
        fragments: Data values in command order.

    Returns:
        None when there are no fragments. A single fragment is decoded as
        JSON when possible and returned verbatim otherwise. Several
        fragments are joined with "&" and never decoded.
    """
    if not fragments:
        return None
    if len(fragments) > 1:
        return "&".join(fragments)

    fragment = fragments[0]
    try:
        return json.loads(fragment, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        # Too deeply nested for the decoder; kept as text
        return fragment


def bearer_token(headers: Mapping[str, str]) -> str | None:
    """Return the token of a ``Bearer`` Authorization header, if any."""
    token = None
    for name, value in headers.items():
        if name.lower() != "authorization":
            continue
        match = _BEARER_RE.match(value.strip())
        token = match.group(1).strip() if match else None
    return token


def interpret_auth(
    headers: Mapping[str, str],
    credentials: tuple[str, str] | None = None,
    scheme: str | None = None,
) -> AuthInfo:
    """Resolve the authentication descriptor.

    A Bearer Authorization header takes precedence over -u/--user
    credentials. Credentials, or a bare --digest/--basic, yield digest or
    basic auth. Anything else is "none".
    """
    token = bearer_token(headers)
    if token:
        return AuthInfo(type="bearer", token=token)

    if credentials is not None or scheme is not None:
        username, password = credentials or ("", "")
        return AuthInfo(
            type="digest" if scheme == "digest" else "basic",
            username=username,
            password=password,
        )

    return AuthInfo()
