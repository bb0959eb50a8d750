"""Result types produced by the curl parser.

All types are frozen dataclasses. A ParsedRequest is always fully
populated: absent flags yield the documented defaults, never missing
attributes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

HTTP_METHODS = frozenset(
    {"GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS", "TRACE", "CONNECT"}
)

AuthType = Literal["basic", "digest", "bearer", "none"]


@dataclass(frozen=True)
class AuthInfo:
    """Authentication descriptor derived from -u/--user and Authorization headers."""

    type: AuthType = "none"
    username: str = ""
    password: str = ""
    token: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "type": self.type,
            "username": self.username,
            "password": self.password,
            "token": self.token,
        }


@dataclass(frozen=True)
class RequestOptions:
    """Transport options recognized on the command line.

    Attributes:
        compressed: --compressed was given.
        insecure: -k/--insecure was given (TLS verification disabled).
        follow_redirects: -L/--location was given.
        verbose: -v/--verbose was given.
        timeout: --max-time in seconds, or None when absent or unparseable.
        connect_timeout: --connect-timeout in seconds, or None.
    """

    compressed: bool = False
    insecure: bool = False
    follow_redirects: bool = False
    verbose: bool = False
    timeout: int | float | None = None
    connect_timeout: int | float | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "compressed": self.compressed,
            "insecure": self.insecure,
            "followRedirects": self.follow_redirects,
            "verbose": self.verbose,
            "timeout": self.timeout,
            "connectTimeout": self.connect_timeout,
        }


@dataclass(frozen=True)
class ParsedRequest:
    """Structured description of the HTTP request a curl command performs.

    Attributes:
        method: Canonical upper-case HTTP verb, GET by default.
        url: Request URL exactly as written, or "" when none was found.
        headers: Header name to value; the last duplicate name wins.
        body: None, a decoded JSON value, or the raw body string.
        form: Multipart form field to value; file uploads keep their "@path".
        cookies: Cookie name to value.
        auth: Authentication descriptor.
        options: Transport options.
    """

    method: str = "GET"
    url: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None
    form: dict[str, str] = field(default_factory=dict)
    cookies: dict[str, str] = field(default_factory=dict)
    auth: AuthInfo = field(default_factory=AuthInfo)
    options: RequestOptions = field(default_factory=RequestOptions)

    def to_dict(self) -> dict[str, Any]:
        """Render the request as plain JSON-serializable data."""
        return {
            "method": self.method,
            "url": self.url,
            "headers": dict(self.headers),
            "body": self.body,
            "form": dict(self.form),
            "cookies": dict(self.cookies),
            "auth": self.auth.to_dict(),
            "options": self.options.to_dict(),
        }
