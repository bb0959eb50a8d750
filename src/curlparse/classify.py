"""Value classification heuristics.

Flag handlers use ``looks_like_url`` to notice when a flag was left
without its argument and the following token is really the request URL.
This is a prefix check, not a URI grammar: scheme-relative ``//host``
references and bare host names are not recognized.
"""

from __future__ import annotations

import re

# RFC 3986 scheme followed by "://", e.g. http://, HTTPS://, ftp://, ws://
_URL_PREFIX_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")


def looks_like_url(value: object) -> bool:
    """Return True if the value starts with a ``scheme://`` prefix."""
    if not isinstance(value, str):
        return False
    return _URL_PREFIX_RE.match(value) is not None
