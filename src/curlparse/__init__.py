"""curlparse - turn curl commands into structured HTTP requests.

Paste a curl command from browser developer tools, API documentation or
a terminal history and get back the request it describes.

This package provides:
- A shell-faithful tokenizer (quotes, escapes, line continuations)
- A table-driven dispatcher for the commonly exported curl options
- JSON body decoding and basic/digest/bearer auth detection
- A ``curlparse`` command-line tool

Example:
    >>> from curlparse import parse
    >>> request = parse("curl -H 'Authorization: Bearer abc' https://api.example.com/me")
    >>> request.url
    'https://api.example.com/me'
    >>> request.auth.type, request.auth.token
    ('bearer', 'abc')
"""

from curlparse.classify import looks_like_url
from curlparse.config import CurlparseSettings, get_settings
from curlparse.exceptions import CommandSourceError, CurlparseError
from curlparse.flags import FLAG_SPECS, FLAGS, FlagSpec
from curlparse.interpret import interpret_auth, interpret_body
from curlparse.models import HTTP_METHODS, AuthInfo, ParsedRequest, RequestOptions
from curlparse.parser import parse
from curlparse.tokenizer import tokenize

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Parsing
    "parse",
    "tokenize",
    "looks_like_url",
    "interpret_body",
    "interpret_auth",
    # Option table
    "FLAG_SPECS",
    "FLAGS",
    "FlagSpec",
    # Results
    "HTTP_METHODS",
    "AuthInfo",
    "ParsedRequest",
    "RequestOptions",
    # Configuration
    "CurlparseSettings",
    "get_settings",
    # Exceptions
    "CurlparseError",
    "CommandSourceError",
]
