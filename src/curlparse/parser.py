"""curl command parser.

Turns a curl command line, as copied from browser developer tools, API
documentation or a shell history, into a :class:`ParsedRequest`.

Parsing never raises. Unknown options are skipped, invalid values fall
back to defaults, and arguments that look like URLs where a header,
credential, cookie, form field or body was expected are left for URL
capture instead.

Example:
    >>> from curlparse import parse
    >>> request = parse("curl -X POST -d '{\"a\": 1}' https://api.example.com")
    >>> request.method, request.body
    ('POST', {'a': 1})
"""

from __future__ import annotations

from collections.abc import Sequence

from curlparse.classify import looks_like_url
from curlparse.flags import FLAGS, IGNORED_SHORT_SWITCHES, FlagSpec, RequestBuilder
from curlparse.interpret import interpret_auth, interpret_body
from curlparse.logging import get_logger
from curlparse.models import ParsedRequest, RequestOptions
from curlparse.tokenizer import tokenize

LOG = get_logger(__name__)

_JSON_MIME = "application/json"


def _is_flag(token: str) -> bool:
    return token.startswith("-") and token != "-"


def _apply(
    builder: RequestBuilder,
    spec: FlagSpec,
    flag: str,
    attached: str | None,
    tokens: Sequence[str],
    pos: int,
) -> int:
    """Apply one recognized option and return the index of the next token.

    Args:
        builder: State of the command being parsed.
        spec: Declaration of the option.
        flag: Option as written, for logging.
        attached: Value glued to a short option (``-XPOST``), if any.
        tokens: All tokens of the command.
        pos: Index of the token following the option.
    """
    if spec.arity == 0:
        spec.apply(builder)
        return pos

    if attached is not None:
        value = attached
    elif pos < len(tokens):
        value = tokens[pos]
    else:
        LOG.debug("missing_argument", flag=flag)
        return pos

    if looks_like_url(value) and not spec.accepts_url:
        # The option was left without its value; the URL is positional
        LOG.debug("url_like_argument_skipped", flag=flag, value=value)
        if attached is not None:
            builder.capture_positional(attached)
        return pos

    spec.apply(builder, value)
    return pos if attached is not None else pos + 1


def _dispatch_short(builder: RequestBuilder, token: str, tokens: Sequence[str], pos: int) -> int:
    """Handle ``-X``, ``-XPOST`` and clusters such as ``-sSL``."""
    for offset in range(1, len(token)):
        flag = "-" + token[offset]
        spec = FLAGS.get(flag)
        if spec is None:
            LOG.debug("unknown_flag_skipped", flag=flag)
            if token[offset] in IGNORED_SHORT_SWITCHES:
                continue
            break
        if spec.arity == 0:
            spec.apply(builder)
            continue
        return _apply(builder, spec, flag, token[offset + 1 :] or None, tokens, pos)
    return pos


def _walk(tokens: Sequence[str]) -> RequestBuilder:
    builder = RequestBuilder()
    pos = 0
    while pos < len(tokens):
        token = tokens[pos]
        pos += 1

        if not _is_flag(token):
            builder.capture_positional(token)
        elif token.startswith("--"):
            spec = FLAGS.get(token)
            if spec is None:
                LOG.debug("unknown_flag_skipped", flag=token)
                continue
            pos = _apply(builder, spec, token, None, tokens, pos)
        else:
            pos = _dispatch_short(builder, token, tokens, pos)
    return builder


def _resolve_method(builder: RequestBuilder) -> str:
    if builder.method is not None:
        return builder.method
    if builder.head:
        return "HEAD"
    if builder.data:
        return "POST"
    return "GET"


def _resolve_headers(builder: RequestBuilder) -> dict[str, str]:
    headers = dict(builder.headers)
    if builder.json_data:
        present = {name.lower() for name in headers}
        if "content-type" not in present:
            headers["Content-Type"] = _JSON_MIME
        if "accept" not in present:
            headers["Accept"] = _JSON_MIME
    return headers


def _assemble(builder: RequestBuilder) -> ParsedRequest:
    headers = _resolve_headers(builder)
    return ParsedRequest(
        method=_resolve_method(builder),
        url=builder.resolved_url,
        headers=headers,
        body=interpret_body(builder.data),
        form=dict(builder.form),
        cookies=dict(builder.cookies),
        auth=interpret_auth(headers, builder.credentials, builder.auth_scheme),
        options=RequestOptions(
            compressed=builder.compressed,
            insecure=builder.insecure,
            follow_redirects=builder.follow_redirects,
            verbose=builder.verbose,
            timeout=builder.timeout,
            connect_timeout=builder.connect_timeout,
        ),
    )


def parse(command: object) -> ParsedRequest:
    """Parse a curl command into a structured request.

    Args:
        command: curl command line, optionally spanning several lines with
            backslash continuations. Non-string values are treated as an
            empty command.

    Returns:
        Fully populated ParsedRequest. Missing information takes the
        defaults (GET, empty URL, no body, no auth).
    """
    tokens = tokenize(command)
    request = _assemble(_walk(tokens))
    LOG.debug(
        "request_parsed",
        method=request.method,
        url=request.url,
        tokens=len(tokens),
        headers=len(request.headers),
    )
    return request
