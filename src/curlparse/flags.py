"""curl option table and the request state its handlers fill in.

Every recognized option is declared once in ``FLAG_SPECS`` with its
aliases, how many arguments it takes, the request field it targets, and
the function that applies it. ``FLAGS`` indexes the same specs by each
alias for the dispatcher in :mod:`curlparse.parser`.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from dataclasses import dataclass, field

from curlparse.classify import looks_like_url
from curlparse.logging import get_logger
from curlparse.models import HTTP_METHODS

LOG = get_logger(__name__)

# Decimal literal as accepted for --max-time / --connect-timeout
_NUMBER_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")


@dataclass
class RequestBuilder:
    """Mutable state accumulated while walking the tokens of one command.

    A builder lives for a single parse call and is never shared.
    """

    method: str | None = None
    head: bool = False
    url: str | None = None
    fallback_url: str | None = None
    explicit_url: str | None = None
    headers: dict[str, str] = field(default_factory=dict)
    data: list[str] = field(default_factory=list)
    json_data: bool = False
    form: dict[str, str] = field(default_factory=dict)
    cookies: dict[str, str] = field(default_factory=dict)
    credentials: tuple[str, str] | None = None
    auth_scheme: str | None = None
    compressed: bool = False
    insecure: bool = False
    follow_redirects: bool = False
    verbose: bool = False
    timeout: int | float | None = None
    connect_timeout: int | float | None = None

    def capture_positional(self, token: str) -> None:
        """Consider a bare token as the request URL.

        The first URL-looking token wins. When no token looks like a URL,
        the first non-empty bare token is used instead. A URL-looking token
        therefore beats an earlier plain one, so "curl localhost:8080
        https://x" resolves to "https://x" rather than the first bare token.
        """
        if not token:
            return
        if looks_like_url(token):
            if self.url is None:
                self.url = token
            else:
                LOG.debug("extra_positional_ignored", token=token)
        elif self.fallback_url is None:
            self.fallback_url = token
        else:
            LOG.debug("extra_positional_ignored", token=token)

    @property
    def resolved_url(self) -> str:
        if self.explicit_url is not None:
            return self.explicit_url
        if self.url is not None:
            return self.url
        return self.fallback_url or ""


def parse_number(value: str) -> int | float | None:
    """Parse a decimal number, returning None when it is not one.

    Integral values come back as int, so "30" and "30.0" both give 30.
    """
    text = value.strip()
    if not _NUMBER_RE.match(text):
        return None
    number = float(text)
    if not math.isfinite(number):
        return None
    if number.is_integer():
        return int(number)
    return number


def _set_method(builder: RequestBuilder, value: str) -> None:
    verb = value.strip().upper()
    if verb not in HTTP_METHODS:
        LOG.debug("invalid_method_ignored", method=value)
        return
    builder.method = verb


def _set_head(builder: RequestBuilder) -> None:
    builder.head = True


def _add_data(builder: RequestBuilder, value: str) -> None:
    builder.data.append(value)


def _add_json_data(builder: RequestBuilder, value: str) -> None:
    builder.data.append(value)
    builder.json_data = True


def _add_header(builder: RequestBuilder, value: str) -> None:
    name, sep, header_value = value.partition(":")
    name = name.strip()
    header_value = header_value.strip()
    if not sep or not name:
        LOG.debug("header_discarded", header=value, reason="malformed")
        return
    if looks_like_url(header_value):
        LOG.debug("header_discarded", header=name, reason="url_value")
        return
    builder.headers[name] = header_value


def _set_user_agent(builder: RequestBuilder, value: str) -> None:
    builder.headers["User-Agent"] = value


def _add_form_field(builder: RequestBuilder, value: str) -> None:
    name, _, field_value = value.partition("=")
    if not name:
        LOG.debug("form_field_discarded", field=value, reason="empty_name")
        return
    if looks_like_url(field_value):
        LOG.debug("form_field_discarded", field=name, reason="url_value")
        return
    builder.form[name] = field_value


def _set_user(builder: RequestBuilder, value: str) -> None:
    username, _, password = value.partition(":")
    if looks_like_url(username):
        LOG.debug("credentials_discarded", reason="url_value")
        return
    builder.credentials = (username, password)


def _set_digest(builder: RequestBuilder) -> None:
    builder.auth_scheme = "digest"


def _set_basic(builder: RequestBuilder) -> None:
    builder.auth_scheme = "basic"


def _add_cookies(builder: RequestBuilder, value: str) -> None:
    if looks_like_url(value):
        LOG.debug("cookies_discarded", reason="url_value")
        return
    for segment in value.split(";"):
        segment = segment.strip()
        if not segment:
            continue
        name, _, cookie_value = segment.partition("=")
        builder.cookies[name.strip()] = cookie_value.strip()


def _set_compressed(builder: RequestBuilder) -> None:
    builder.compressed = True


def _set_insecure(builder: RequestBuilder) -> None:
    builder.insecure = True


def _set_location(builder: RequestBuilder) -> None:
    builder.follow_redirects = True


def _set_verbose(builder: RequestBuilder) -> None:
    builder.verbose = True


def _set_timeout(builder: RequestBuilder, value: str) -> None:
    builder.timeout = parse_number(value)
    if builder.timeout is None:
        LOG.debug("invalid_number_ignored", option="timeout", value=value)


def _set_connect_timeout(builder: RequestBuilder, value: str) -> None:
    builder.connect_timeout = parse_number(value)
    if builder.connect_timeout is None:
        LOG.debug("invalid_number_ignored", option="connect_timeout", value=value)


def _set_url(builder: RequestBuilder, value: str) -> None:
    builder.explicit_url = value


@dataclass(frozen=True)
class FlagSpec:
    """Declaration of one curl option.

    Attributes:
        names: Every spelling of the option, short and long.
        arity: Number of argument tokens the option consumes (0 or 1).
        target: Request field the option writes to.
        apply: Handler called with the builder, plus the argument when
            arity is 1.
        accepts_url: Whether a URL-looking argument is a legitimate value.
            When False, such a token is left for positional URL capture.
    """

    names: tuple[str, ...]
    arity: int
    target: str
    apply: Callable[..., None]
    accepts_url: bool = False


FLAG_SPECS: tuple[FlagSpec, ...] = (
    FlagSpec(("-X", "--request"), 1, "method", _set_method),
    FlagSpec(("-I", "--head"), 0, "method", _set_head),
    FlagSpec(
        ("-d", "--data", "--data-raw", "--data-binary", "--data-ascii", "--data-urlencode"),
        1,
        "body",
        _add_data,
    ),
    FlagSpec(("--json",), 1, "body", _add_json_data),
    FlagSpec(("-H", "--header"), 1, "headers", _add_header),
    FlagSpec(("-A", "--user-agent"), 1, "headers", _set_user_agent),
    FlagSpec(("-F", "--form"), 1, "form", _add_form_field),
    FlagSpec(("-u", "--user"), 1, "auth", _set_user),
    FlagSpec(("--digest",), 0, "auth", _set_digest),
    FlagSpec(("--basic",), 0, "auth", _set_basic),
    FlagSpec(("-b", "--cookie"), 1, "cookies", _add_cookies),
    FlagSpec(("--compressed",), 0, "options.compressed", _set_compressed),
    FlagSpec(("-k", "--insecure"), 0, "options.insecure", _set_insecure),
    FlagSpec(("-L", "--location"), 0, "options.follow_redirects", _set_location),
    FlagSpec(("-m", "--max-time"), 1, "options.timeout", _set_timeout),
    FlagSpec(("--connect-timeout",), 1, "options.connect_timeout", _set_connect_timeout),
    FlagSpec(("-v", "--verbose"), 0, "options.verbose", _set_verbose),
    FlagSpec(("--url",), 1, "url", _set_url, accepts_url=True),
)

FLAGS: dict[str, FlagSpec] = {name: spec for spec in FLAG_SPECS for name in spec.names}

# Other curl short options that never take a value (-s, -S, -f, ...). They
# are skipped inside clusters like "-sSL"; any other unknown letter ends the
# cluster because the rest may be its attached value ("-ofile.json").
IGNORED_SHORT_SWITCHES = frozenset("0123456#:aBfgGijlnNOpqRsSVZ")
