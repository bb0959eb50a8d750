"""Shell-style tokenizer for curl command lines.

Splits a command string into argument tokens the way a POSIX shell
would, without any knowledge of curl options. Malformed input (an
unterminated quote, a trailing backslash) degrades to the partial token
read so far instead of raising.
"""

from __future__ import annotations

import re
import shlex

from curlparse.logging import get_logger

LOG = get_logger(__name__)

# Backslash-newline (LF or CRLF) joins two physical lines
_LINE_CONTINUATION_RE = re.compile(r"\\\r?\n")

CURL_PROGRAM_NAMES = ("curl", "curl.exe")


def join_continuations(text: str) -> str:
    """Remove backslash line continuations, joining physical lines."""
    return _LINE_CONTINUATION_RE.sub("", text)


def _split_words(text: str) -> list[str]:
    lexer = shlex.shlex(text, posix=True)
    lexer.whitespace_split = True
    lexer.commenters = ""

    words: list[str] = []
    while True:
        try:
            word = lexer.get_token()
        except ValueError as exc:
            # shlex keeps the partially read word on the lexer
            if lexer.token:
                words.append(lexer.token)
            LOG.debug("unterminated_token", error=str(exc), partial=lexer.token)
            break
        if word is None:
            break
        words.append(word)
    return words


def tokenize(text: object) -> list[str]:
    """Split a curl command into argument tokens.

    Args:
        text: Raw command, possibly spanning several lines. Anything that
            is not a string is treated as an empty command.

    Returns:
        Tokens in order, quotes removed, with a leading ``curl`` or
        ``curl.exe`` program name dropped.
    """
    if not isinstance(text, str):
        return []

    words = _split_words(join_continuations(text))
    if words and words[0] in CURL_PROGRAM_NAMES:
        words = words[1:]
    return words
