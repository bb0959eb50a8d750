"""Tests for the shell-style tokenizer."""

from __future__ import annotations

import pytest

from curlparse.tokenizer import join_continuations, tokenize


class TestJoinContinuations:
    """Tests for backslash line continuation removal."""

    def test_lf_continuation(self) -> None:
        assert join_continuations("curl \\\n-k") == "curl -k"

    def test_crlf_continuation(self) -> None:
        assert join_continuations("curl \\\r\n-k") == "curl -k"

    def test_plain_newline_kept(self) -> None:
        assert join_continuations("curl\n-k") == "curl\n-k"

    def test_backslash_not_before_newline_kept(self) -> None:
        assert join_continuations("a\\b") == "a\\b"


class TestTokenize:
    """Tests for tokenize."""

    @pytest.mark.parametrize("value", [None, 42, b"curl -k", ["curl"]])
    def test_non_string_input(self, value: object) -> None:
        """Anything that is not a string tokenizes to nothing."""
        assert tokenize(value) == []

    @pytest.mark.parametrize("value", ["", "   ", "\t\n  \r\n"])
    def test_blank_input(self, value: str) -> None:
        assert tokenize(value) == []

    def test_drops_leading_curl(self) -> None:
        assert tokenize("curl https://api.example.com") == ["https://api.example.com"]

    def test_drops_leading_curl_exe(self) -> None:
        assert tokenize("curl.exe -k https://api.example.com") == ["-k", "https://api.example.com"]

    def test_only_curl(self) -> None:
        assert tokenize("curl") == []

    def test_curl_match_is_case_sensitive(self) -> None:
        assert tokenize("CURL https://a.example") == ["CURL", "https://a.example"]

    def test_curl_only_dropped_in_first_position(self) -> None:
        assert tokenize("-d curl https://a.example") == ["-d", "curl", "https://a.example"]

    def test_no_program_name(self) -> None:
        assert tokenize("-X POST https://a.example") == ["-X", "POST", "https://a.example"]

    def test_double_quotes_stripped(self) -> None:
        tokens = tokenize('curl -H "Content-Type: application/json"')
        assert tokens == ["-H", "Content-Type: application/json"]

    def test_single_quotes_stripped(self) -> None:
        tokens = tokenize("curl -d '{\"key\": \"value\"}'")
        assert tokens == ["-d", '{"key": "value"}']

    def test_escaped_quote_inside_double_quotes(self) -> None:
        tokens = tokenize('curl -d "{\\"a\\": 1}"')
        assert tokens == ["-d", '{"a": 1}']

    def test_single_quotes_are_literal(self) -> None:
        assert tokenize("curl -d 'a\\nb'") == ["-d", "a\\nb"]

    def test_adjacent_quoted_parts_join(self) -> None:
        assert tokenize("curl -d 'a b'\"c d\"e") == ["-d", "a bc de"]

    def test_empty_quoted_token_preserved(self) -> None:
        assert tokenize("curl -H '' https://a.example") == ["-H", "", "https://a.example"]

    def test_unquoted_header_stays_single_token(self) -> None:
        assert tokenize("curl -H Content-Type:application/json") == [
            "-H",
            "Content-Type:application/json",
        ]

    def test_whitespace_collapses(self) -> None:
        assert tokenize("curl   -k \t\t -L\n\nhttps://a.example") == [
            "-k",
            "-L",
            "https://a.example",
        ]

    def test_hash_is_not_a_comment(self) -> None:
        assert tokenize("curl https://a.example/page#section") == ["https://a.example/page#section"]

    def test_query_string_kept(self) -> None:
        assert tokenize("curl 'https://a.example?x=1&y=2'") == ["https://a.example?x=1&y=2"]

    def test_line_continuations(self) -> None:
        multi = 'curl \\\n-H "A: 1" \\\n-d x \\\nhttps://a.example'
        single = 'curl -H "A: 1" -d x https://a.example'
        assert tokenize(multi) == tokenize(single)

    def test_windows_line_continuations(self) -> None:
        multi = 'curl \\\r\n-H "A: 1" \\\r\nhttps://a.example'
        assert tokenize(multi) == ["-H", "A: 1", "https://a.example"]

    def test_unterminated_quote_keeps_partial_token(self) -> None:
        """An unclosed quote degrades to the text read so far."""
        assert tokenize("curl -d 'unterminated value") == ["-d", "unterminated value"]

    def test_trailing_backslash(self) -> None:
        assert tokenize("curl -k abc\\") == ["-k", "abc"]
