"""Tests for confsplit.parser.text helpers."""

from __future__ import annotations

import pytest

from confsplit.parser.text import (
    consolidate_whitespace,
    quote,
    quote_if_necessary,
    replace_pairs,
    strip_comments,
)
from confsplit.parser.tokenizer import tokenize_quoted


class TestStripComments:
    def test_trailing_comment(self):
        assert strip_comments('set title "a # b" # trailing') == 'set title "a # b" '

    def test_no_comment(self):
        assert strip_comments("no comment here") == "no comment here"

    def test_whole_line(self):
        assert strip_comments("# all of it") == ""

    def test_escaped_hash(self):
        assert strip_comments(r"a \# b # c") == r"a \# b "

    def test_escaped_quote_does_not_open_string(self):
        assert strip_comments(r'a \" # c') == r'a \" '

    def test_unterminated_quote(self):
        assert strip_comments('a "b # c') == 'a "b # c'


class TestConsolidateWhitespace:
    def test_collapses_runs(self):
        assert consolidate_whitespace("  Lorem \t\tIpsum \t ") == " Lorem Ipsum "

    def test_newlines(self):
        assert consolidate_whitespace("Lorem\r\n\r\n\tIpsum") == "Lorem Ipsum"

    def test_untouched(self):
        assert consolidate_whitespace("LoremIpsum") == "LoremIpsum"


class TestReplacePairs:
    def test_no_rescan(self):
        assert replace_pairs("ab", [("a", "b"), ("b", "a")]) == "ba"

    def test_earliest_match_wins(self):
        assert replace_pairs("<b>x</b>", [("</b>", "*"), ("<b>", "*")]) == "*x*"

    def test_first_pair_wins_tie(self):
        assert replace_pairs("abc", [("ab", "1"), ("abc", "2")]) == "1c"

    def test_no_match(self):
        assert replace_pairs("abc", [("x", "y")]) == "abc"

    def test_empty_search_ignored(self):
        assert replace_pairs("abc", [("", "x")]) == "abc"

    def test_empty_text(self):
        assert replace_pairs("", [("a", "b")]) == ""


class TestQuote:
    def test_escapes_quotes(self):
        assert quote('say "hi"') == '"say \\"hi\\""'

    def test_escapes_backslashes(self):
        assert quote("a\\b") == '"a\\\\b"'

    @pytest.mark.parametrize(
        "text",
        ["plain", "two words", 'a "quoted" word', "back\\slash", "# not a comment", ""],
    )
    def test_reads_back_as_one_token(self, text):
        assert tokenize_quoted(quote(text), " \t") == [text]


class TestQuoteIfNecessary:
    def test_plain(self):
        assert quote_if_necessary("plain") == "plain"

    def test_space(self):
        assert quote_if_necessary("two words") == '"two words"'

    def test_empty(self):
        assert quote_if_necessary("") == '""'

    def test_leading_hash(self):
        assert quote_if_necessary("#x") == '"#x"'

    def test_inner_hash(self):
        assert quote_if_necessary("a#b") == "a#b"
