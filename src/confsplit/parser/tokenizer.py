"""Delimiter and quote-aware tokenizers for config lines and command strings.

Four splitting policies share one caller-supplied delimiter set:

- :func:`split` drops delimiter runs.
- :func:`split_preserving_spacing` keeps each delimiter run as a token, so
  joining the result gives back the input.
- :func:`split_counting_lines` turns every delimiter character into a
  ``"\\n"`` token.
- :func:`tokenize_quoted` honors double quotes, backslash escapes and
  ``#`` comments, one token at a time via :func:`extract_one`.

None of them raise: odd input (unterminated quote, trailing backslash,
nothing but delimiters) still yields a well-defined token list.
"""

from __future__ import annotations

import logging
from collections.abc import Container
from dataclasses import dataclass

log = logging.getLogger(__name__)

COMMENT_MARKER = "#"
QUOTE = '"'
BACKSLASH = "\\"

# Escaped backticks stay escaped; backtick evaluation unescapes them later.
_ESCAPES: dict[str, str] = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    '"': '"',
    "`": "\\`",
    "\\": "\\",
}


@dataclass
class Cursor:
    """Unconsumed tail of a string being tokenized by :func:`extract_one`."""

    text: str
    pos: int = 0

    @property
    def remaining(self) -> str:
        return self.text[self.pos:]

    @property
    def exhausted(self) -> bool:
        return self.pos >= len(self.text)


def decode_escape(char: str) -> str:
    """Return the decoded form of ``\\<char>`` inside a quoted token."""
    return _ESCAPES.get(char, char)


def append_escape(chars: list[str], char: str) -> None:
    """Append the decoded form of ``\\<char>`` to the *chars* accumulator."""
    chars.append(decode_escape(char))


def _skip(text: str, pos: int, delimiters: Container[str]) -> int:
    end = len(text)
    while pos < end and text[pos] in delimiters:
        pos += 1
    return pos


def _scan(text: str, pos: int, delimiters: Container[str]) -> int:
    end = len(text)
    while pos < end and text[pos] not in delimiters:
        pos += 1
    return pos


def extract_one(cursor: Cursor, delimiters: Container[str]) -> str | None:
    """Pull the next token off the front of *cursor*.

    Parameters
    ----------
    cursor : Cursor
        Advanced past the returned token. Emptied when the input is
        exhausted or a comment is reached.
    delimiters : Container[str]
        Characters separating tokens, e.g. ``" \\t"`` or ``{" ", "\\t"}``.

    Returns
    -------
    str | None
        The decoded token, or ``None`` when no token remains. An empty
        quoted string ``""`` yields ``""``, not ``None``.

    Examples
    --------
    >>> c = Cursor('set "a b" # rest')
    >>> extract_one(c, " "), extract_one(c, " "), extract_one(c, " ")
    ('set', 'a b', None)
    """
    text = cursor.text
    end = len(text)
    pos = _skip(text, cursor.pos, delimiters)

    if pos >= end or text[pos] == COMMENT_MARKER:
        cursor.pos = end
        return None

    if text[pos] != QUOTE:
        stop = _scan(text, pos, delimiters)
        cursor.pos = stop
        return text[pos:stop]

    chars: list[str] = []
    pos += 1
    while pos < end:
        char = text[pos]
        pos += 1
        if char == QUOTE:
            break
        if char == BACKSLASH:
            if pos < end:
                append_escape(chars, text[pos])
                pos += 1
        else:
            chars.append(char)
    cursor.pos = pos
    return "".join(chars)


def tokenize_quoted(text: str, delimiters: Container[str]) -> list[str]:
    """Split *text* into tokens, obeying quotes and dropping ``#`` comments.

    Examples
    --------
    >>> tokenize_quoted('foo bar "foo bar" "a test"', " ")
    ['foo', 'bar', 'foo bar', 'a test']
    >>> tokenize_quoted('yes great "x\\\\ny" # comment', " ")
    ['yes', 'great', 'x\\ny']
    """
    cursor = Cursor(text)
    tokens: list[str] = []
    while (token := extract_one(cursor, delimiters)) is not None:
        tokens.append(token)
    return tokens


def split(text: str, delimiters: Container[str]) -> list[str]:
    """Split *text* on runs of *delimiters*, discarding them.

    >>> split("a  b\\tc", " \\t")
    ['a', 'b', 'c']
    """
    tokens: list[str] = []
    end = len(text)
    start = _skip(text, 0, delimiters)
    while start < end:
        stop = _scan(text, start, delimiters)
        tokens.append(text[start:stop])
        start = _skip(text, stop, delimiters)
    return tokens


def split_preserving_spacing(text: str, delimiters: Container[str]) -> list[str]:
    """Split *text* like :func:`split`, keeping each delimiter run as a token.

    ``"".join(split_preserving_spacing(text, d)) == text`` always holds.

    >>> split_preserving_spacing("  a b  ", " ")
    ['  ', 'a', ' ', 'b', '  ']
    """
    tokens: list[str] = []
    end = len(text)
    pos = 0
    while pos < end:
        stop = _skip(text, pos, delimiters)
        if stop == pos:
            stop = _scan(text, pos, delimiters)
        tokens.append(text[pos:stop])
        pos = stop
    return tokens


def split_counting_lines(text: str, delimiters: Container[str]) -> list[str]:
    """Split *text* like :func:`split_preserving_spacing`, but emit one
    ``"\\n"`` token per delimiter character instead of the run itself.

    >>> split_counting_lines("a\\n\\nb", "\\n")
    ['a', '\\n', '\\n', 'b']
    """
    tokens: list[str] = []
    end = len(text)
    pos = 0
    while pos < end:
        stop = _skip(text, pos, delimiters)
        if stop > pos:
            tokens.extend(["\n"] * (stop - pos))
        else:
            stop = _scan(text, pos, delimiters)
            tokens.append(text[pos:stop])
        pos = stop
    log.debug("split_counting_lines: %d chars -> %d tokens", end, len(tokens))
    return tokens
