"""Small string helpers shared by the config-line layer."""

from __future__ import annotations

import re
from collections.abc import Iterable

_WHITESPACE_RUN = re.compile(r"\s+")


def strip_comments(line: str) -> str:
    """Cut *line* at the first ``#`` that is outside double quotes.

    A backslash escapes the next character, so ``\\#`` and ``\\"`` never
    start a comment or toggle quoting.

    >>> strip_comments('set title "a # b" # trailing')
    'set title "a # b" '
    """
    in_quotes = False
    escaped = False
    for idx, char in enumerate(line):
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == '"':
            in_quotes = not in_quotes
        elif char == "#" and not in_quotes:
            return line[:idx]
    return line


def consolidate_whitespace(text: str) -> str:
    """Collapse every run of whitespace in *text* into a single space."""
    return _WHITESPACE_RUN.sub(" ", text)


def replace_pairs(text: str, pairs: Iterable[tuple[str, str]]) -> str:
    """Replace several substrings in one left-to-right pass.

    At each step the earliest match among *pairs* wins; on a tie the pair
    listed first wins. Replaced text is never rescanned, so
    ``replace_pairs("ab", [("a", "b"), ("b", "a")])`` gives ``"ba"``.
    Pairs with an empty search string are ignored.
    """
    pairs = [(old, new) for old, new in pairs if old]
    out: list[str] = []
    pos = 0
    while pos < len(text):
        best: tuple[int, str, str] | None = None
        for old, new in pairs:
            idx = text.find(old, pos)
            if idx != -1 and (best is None or idx < best[0]):
                best = (idx, old, new)
        if best is None:
            out.append(text[pos:])
            break
        idx, old, new = best
        out.append(text[pos:idx])
        out.append(new)
        pos = idx + len(old)
    return "".join(out)


def quote(text: str) -> str:
    """Wrap *text* in double quotes, escaping backslashes and quotes.

    The result reads back as one token through ``tokenize_quoted``.
    """
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def quote_if_necessary(text: str) -> str:
    """Quote *text* only if it would not survive ``tokenize_quoted`` as-is."""
    if not text or text.startswith("#") or any(c in text for c in ' \t"'):
        return quote(text)
    return text
