"""Config-line parser: tokenize a line, split off the command, expand backticks.

Produces a :class:`ParsedLine` on success or a :class:`ParseError` on failure.
Blank and comment-only lines produce nothing.
"""

from __future__ import annotations

import difflib
import logging
import os
from collections.abc import Callable, Collection, Container, Iterable
from dataclasses import dataclass, field

from confsplit.errors import ReadError
from confsplit.lib.process import get_command_output
from confsplit.parser.tokenizer import tokenize_quoted

log = logging.getLogger(__name__)

DEFAULT_DELIMITERS = " \t"

Runner = Callable[[str], str]


@dataclass
class ParsedLine:
    """Successfully parsed config line."""

    command: str
    raw: str  # original line, without line terminator
    args: list[str] = field(default_factory=list)
    line_number: int | None = None


@dataclass
class ParseError:
    """Parsing failure."""

    error: str
    raw: str
    line_number: int | None = None
    suggestion: str | None = None


# ---------------------------------------------------------------------------
# Backticks
# ---------------------------------------------------------------------------

def _find_backtick(text: str, pos: int) -> int:
    """Index of the next backtick at or after *pos* not preceded by ``\\``."""
    while True:
        idx = text.find("`", pos)
        if idx <= 0 or text[idx - 1] != "\\":
            return idx
        pos = idx + 1


def _unescape(text: str) -> str:
    return text.replace("\\`", "`")


def evaluate_backticks(token: str, runner: Runner | None = None) -> str:
    """Replace each `` `command` `` span in *token* with the command's output.

    Trailing whitespace is stripped from the output. An unmatched backtick
    is kept literally, and escaped backticks (`` \\` ``) outside command
    spans become plain backticks.

    >>> evaluate_backticks("a`cmd`b", runner=lambda c: c.upper() + "\\n")
    'aCMDb'
    """
    run = runner if runner is not None else get_command_output
    parts: list[str] = []
    pos = 0
    while True:
        start = _find_backtick(token, pos)
        if start == -1:
            break
        stop = _find_backtick(token, start + 1)
        if stop == -1:
            break
        command = token[start + 1 : stop]
        output = run(command).rstrip()
        log.debug("evaluate_backticks: `%s` -> %r", command, output)
        parts.append(_unescape(token[pos:start]))
        parts.append(output)
        pos = stop + 1
    parts.append(_unescape(token[pos:]))
    return "".join(parts)


# ---------------------------------------------------------------------------
# Lines
# ---------------------------------------------------------------------------

def _suggest(command: str, known: Collection[str]) -> str | None:
    matches = difflib.get_close_matches(command, list(known), n=1, cutoff=0.6)
    if matches:
        return f"Did you mean '{matches[0]}'?"
    return None


def parse_line(
    line: str,
    delimiters: Container[str] = DEFAULT_DELIMITERS,
    *,
    commands: Collection[str] | None = None,
    runner: Runner | None = None,
) -> ParsedLine | ParseError | None:
    """Parse one config line into a :class:`ParsedLine`.

    Parameters
    ----------
    line : str
        The raw line, e.g. ``'browser "firefox %u" # comment'``.
    commands : Collection[str] | None
        Known command names. When given, any other command yields a
        :class:`ParseError`.
    runner : Callable[[str], str] | None
        When given, arguments have their backtick spans evaluated with it.

    Returns
    -------
    ParsedLine | ParseError | None
        ``None`` for blank and comment-only lines.
    """
    raw = line.rstrip("\r\n")
    tokens = tokenize_quoted(raw, delimiters)
    if not tokens:
        return None

    command, args = tokens[0], tokens[1:]
    if commands is not None and command not in commands:
        return ParseError(
            error=f"unknown command {command!r}",
            raw=raw,
            suggestion=_suggest(command, commands),
        )

    if runner is not None:
        args = [evaluate_backticks(arg, runner) for arg in args]
    return ParsedLine(command=command, raw=raw, args=args)


def parse_lines(
    lines: Iterable[str],
    delimiters: Container[str] = DEFAULT_DELIMITERS,
    *,
    commands: Collection[str] | None = None,
    runner: Runner | None = None,
) -> list[ParsedLine | ParseError]:
    """Parse *lines*, skipping blanks and comments, numbering results from 1."""
    results: list[ParsedLine | ParseError] = []
    for number, line in enumerate(lines, 1):
        result = parse_line(line, delimiters, commands=commands, runner=runner)
        if result is None:
            continue
        result.line_number = number
        results.append(result)
    return results


def read_text_file(path: str | os.PathLike[str]) -> list[str]:
    """Read a UTF-8 text file and return its lines without terminators.

    Raises
    ------
    ReadError
        ``kind="open"`` if the file cannot be opened, ``kind="line"`` (with
        ``line_number``) if a line is not valid UTF-8.
    """
    try:
        with open(path, "rb") as fh:
            raw_lines = fh.read().splitlines()
    except OSError as exc:
        raise ReadError(f"Failed to open file ({exc.strerror or exc})", kind="open") from exc

    lines: list[str] = []
    for number, raw in enumerate(raw_lines, 1):
        try:
            lines.append(raw.decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise ReadError(
                f"Failed to read line {number} ({exc.reason})",
                kind="line",
                line_number=number,
            ) from exc
    return lines


def parse_file(
    path: str | os.PathLike[str],
    delimiters: Container[str] = DEFAULT_DELIMITERS,
    *,
    commands: Collection[str] | None = None,
    runner: Runner | None = None,
) -> list[ParsedLine | ParseError]:
    """Read *path* with :func:`read_text_file` and parse every line."""
    return parse_lines(read_text_file(path), delimiters, commands=commands, runner=runner)


def split_command(command: str) -> list[str]:
    """Split a command string into an argv list, honoring double quotes.

    >>> split_command('mpv --title "My Feed" http://x')
    ['mpv', '--title', 'My Feed', 'http://x']
    """
    return tokenize_quoted(command, DEFAULT_DELIMITERS)
