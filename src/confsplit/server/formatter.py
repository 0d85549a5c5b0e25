"""Compact response formatting for confsplit tool outputs."""

from __future__ import annotations

from confsplit.parser.commands import ParsedLine, ParseError
from confsplit.parser.text import quote_if_necessary


def format_result(
    success: bool,
    message: str,
    suggestion: str | None = None,
) -> str:
    """Render one ``parse_config`` response line.

    Accepted lines start with ``+``; rejected lines start with ``!`` and may
    carry a second, indented ``try:`` line naming the closest known command.
    """
    if success:
        return f"+ {message}"
    line = f"! {message}"
    if suggestion:
        line += f"\n  try: {suggestion}"
    return line


def format_parsed(result: ParsedLine | ParseError) -> str:
    """Format one parsed config line, re-quoting arguments where needed."""
    if isinstance(result, ParseError):
        where = f"line {result.line_number}: " if result.line_number else ""
        return format_result(False, f"{where}{result.error}", result.suggestion)
    parts = [result.command, *(quote_if_necessary(arg) for arg in result.args)]
    return format_result(True, " ".join(parts))


def format_parsed_lines(results: list[ParsedLine | ParseError]) -> str:
    """Format a batch of parse results, one line each."""
    if not results:
        return "No commands."
    return "\n".join(format_parsed(r) for r in results)
