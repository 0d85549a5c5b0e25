"""FastMCP tool registrations for confsplit."""

from __future__ import annotations

from collections.abc import Callable, Container

from fastmcp import FastMCP

from confsplit.config import Config
from confsplit.errors import ValidationError
from confsplit.parser.commands import parse_lines
from confsplit.parser.tokenizer import (
    split,
    split_counting_lines,
    split_preserving_spacing,
    tokenize_quoted,
)
from confsplit.server.formatter import format_parsed_lines
from confsplit.server.reference_card import REFERENCE_CARD

SPLIT_MODES: dict[str, Callable[[str, Container[str]], list[str]]] = {
    "plain": split,
    "spaced": split_preserving_spacing,
    "lines": split_counting_lines,
    "quoted": tokenize_quoted,
}


def run_tokenize(
    text: str,
    mode: str,
    delimiters: str | None,
    config: Config,
) -> list[str]:
    """Split *text* with the splitter registered under *mode*."""
    splitter = SPLIT_MODES.get(mode.lower())
    if splitter is None:
        raise ValidationError(
            f"Unknown mode {mode!r}; expected one of: {', '.join(SPLIT_MODES)}"
        )
    return splitter(text, delimiters or config.tokenizer.delimiters)


def run_parse_config(lines: list[str], config: Config) -> str:
    """Parse config *lines* and format one result line per command."""
    results = parse_lines(lines, config.tokenizer.delimiters)
    return format_parsed_lines(results)


def register_tools(mcp: FastMCP, config: Config) -> None:
    """Register the confsplit tools on the given MCP server."""

    @mcp.tool(description=REFERENCE_CARD)
    def tokenize(text: str, mode: str = "quoted", delimiters: str | None = None) -> list[str]:
        return run_tokenize(text, mode, delimiters, config)

    @mcp.tool
    def parse_config(lines: list[str]) -> str:
        """Parse config lines: 'browser "firefox %u"', 'bind-key j down # nav'.
        Backticks are not evaluated."""
        return run_parse_config(lines, config)

    @mcp.tool
    def confsplit_help() -> str:
        """Returns the confsplit reference card with all modes and quoting rules."""
        return REFERENCE_CARD
