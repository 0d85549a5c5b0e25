"""Parser package — split config lines and command strings into tokens."""

from confsplit.parser.commands import (
    ParsedLine,
    ParseError,
    evaluate_backticks,
    parse_file,
    parse_line,
    parse_lines,
    read_text_file,
    split_command,
)
from confsplit.parser.text import (
    consolidate_whitespace,
    quote,
    quote_if_necessary,
    replace_pairs,
    strip_comments,
)
from confsplit.parser.tokenizer import (
    Cursor,
    append_escape,
    decode_escape,
    extract_one,
    split,
    split_counting_lines,
    split_preserving_spacing,
    tokenize_quoted,
)

__all__ = [
    "split",
    "split_preserving_spacing",
    "split_counting_lines",
    "tokenize_quoted",
    "extract_one",
    "decode_escape",
    "append_escape",
    "Cursor",
    "parse_line",
    "parse_lines",
    "parse_file",
    "read_text_file",
    "split_command",
    "evaluate_backticks",
    "ParsedLine",
    "ParseError",
    "strip_comments",
    "consolidate_whitespace",
    "replace_pairs",
    "quote",
    "quote_if_necessary",
]
