"""Reference card returned by the ``confsplit_help`` tool."""

from __future__ import annotations

REFERENCE_CARD = """\
confsplit reference

MODES (tokenize tool)
  plain   split on delimiter runs, drop them        "a  b" -> [a, b]
  spaced  keep delimiter runs as tokens              "a  b" -> [a, "  ", b]
  lines   one "\\n" token per delimiter character     "a\\n\\nb" (delims "\\n") -> [a, \\n, \\n, b]
  quoted  honor "double quotes", escapes, # comments 'x "a b" # c' -> [x, a b]

QUOTED TOKENS
  "..."   one token, may be empty, may touch other text
  \\n \\r \\t \\" \\\\   decoded inside quotes; any other \\c gives c
  \\`     kept escaped for backtick evaluation
  #       at any token start drops the rest of the line
  an unterminated quote closes at end of input

DELIMITERS
  default: space and tab (CONFSPLIT_DELIMITERS to change)

RESPONSE PREFIXES (parse_config tool)
  +  parsed command      !  error, with optional "try:" hint
"""
