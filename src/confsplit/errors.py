"""Custom exception hierarchy for confsplit."""

from __future__ import annotations


class ConfsplitError(Exception):
    """Base exception for all confsplit errors."""


class ValidationError(ConfsplitError, ValueError):
    """Invalid caller input (encoding name, HTTP method, auth method, etc.).

    Subclasses both ConfsplitError and ValueError so plain
    ``except ValueError`` handlers keep working.
    """


class ReadError(ConfsplitError):
    """A configuration file could not be opened or one of its lines decoded."""

    def __init__(self, message: str, *, kind: str, line_number: int | None = None) -> None:
        self.kind = kind  # "open" or "line"
        self.line_number = line_number
        super().__init__(message)


class FetchError(ConfsplitError):
    """HTTP retrieval failed."""
