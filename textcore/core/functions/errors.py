# textcore/core/functions/errors.py
"""
Errors - Exception types raised by the text core

All exceptions derive from TextCoreError so callers (the UI layer) can catch
the whole family at once, while each one also derives from the closest
built-in exception so generic handlers keep working.

Taxonomy:
- InvalidPattern: regular expression failed to compile
- SearchTimeout: regular expression evaluation exceeded its time bound
- InvalidDelimiterConfig: delimiter/quote configuration is unusable
- ColumnOutOfRange: column-scoped search targeted a column the grid lacks

Encoding detection and delimited-text parsing never raise on content:
an undetected encoding is reported through DetectionResult.detected and
every string parses to some grid.
"""
from typing import Optional


class TextCoreError(Exception):
    """Base class for all text core errors."""
    pass


class InvalidPattern(TextCoreError, ValueError):
    """
    Raised when a search pattern cannot be compiled as a regular expression.

    Attributes:
        pattern: The offending pattern string
        message: Syntax error message from the regex engine
    """

    def __init__(self, pattern: str, message: str):
        self.pattern = pattern
        self.message = message
        super().__init__(f"Invalid regular expression {pattern!r}: {message}")


class SearchTimeout(TextCoreError, TimeoutError):
    """
    Raised when regex evaluation exceeds its wall-clock bound.

    Nothing is mutated by the operation that timed out.

    Attributes:
        pattern: The pattern being evaluated
        timeout: The bound in seconds
    """

    def __init__(self, pattern: str, timeout: Optional[float]):
        self.pattern = pattern
        self.timeout = timeout
        super().__init__(f"Search for {pattern!r} timed out after {timeout} seconds")


class InvalidDelimiterConfig(TextCoreError, ValueError):
    """Raised when a DelimiterConfig is not usable."""
    pass


class ColumnOutOfRange(TextCoreError, IndexError):
    """Raised when a target column lies outside the grid."""

    def __init__(self, column: int, column_count: int):
        self.column = column
        self.column_count = column_count
        super().__init__(f"Column {column} out of range (grid has {column_count} columns)")


__all__ = [
    "TextCoreError",
    "InvalidPattern",
    "SearchTimeout",
    "InvalidDelimiterConfig",
    "ColumnOutOfRange",
]
