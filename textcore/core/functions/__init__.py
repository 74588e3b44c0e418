# textcore/core/functions/__init__.py
"""
Functions - Shared building blocks

Module layout:
- errors: exception taxonomy
- encoding: EncodingConfig and the BaseEncoder interface
- matcher: SearchOptions, positions and the plain/regex matchers
"""

from textcore.core.functions.errors import (
    TextCoreError,
    InvalidPattern,
    SearchTimeout,
    InvalidDelimiterConfig,
    ColumnOutOfRange,
)
from textcore.core.functions.encoding import (
    EncodingConfig,
    BaseEncoder,
)
from textcore.core.functions.matcher import (
    SearchOptions,
    MatchLocation,
    TextCursor,
    CellLocation,
    fold_case,
    Matcher,
    PlainMatcher,
    RegexMatcher,
    build_matcher,
)

__all__ = [
    # Errors
    "TextCoreError",
    "InvalidPattern",
    "SearchTimeout",
    "InvalidDelimiterConfig",
    "ColumnOutOfRange",
    # Encoding
    "EncodingConfig",
    "BaseEncoder",
    # Matching
    "SearchOptions",
    "MatchLocation",
    "TextCursor",
    "CellLocation",
    "fold_case",
    "Matcher",
    "PlainMatcher",
    "RegexMatcher",
    "build_matcher",
]
