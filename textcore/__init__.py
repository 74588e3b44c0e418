# textcore/__init__.py
"""
textcore

Text core of a text/table editor.

Package structure:
- core: core modules
    - TextProcessor: open bytes, decode, convert to/from a grid, save
    - processor: encoding detection, CSV/TSV codec, text and table search
    - functions: errors, encoding interface, matchers

Usage:
    from textcore import TextProcessor, SearchOptions, TextSearchEngine
    from textcore.core.processor.encoding_helper import detect_encoding
"""

__version__ = "1.0.0"

from textcore.core import Document, TextProcessor, setup_logging
from textcore.core.functions import (
    TextCoreError,
    InvalidPattern,
    SearchTimeout,
    InvalidDelimiterConfig,
    ColumnOutOfRange,
    SearchOptions,
    MatchLocation,
    TextCursor,
    CellLocation,
)
from textcore.core.processor.encoding_helper import (
    EncodingKind,
    DetectionResult,
    NewLineType,
    detect_encoding,
)
from textcore.core.processor.csv_helper import DelimiterConfig, parse, serialize, normalize
from textcore.core.processor.search_helper import TextSearchEngine, TabularSearchEngine

from textcore import core

__all__ = [
    "__version__",
    # Facade
    "Document",
    "TextProcessor",
    "setup_logging",
    # Errors
    "TextCoreError",
    "InvalidPattern",
    "SearchTimeout",
    "InvalidDelimiterConfig",
    "ColumnOutOfRange",
    # Encoding
    "EncodingKind",
    "DetectionResult",
    "NewLineType",
    "detect_encoding",
    # Delimited text
    "DelimiterConfig",
    "parse",
    "serialize",
    "normalize",
    # Search
    "SearchOptions",
    "MatchLocation",
    "TextCursor",
    "CellLocation",
    "TextSearchEngine",
    "TabularSearchEngine",
    # Subpackage
    "core",
]
