# textcore/core/processor/__init__.py
"""
Processor - Editor text processing helpers

Helper modules (subdirectories):
- encoding_helper/: encoding detection, decode/encode, newlines, character info
- csv_helper/: delimited text parsing, table presentation, row filters
- search_helper/: text and table find/replace

Usage:
    from textcore.core.processor.encoding_helper import detect_encoding
    from textcore.core.processor.csv_helper import parse, serialize
    from textcore.core.processor.search_helper import TextSearchEngine
"""

from textcore.core.processor import encoding_helper
from textcore.core.processor import csv_helper
from textcore.core.processor import search_helper

__all__ = [
    "encoding_helper",
    "csv_helper",
    "search_helper",
]
