# textcore/core/processor/search_helper/__init__.py
"""
Search Helper Module

Find and replace for text mode and table mode.

Module layout:
- text_search: TextSearchEngine over flat text with a caller-owned cursor
- table_search: TabularSearchEngine over grid cells with a last-row cursor
"""

from textcore.core.processor.search_helper.text_search import (
    ReplaceResult,
    TextSearchEngine,
)
from textcore.core.processor.search_helper.table_search import (
    TableReplaceResult,
    TabularSearchEngine,
)

__all__ = [
    "ReplaceResult",
    "TextSearchEngine",
    "TableReplaceResult",
    "TabularSearchEngine",
]
