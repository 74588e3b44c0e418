# textcore/core/__init__.py
"""
Core - text core of the editor

- TextProcessor: open/save and table conversion facade
- functions: errors, encoding interface, matchers
- processor: encoding, CSV and search helpers
"""

from textcore.core.text_processor import Document, TextProcessor
from textcore.core.logging_config import setup_logging

from textcore.core import functions
from textcore.core import processor

__all__ = [
    "Document",
    "TextProcessor",
    "setup_logging",
    "functions",
    "processor",
]
