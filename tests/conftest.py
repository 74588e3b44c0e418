"""
Pytest fixtures for textcore tests
"""
import logging

import pytest

from textcore import TextProcessor
from textcore.core.processor.search_helper import TabularSearchEngine, TextSearchEngine


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """Show only errors from text-core loggers during tests"""
    logging.getLogger("text-core").setLevel(logging.ERROR)
    yield


@pytest.fixture
def text_engine():
    return TextSearchEngine()


@pytest.fixture
def table_engine():
    return TabularSearchEngine()


@pytest.fixture
def processor():
    return TextProcessor()


@pytest.fixture
def city_grid():
    """Small normalized grid with a header row"""
    return [
        ["name", "city", "note"],
        ["Alice", "Tokyo", "tokyo tower"],
        ["Bob", "Osaka", ""],
        ["Carol", "Kyoto", "near Tokyo"],
    ]
