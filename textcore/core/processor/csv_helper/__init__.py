# textcore/core/processor/csv_helper/__init__.py
"""
CSV Helper Module

Delimited text (CSV/TSV) support for table mode.

Module layout:
- csv_constants: constants and DelimiterConfig
- csv_parser: parsing, serialization, grid normalization, delimiter detection
- csv_table_processor: column names, header labels, selection copy
- csv_table_filter: row filtering
"""

# Constants
from textcore.core.processor.csv_helper.csv_constants import (
    DELIMITER_CANDIDATES,
    DELIMITER_NAMES,
    DEFAULT_DELIMITER_CONFIG,
    TSV_DELIMITER_CONFIG,
    DelimiterConfig,
)

# Parser
from textcore.core.processor.csv_helper.csv_parser import (
    Grid,
    DelimitedTextCodec,
    parse,
    parse_normalized,
    serialize,
    normalize,
    max_column_count,
    needs_quoting,
    quote_field,
    detect_delimiter,
    delimiter_for_filename,
)

# Table Processor
from textcore.core.processor.csv_helper.csv_table_processor import (
    CSVTableProcessor,
    CSVTableProcessorConfig,
    column_name,
    header_labels,
    format_selection,
)

# Table Filter
from textcore.core.processor.csv_helper.csv_table_filter import (
    FilterType,
    filter_rows,
    matches_filter,
)

__all__ = [
    # Constants
    "DELIMITER_CANDIDATES",
    "DELIMITER_NAMES",
    "DEFAULT_DELIMITER_CONFIG",
    "TSV_DELIMITER_CONFIG",
    "DelimiterConfig",
    # Parser
    "Grid",
    "DelimitedTextCodec",
    "parse",
    "parse_normalized",
    "serialize",
    "normalize",
    "max_column_count",
    "needs_quoting",
    "quote_field",
    "detect_delimiter",
    "delimiter_for_filename",
    # Table Processor
    "CSVTableProcessor",
    "CSVTableProcessorConfig",
    "column_name",
    "header_labels",
    "format_selection",
    # Table Filter
    "FilterType",
    "filter_rows",
    "matches_filter",
]
