# textcore/core/processor/csv_helper/csv_table_filter.py
"""
CSV Table Filter - Row filtering for table mode

Selects the data rows whose cells satisfy a simple condition. String
conditions compare case-insensitively, one code point at a time (see
fold_case); length conditions take an integer threshold. Filtering never
modifies the grid; it returns row indices so that edits made through a
filtered view land on the right rows.
"""
import logging
from enum import Enum
from typing import List, Optional

from textcore.core.functions.errors import ColumnOutOfRange
from textcore.core.functions.matcher import fold_case
from textcore.core.processor.csv_helper.csv_parser import Grid, max_column_count

logger = logging.getLogger("text-core.CSV")


class FilterType(Enum):
    """Row filter conditions."""
    EQUALS = "equals"
    CONTAINS = "contains"
    STARTS_WITH = "starts_with"
    ENDS_WITH = "ends_with"
    LENGTH_AT_LEAST = "length_at_least"
    LENGTH_AT_MOST = "length_at_most"

    @property
    def is_length(self) -> bool:
        return self in (FilterType.LENGTH_AT_LEAST, FilterType.LENGTH_AT_MOST)


def _parse_length(value: str) -> Optional[int]:
    try:
        return int(value.strip())
    except ValueError:
        return None


def matches_filter(cell_value: Optional[str], value: str, filter_type: FilterType) -> bool:
    """
    Check one cell against a filter condition.

    Args:
        cell_value: Cell text (None is treated as empty)
        value: Filter text, or an integer threshold for length filters
        filter_type: Condition to apply

    Returns:
        True if the cell satisfies the condition
    """
    cell_value = cell_value or ""

    if filter_type.is_length:
        threshold = _parse_length(value)
        if threshold is None:
            return False
        if filter_type is FilterType.LENGTH_AT_LEAST:
            return len(cell_value) >= threshold
        return len(cell_value) <= threshold

    cell = fold_case(cell_value)
    needle = fold_case(value)

    if filter_type is FilterType.EQUALS:
        return cell == needle
    if filter_type is FilterType.CONTAINS:
        return needle in cell
    if filter_type is FilterType.STARTS_WITH:
        return cell.startswith(needle)
    if filter_type is FilterType.ENDS_WITH:
        return cell.endswith(needle)
    return True


def filter_rows(
    grid: Grid,
    value: str,
    filter_type: FilterType = FilterType.CONTAINS,
    column: Optional[int] = None,
    first_row_as_header: bool = False,
) -> List[int]:
    """
    Find the data rows matching a filter.

    Args:
        grid: Rows of fields
        value: Filter text or length threshold
        filter_type: Condition to apply
        column: Column to test, or None for any column
        first_row_as_header: Skip row 0

    Returns:
        Indices (into grid) of matching rows, in order. An empty value
        with a string condition matches every data row.
    """
    start = 1 if first_row_as_header else 0

    if column is not None:
        width = max_column_count(grid)
        if column < 0 or column >= width:
            raise ColumnOutOfRange(column, width)

    if not value and not filter_type.is_length:
        return list(range(start, len(grid)))

    matched = []
    for row_index in range(start, len(grid)):
        row = grid[row_index]
        if column is None:
            hit = any(matches_filter(cell, value, filter_type) for cell in row)
        else:
            hit = column < len(row) and matches_filter(row[column], value, filter_type)
        if hit:
            matched.append(row_index)

    logger.debug(
        f"Filter {filter_type.value} {value!r}: {len(matched)}/{max(0, len(grid) - start)} rows"
    )
    return matched
