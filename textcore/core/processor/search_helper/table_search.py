# textcore/core/processor/search_helper/table_search.py
"""
Table Search - Column-scoped find and replace over a grid

TabularSearchEngine applies the matcher to cells instead of flat text.
A cell is a hit when the pattern matches anywhere inside its value, and
replacements rewrite the whole cell value (every match inside the cell
is substituted). Matches never cross cell boundaries.

The only search state is the row of the last hit, which the caller
keeps and passes back in (-1 before the first search).

Usage:
    from textcore.core.processor.search_helper.table_search import TabularSearchEngine

    engine = TabularSearchEngine()
    location = engine.find_next_row(grid, -1, None, SearchOptions("tokyo"))
    if location:
        row, column = location
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from textcore.core.functions.errors import ColumnOutOfRange
from textcore.core.functions.matcher import (
    CellLocation,
    Matcher,
    SearchOptions,
    build_matcher,
)
from textcore.core.processor.csv_helper.csv_parser import Grid, max_column_count

logger = logging.getLogger("text-core.Search")


@dataclass(frozen=True)
class TableReplaceResult:
    """Outcome of replace_current_cell."""
    replaced: bool
    next_location: Optional[CellLocation]


def _column_range(grid: Grid, target_column: Optional[int]) -> range:
    width = max_column_count(grid)
    if target_column is None:
        return range(width)
    if target_column < 0 or target_column >= width:
        raise ColumnOutOfRange(target_column, width)
    return range(target_column, target_column + 1)


def _cell(grid: Grid, row: int, column: int) -> Optional[str]:
    cells = grid[row]
    if column >= len(cells):
        return None
    value = cells[column]
    return "" if value is None else value


class TabularSearchEngine:
    """Stateless plain/regex search and replace over grid cells."""

    def find_next_row(
        self,
        grid: Grid,
        last_row: int,
        target_column: Optional[int],
        options: SearchOptions,
    ) -> Optional[CellLocation]:
        """
        Find the next cell containing a match.

        Rows after last_row are scanned first, then the scan wraps to row 0
        and continues up to and including last_row. Within a row, columns
        are scanned left to right.

        Args:
            grid: Rows of cells
            last_row: Row of the previous hit (-1 to start at row 0)
            target_column: Column to search, or None for every column
            options: Search options

        Returns:
            CellLocation of the hit, or None

        Raises:
            ColumnOutOfRange: target_column is outside the grid
            InvalidPattern: Regex does not compile
            SearchTimeout: Regex evaluation exceeded options.regex_timeout
        """
        if not options.pattern or not grid:
            return None
        columns = _column_range(grid, target_column)
        return self._find_next_row(build_matcher(options), grid, last_row, columns)

    def _find_next_row(
        self, matcher: Matcher, grid: Grid, last_row: int, columns: range
    ) -> Optional[CellLocation]:
        start = last_row + 1
        if start < 0 or start >= len(grid):
            start = 0

        location = self._find_in_rows(matcher, grid, range(start, len(grid)), columns)
        if location is None and start > 0:
            location = self._find_in_rows(matcher, grid, range(0, start), columns)
        return location

    @staticmethod
    def _find_in_rows(
        matcher: Matcher, grid: Grid, rows: range, columns: range
    ) -> Optional[CellLocation]:
        for row in rows:
            for column in columns:
                value = _cell(grid, row, column)
                if value is not None and matcher.contains(value):
                    return CellLocation(row, column)
        return None

    def replace_current_cell(
        self,
        grid: Grid,
        location: Optional[CellLocation],
        target_column: Optional[int],
        options: SearchOptions,
        replacement: str,
    ) -> TableReplaceResult:
        """
        Rewrite the current cell if it contains a match, then find the next hit.

        The grid is modified in place. The search for the next hit
        continues after location's row.

        Args:
            grid: Rows of cells
            location: Current cell (None when nothing is selected)
            target_column: Column to search next, or None for every column
            options: Search options
            replacement: Replacement text or template

        Returns:
            TableReplaceResult

        Raises:
            ColumnOutOfRange: target_column is outside the grid
            InvalidPattern: Regex or replacement template is invalid
            SearchTimeout: Regex evaluation exceeded options.regex_timeout
        """
        if not options.pattern or not grid:
            return TableReplaceResult(False, None)

        columns = _column_range(grid, target_column)
        matcher = build_matcher(options)

        replaced = False
        if location is not None and 0 <= location.row < len(grid) and location.column >= 0:
            value = _cell(grid, location.row, location.column)
            if value is not None and matcher.contains(value):
                new_value, _ = matcher.replace_all(value, replacement)
                grid[location.row][location.column] = new_value
                replaced = True
                logger.debug(f"Replaced cell ({location.row}, {location.column})")

        last_row = location.row if location is not None else -1
        next_location = self._find_next_row(matcher, grid, last_row, columns)
        return TableReplaceResult(replaced, next_location)

    def replace_all_cells(
        self,
        grid: Grid,
        target_column: Optional[int],
        options: SearchOptions,
        replacement: str,
    ) -> int:
        """
        Replace every match in every cell of the target column range.

        All cells are evaluated before any is written, so a timeout or an
        invalid replacement leaves the grid untouched.

        Returns:
            Number of occurrences replaced

        Raises:
            ColumnOutOfRange: target_column is outside the grid
            InvalidPattern: Regex or replacement template is invalid
            SearchTimeout: Regex evaluation exceeded options.replace_all_timeout
        """
        if not options.pattern or not grid:
            return 0

        columns = _column_range(grid, target_column)
        matcher = build_matcher(options, timeout=options.replace_all_timeout)

        updates: List[Tuple[int, int, str]] = []
        total = 0
        for row in range(len(grid)):
            for column in columns:
                value = _cell(grid, row, column)
                if value is None:
                    continue
                new_value, count = matcher.replace_all(value, replacement)
                if count:
                    updates.append((row, column, new_value))
                    total += count

        for row, column, new_value in updates:
            grid[row][column] = new_value

        logger.info(f"Replaced {total} occurrence(s) in {len(updates)} cell(s)")
        return total
