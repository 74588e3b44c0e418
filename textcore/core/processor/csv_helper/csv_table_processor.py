# textcore/core/processor/csv_helper/csv_table_processor.py
"""
CSV Table Processor - Grid presentation helpers for table mode

Handles what a table view needs from a parsed grid beyond the raw fields:
- Spreadsheet-style column names (A, B, ..., Z, AA, AB, ...)
- Header labels when row 0 is treated as a header
- Data rows (grid without the header row)
- Clipboard text for a rectangular or sparse cell selection

Usage:
    from textcore.core.processor.csv_helper.csv_table_processor import (
        CSVTableProcessor,
        CSVTableProcessorConfig,
    )

    processor = CSVTableProcessor(CSVTableProcessorConfig(first_row_as_header=True))
    labels = processor.header_labels(grid)
    text = processor.format_selection(grid, [(1, 0), (1, 1)])
"""
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from textcore.core.processor.csv_helper.csv_parser import Grid, max_column_count

logger = logging.getLogger("text-core.CSV")


# ============================================================================
# Configuration
# ============================================================================

@dataclass
class CSVTableProcessorConfig:
    """Configuration for table presentation.

    Attributes:
        first_row_as_header: Whether row 0 holds column headers
        selection_separator: Separator between cells of a copied row
    """
    first_row_as_header: bool = False
    selection_separator: str = '\t'


# ============================================================================
# Column naming
# ============================================================================

def column_name(index: int) -> str:
    """
    Spreadsheet-style column name for a zero-based index.

    0 → "A", 25 → "Z", 26 → "AA", 27 → "AB", 701 → "ZZ", 702 → "AAA"
    """
    if index < 0:
        raise ValueError(f"Column index must be non-negative, got {index}")

    name = ""
    index += 1
    while index > 0:
        index -= 1
        name = chr(ord('A') + index % 26) + name
        index //= 26
    return name


def header_labels(grid: Grid, first_row_as_header: bool = False) -> List[str]:
    """
    Column labels for a grid.

    With a header row, blank header cells fall back to the column name.
    """
    width = max_column_count(grid)
    if not first_row_as_header or not grid:
        return [column_name(col) for col in range(width)]

    header = grid[0]
    labels = []
    for col in range(width):
        text = header[col] if col < len(header) else ""
        labels.append(text if text else column_name(col))
    return labels


# ============================================================================
# Selection copy
# ============================================================================

def format_selection(
    grid: Grid,
    cells: Iterable[Tuple[int, int]],
    separator: str = '\t',
) -> str:
    """
    Format selected cells as clipboard text.

    The selection's bounding box is written row by row; unselected cells
    inside the box are empty. Single-column selections write one value per
    line. Trailing line breaks are trimmed.

    Args:
        grid: Rows of fields
        cells: Selected (row, column) pairs
        separator: Separator between cells of a row

    Returns:
        Clipboard text, "" for an empty selection
    """
    selected = {(row, col) for row, col in cells}
    if not selected:
        return ""

    min_row = min(row for row, _ in selected)
    max_row = max(row for row, _ in selected)
    min_col = min(col for _, col in selected)
    max_col = max(col for _, col in selected)

    lines = []
    for row in range(min_row, max_row + 1):
        values = []
        for col in range(min_col, max_col + 1):
            if (row, col) in selected:
                values.append(_cell_value(grid, row, col))
            else:
                values.append("")

        if max_col == min_col:
            lines.append(values[0])
        else:
            lines.append(separator.join(values))

    return "\n".join(lines).rstrip("\r\n")


def _cell_value(grid: Grid, row: int, col: int) -> str:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        value = grid[row][col]
        return "" if value is None else value
    return ""


# ============================================================================
# CSV Table Processor Class
# ============================================================================

class CSVTableProcessor:
    """Table-mode presentation of a parsed grid.

    Keeps the header-row setting so callers do not have to thread it
    through every call.
    """

    def __init__(self, config: Optional[CSVTableProcessorConfig] = None):
        """Initialize CSV table processor.

        Args:
            config: Table presentation configuration
        """
        self.config = config or CSVTableProcessorConfig()
        self.logger = logging.getLogger("text-core.CSV")

    @property
    def data_start_row(self) -> int:
        """Index of the first data row."""
        return 1 if self.config.first_row_as_header else 0

    def header_labels(self, grid: Grid) -> List[str]:
        return header_labels(grid, self.config.first_row_as_header)

    def data_rows(self, grid: Grid) -> Sequence[List[str]]:
        """Grid rows without the header row."""
        return grid[self.data_start_row:]

    def format_selection(self, grid: Grid, cells: Iterable[Tuple[int, int]]) -> str:
        text = format_selection(grid, cells, self.config.selection_separator)
        self.logger.debug(f"Formatted selection: {len(text)} chars")
        return text
