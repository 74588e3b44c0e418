"""Tests for column-scoped find/replace over grids."""
import copy

import pytest

from textcore.core.functions.errors import ColumnOutOfRange, SearchTimeout
from textcore.core.functions.matcher import CellLocation, SearchOptions


class TestFindNextRow:
    """Row-cursor search with wraparound"""

    def test_first_hit(self, table_engine, city_grid):
        location = table_engine.find_next_row(city_grid, -1, None, SearchOptions("tokyo"))
        assert location == CellLocation(1, 1)

    def test_next_row(self, table_engine, city_grid):
        location = table_engine.find_next_row(city_grid, 1, None, SearchOptions("tokyo"))
        assert location == CellLocation(3, 2)

    def test_wraps_to_top(self, table_engine, city_grid):
        location = table_engine.find_next_row(city_grid, 3, None, SearchOptions("tokyo"))
        assert location == CellLocation(1, 1)

    def test_single_matching_row_found_again(self, table_engine, city_grid):
        location = table_engine.find_next_row(city_grid, 2, None, SearchOptions("osaka"))
        assert location == CellLocation(2, 1)

    def test_target_column(self, table_engine, city_grid):
        location = table_engine.find_next_row(city_grid, -1, 2, SearchOptions("tokyo"))
        assert location == CellLocation(1, 2)

    def test_case_sensitive(self, table_engine, city_grid):
        options = SearchOptions("Tokyo", case_sensitive=True)
        assert table_engine.find_next_row(city_grid, -1, 2, options) == CellLocation(3, 2)

    def test_regex(self, table_engine, city_grid):
        options = SearchOptions("^k", use_regex=True)
        assert table_engine.find_next_row(city_grid, -1, None, options) == CellLocation(3, 1)

    def test_not_found(self, table_engine, city_grid):
        assert table_engine.find_next_row(city_grid, -1, None, SearchOptions("nagoya")) is None

    def test_column_out_of_range(self, table_engine, city_grid):
        with pytest.raises(ColumnOutOfRange):
            table_engine.find_next_row(city_grid, -1, 5, SearchOptions("x"))

    def test_empty_grid_and_pattern(self, table_engine, city_grid):
        assert table_engine.find_next_row([], -1, None, SearchOptions("x")) is None
        assert table_engine.find_next_row(city_grid, -1, None, SearchOptions("")) is None

    def test_location_unpacks(self, table_engine, city_grid):
        row, column = table_engine.find_next_row(city_grid, -1, None, SearchOptions("bob"))
        assert (row, column) == (2, 0)


class TestReplaceCurrentCell:
    """Rewrite the current cell, then advance"""

    def test_replaces_whole_cell_value(self, table_engine, city_grid):
        result = table_engine.replace_current_cell(
            city_grid, CellLocation(1, 2), None, SearchOptions("tokyo"), "Osaka"
        )
        assert result.replaced is True
        assert city_grid[1][2] == "Osaka tower"
        assert result.next_location == CellLocation(3, 2)

    def test_every_match_in_cell_is_replaced(self, table_engine):
        grid = [["a-a-a"]]
        table_engine.replace_current_cell(grid, CellLocation(0, 0), None, SearchOptions("A"), "b")
        assert grid == [["b-b-b"]]

    def test_cell_without_match_untouched(self, table_engine, city_grid):
        before = copy.deepcopy(city_grid)
        result = table_engine.replace_current_cell(
            city_grid, CellLocation(2, 0), None, SearchOptions("tokyo"), "Edo"
        )
        assert result.replaced is False
        assert city_grid == before
        assert result.next_location == CellLocation(3, 2)

    def test_no_current_cell(self, table_engine, city_grid):
        result = table_engine.replace_current_cell(city_grid, None, None, SearchOptions("kyoto"), "x")
        assert result.replaced is False
        assert result.next_location == CellLocation(3, 1)

    def test_regex_groups(self, table_engine):
        grid = [["2024-01-15"]]
        options = SearchOptions(r"(\d+)-(\d+)-(\d+)", use_regex=True)
        table_engine.replace_current_cell(grid, CellLocation(0, 0), None, options, r"\3.\2.\1")
        assert grid == [["15.01.2024"]]


class TestReplaceAllCells:
    """Replace in every cell of the column range"""

    def test_all_columns(self, table_engine, city_grid):
        count = table_engine.replace_all_cells(city_grid, None, SearchOptions("tokyo"), "Edo")
        assert count == 3
        assert city_grid[1] == ["Alice", "Edo", "Edo tower"]
        assert city_grid[3][2] == "near Edo"

    def test_target_column(self, table_engine, city_grid):
        count = table_engine.replace_all_cells(city_grid, 2, SearchOptions("tokyo"), "Edo")
        assert count == 2
        assert city_grid[1][1] == "Tokyo"

    def test_counts_occurrences_not_cells(self, table_engine):
        grid = [["aa a", "b"], ["a", ""]]
        assert table_engine.replace_all_cells(grid, None, SearchOptions("a"), "x") == 4
        assert grid == [["xx x", "b"], ["x", ""]]

    def test_matches_do_not_cross_cells(self, table_engine):
        grid = [["a", "b"]]
        assert table_engine.replace_all_cells(grid, None, SearchOptions("ab"), "x") == 0

    def test_empty_pattern(self, table_engine, city_grid):
        assert table_engine.replace_all_cells(city_grid, None, SearchOptions(""), "x") == 0

    def test_timeout_leaves_grid_untouched(self, table_engine):
        grid = [["ac", "x"], ["a" * 60, "y"]]
        before = copy.deepcopy(grid)
        options = SearchOptions(r"(a|aa)+c", use_regex=True, replace_all_timeout=0.5)

        with pytest.raises(SearchTimeout) as exc_info:
            table_engine.replace_all_cells(grid, None, options, "z")
        assert exc_info.value.timeout == 0.5
        assert grid == before
