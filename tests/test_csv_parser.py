"""Tests for delimited text parsing and serialization."""
import pytest

from textcore.core.functions.errors import InvalidDelimiterConfig
from textcore.core.processor.csv_helper import (
    DelimitedTextCodec,
    DelimiterConfig,
    delimiter_for_filename,
    detect_delimiter,
    max_column_count,
    normalize,
    parse,
    parse_normalized,
    serialize,
)


class TestParse:
    """Delimited text -> rows"""

    def test_quoted_field_with_delimiter(self):
        """A quoted comma stays inside the field."""
        rows = parse('name,age\n"Smith, John",30\n', DelimiterConfig(','))
        assert rows == [["name", "age"], ["Smith, John", "30"]]

    def test_empty_text(self):
        assert parse("") == []

    def test_single_newline(self):
        """A lone empty line is kept as one empty field."""
        assert parse("\n") == [[""]]

    def test_only_one_trailing_line_dropped(self):
        assert parse("a\n\n") == [["a"], [""]]

    def test_no_trailing_newline(self):
        assert parse("a,b\nc,d") == [["a", "b"], ["c", "d"]]

    def test_crlf_and_cr_are_normalized(self):
        assert parse("a,b\r\nc,d\re,f\r\n") == [["a", "b"], ["c", "d"], ["e", "f"]]

    def test_doubled_quote(self):
        assert parse('"say ""hi""",x') == [['say "hi"', "x"]]

    def test_quoted_newline_spans_lines(self):
        assert parse('"line1\nline2",b\nc,d') == [["line1\nline2", "b"], ["c", "d"]]

    def test_unterminated_quote_runs_to_end(self):
        assert parse('a,"open\nstill open') == [["a", "open\nstill open"]]

    def test_empty_fields(self):
        assert parse(",,\n") == [["", "", ""]]

    def test_ragged_rows_are_kept(self):
        assert parse("a,b,c\nd") == [["a", "b", "c"], ["d"]]

    def test_quotes_disabled(self):
        config = DelimiterConfig(',', use_quotes=False)
        assert parse('"a,b",c\n', config) == [['"a', 'b"', "c"]]

    def test_tab_delimiter(self):
        assert parse("a\tb\n1\t2\n", DelimiterConfig('\t')) == [["a", "b"], ["1", "2"]]

    def test_custom_quote_char(self):
        config = DelimiterConfig(';', quote_char="'")
        assert parse("'x;y';z", config) == [["x;y", "z"]]


class TestSerialize:
    """Rows -> delimited text"""

    def test_plain(self):
        assert serialize([["a", "b"], ["c", "d"]]) == "a,b\nc,d"

    def test_quotes_delimiter_quote_and_newline(self):
        """Fields with special characters are quoted, quotes doubled."""
        value = 'x,"y"\nz'
        text = serialize([[value]])
        assert text == '"x,""y""\nz"'
        assert parse(text) == [[value]]

    def test_empty_fields_unquoted(self):
        assert serialize([["", "a", ""]]) == ",a,"

    def test_single_empty_field_row(self):
        assert serialize([["a"], [""]]) == 'a\n""'
        assert parse(serialize([["a"], [""]])) == [["a"], [""]]

    def test_none_written_empty(self):
        assert serialize([["a", None]]) == "a,"

    def test_quotes_disabled_verbatim(self):
        config = DelimiterConfig(',', use_quotes=False)
        assert serialize([['a"b', "c"]], config) == 'a"b,c'

    def test_empty_grid(self):
        assert serialize([]) == ""


class TestRoundTrip:
    """parse(serialize(grid)) reproduces the grid."""

    @pytest.mark.parametrize("config", [
        DelimiterConfig(','),
        DelimiterConfig('\t'),
        DelimiterConfig(';', quote_char="'"),
        DelimiterConfig('|'),
    ])
    def test_round_trip(self, config):
        grid = [
            ["id", "name", "note"],
            ["1", "Smith, John", 'said "hi"'],
            ["2", "", "tab\there"],
            ["3", "a;b|c", "it's"],
        ]
        assert parse(serialize(grid, config), config) == grid

    def test_round_trip_normalized(self):
        grid = [["a", "b", "c"], ["d"]]
        assert normalize(parse(serialize(grid))) == normalize(grid)


class TestNormalize:
    """Rectangular grids"""

    def test_pads_short_rows(self):
        grid = [["a", "b", "c"], ["d"], []]
        assert normalize(grid) == [["a", "b", "c"], ["d", "", ""], ["", "", ""]]

    def test_does_not_mutate_input(self):
        grid = [["a", "b"], ["c"]]
        normalize(grid)
        assert grid == [["a", "b"], ["c"]]

    def test_max_column_count(self):
        assert max_column_count([["a"], ["b", "c", "d"], []]) == 3
        assert max_column_count([]) == 0

    def test_parse_normalized(self):
        assert parse_normalized("a,b\nc") == [["a", "b"], ["c", ""]]


class TestDelimiterConfig:
    """Configuration validation"""

    def test_delimiter_equals_quote(self):
        with pytest.raises(InvalidDelimiterConfig):
            DelimiterConfig('"', use_quotes=True, quote_char='"')

    def test_delimiter_equals_quote_without_quoting(self):
        DelimiterConfig("'", use_quotes=False, quote_char="'")

    @pytest.mark.parametrize("delimiter", ["", ",,", "\n"])
    def test_bad_delimiter(self, delimiter):
        with pytest.raises(ValueError):
            DelimiterConfig(delimiter)

    def test_delimiter_name(self):
        assert DelimiterConfig('\t').delimiter_name == "Tab (\\t)"


class TestDelimiterDetection:
    """Delimiter guessing"""

    def test_comma(self):
        assert detect_delimiter("a,b,c\n1,2,3\n") == ","

    def test_tab(self):
        assert detect_delimiter("a\tb, c\n1\t2, 3\n4\t5\n") == "\t"

    def test_semicolon(self):
        assert detect_delimiter("a;b;c\n1;2;3") == ";"

    def test_default(self):
        assert detect_delimiter("") == ","
        assert detect_delimiter("plain words") == ","

    def test_from_filename(self):
        assert delimiter_for_filename("data.TSV") == "\t"
        assert delimiter_for_filename("data.csv") == ","
        assert delimiter_for_filename("notes.txt") is None


class TestCodec:
    """DelimitedTextCodec binds a config"""

    def test_tsv(self):
        codec = DelimitedTextCodec(DelimiterConfig('\t'))
        grid = codec.parse_normalized("a\tb\nc")
        assert grid == [["a", "b"], ["c", ""]]
        assert codec.serialize(grid) == "a\tb\nc\t"
