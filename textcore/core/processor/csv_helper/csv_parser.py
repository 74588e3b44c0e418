# textcore/core/processor/csv_helper/csv_parser.py
"""
CSV Parser - Delimited text parsing and serialization

Converts between delimited text (CSV/TSV) and a grid of string fields.

Format:
- Records are separated by '\\n' ('\\r\\n' and '\\r' are normalized first)
- Fields are separated by a single-character delimiter
- With quoting enabled, a field may be wrapped in the quote character;
  inside quotes the delimiter and '\\n' are literal and a doubled quote
  is one literal quote
- There is no header at the format level; header treatment is up to the
  caller (row 0)

The quote-aware scanner runs over the whole buffer, so quoted fields may
span lines. Parsing is best-effort and never raises on content: an
unterminated quote runs to the end of the input.

Usage:
    from textcore.core.processor.csv_helper.csv_parser import parse, serialize

    rows = parse('name,age\\n"Smith, John",30\\n')
    # [['name', 'age'], ['Smith, John', '30']]
    text = serialize(rows)
"""
import logging
import os
from typing import List, Optional

from textcore.core.processor.csv_helper.csv_constants import (
    DEFAULT_DELIMITER,
    DEFAULT_DELIMITER_CONFIG,
    DELIMITER_CANDIDATES,
    DETECTION_SAMPLE_LINES,
    EXTENSION_DELIMITERS,
    DelimiterConfig,
)

logger = logging.getLogger("text-core.CSV")

Grid = List[List[str]]


# ============================================================================
# Parsing
# ============================================================================

def parse(text: str, config: Optional[DelimiterConfig] = None) -> Grid:
    """
    Parse delimited text into rows of fields.

    A single trailing empty line left by a final line terminator is
    dropped, unless it is the only line ("\\n" parses to [[""]]).

    Args:
        text: Delimited text
        config: Delimiter settings (default: comma, double-quote)

    Returns:
        List of rows; rows may have different lengths (see normalize)
    """
    config = config or DEFAULT_DELIMITER_CONFIG

    if not text:
        return []

    text = text.replace("\r\n", "\n").replace("\r", "\n")

    if config.use_quotes:
        rows = _parse_quoted(text, config.delimiter, config.quote_char)
    else:
        rows = _parse_unquoted(text, config.delimiter)

    logger.debug(f"Parsed {len(rows)} rows with delimiter {config.delimiter!r}")
    return rows


def _parse_unquoted(text: str, delimiter: str) -> Grid:
    lines = text.split("\n")
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return [line.split(delimiter) for line in lines]


def _parse_quoted(text: str, delimiter: str, quote: str) -> Grid:
    rows: Grid = []
    row: List[str] = []
    field: List[str] = []
    in_quotes = False
    # Whether anything has been consumed since the last record ended
    pending = False

    i = 0
    length = len(text)

    while i < length:
        c = text[i]

        if in_quotes:
            if c == quote:
                if i + 1 < length and text[i + 1] == quote:
                    field.append(quote)
                    i += 2
                    continue
                in_quotes = False
            else:
                field.append(c)
        elif c == quote:
            in_quotes = True
            pending = True
        elif c == delimiter:
            row.append("".join(field))
            field = []
            pending = True
        elif c == "\n":
            row.append("".join(field))
            rows.append(row)
            row = []
            field = []
            pending = False
        else:
            field.append(c)
            pending = True

        i += 1

    if pending or not rows:
        row.append("".join(field))
        rows.append(row)

    return rows


def parse_normalized(text: str, config: Optional[DelimiterConfig] = None) -> Grid:
    """Parse and pad to a rectangular grid."""
    return normalize(parse(text, config))


# ============================================================================
# Serialization
# ============================================================================

def needs_quoting(value: str, config: DelimiterConfig) -> bool:
    """Check whether a field must be quoted to survive a parse."""
    if not value:
        return False
    return (
        config.delimiter in value
        or config.quote_char in value
        or "\n" in value
        or "\r" in value
    )


def quote_field(value: str, config: DelimiterConfig) -> str:
    """Quote a field if needed, doubling embedded quote characters."""
    if not config.use_quotes or not needs_quoting(value, config):
        return value
    q = config.quote_char
    return q + value.replace(q, q + q) + q


def serialize(grid: Grid, config: Optional[DelimiterConfig] = None) -> str:
    """
    Serialize rows to delimited text.

    Rows are joined with '\\n' without a trailing terminator. A row made of
    a single empty field is written as an empty quoted field when quoting
    is enabled, so that it is not mistaken for a trailing empty line.

    Args:
        grid: Rows of fields (None fields are written as empty)
        config: Delimiter settings

    Returns:
        Delimited text
    """
    config = config or DEFAULT_DELIMITER_CONFIG

    if not grid:
        return ""

    lines = []
    for row in grid:
        fields = ["" if value is None else str(value) for value in row]
        if config.use_quotes and len(fields) == 1 and fields[0] == "":
            lines.append(config.quote_char * 2)
            continue
        lines.append(config.delimiter.join(quote_field(value, config) for value in fields))

    return "\n".join(lines)


# ============================================================================
# Grid shape
# ============================================================================

def max_column_count(grid: Grid) -> int:
    """Return the largest field count of any row (0 for an empty grid)."""
    return max((len(row) for row in grid), default=0)


def normalize(grid: Grid) -> Grid:
    """
    Return a rectangular copy of the grid.

    Every row is right-padded with empty fields up to max_column_count.
    The input grid is not modified.
    """
    width = max_column_count(grid)
    return [list(row) + [""] * (width - len(row)) for row in grid]


# ============================================================================
# Delimiter detection
# ============================================================================

def detect_delimiter(text: str, candidates: Optional[List[str]] = None) -> str:
    """
    Guess the delimiter of delimited text.

    Each candidate is scored on the first non-empty lines by how many
    lines share the first line's occurrence count, then by that count.
    Candidates absent from the first line are skipped.

    Args:
        text: Delimited text
        candidates: Delimiters to consider (default: , TAB ; |)

    Returns:
        Best delimiter, ',' when nothing matches
    """
    candidates = candidates or DELIMITER_CANDIDATES
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = [line for line in text.split("\n") if line.strip()][:DETECTION_SAMPLE_LINES]

    if not lines:
        return DEFAULT_DELIMITER

    best = DEFAULT_DELIMITER
    best_score = (0, 0)

    for candidate in candidates:
        counts = [line.count(candidate) for line in lines]
        if counts[0] == 0:
            continue
        consistent = sum(1 for count in counts if count == counts[0])
        score = (consistent, counts[0])
        if score > best_score:
            best = candidate
            best_score = score

    logger.debug(f"Detected delimiter {best!r} (score={best_score})")
    return best


def delimiter_for_filename(filename: str) -> Optional[str]:
    """Return the delimiter implied by a .csv/.tsv extension, else None."""
    ext = os.path.splitext(filename)[1].lower()
    return EXTENSION_DELIMITERS.get(ext)


# ============================================================================
# Codec Class
# ============================================================================

class DelimitedTextCodec:
    """Delimited text codec bound to one DelimiterConfig.

    Usage:
        codec = DelimitedTextCodec(DelimiterConfig(delimiter='\\t'))
        grid = codec.parse(text)
        text = codec.serialize(grid)
    """

    def __init__(self, config: Optional[DelimiterConfig] = None):
        self.config = config or DelimiterConfig()

    def parse(self, text: str) -> Grid:
        return parse(text, self.config)

    def parse_normalized(self, text: str) -> Grid:
        return parse_normalized(text, self.config)

    def serialize(self, grid: Grid) -> str:
        return serialize(grid, self.config)

    @staticmethod
    def normalize(grid: Grid) -> Grid:
        return normalize(grid)

    @staticmethod
    def max_column_count(grid: Grid) -> int:
        return max_column_count(grid)
