# textcore/core/processor/csv_helper/csv_constants.py
"""
CSV Helper constants and configuration types.
"""
from dataclasses import dataclass

from textcore.core.functions.errors import InvalidDelimiterConfig


# === Delimiter constants ===

DEFAULT_DELIMITER = ','
DEFAULT_QUOTE_CHAR = '"'

# Candidates for delimiter detection
DELIMITER_CANDIDATES = [',', '\t', ';', '|']

DELIMITER_NAMES = {
    ',': 'Comma (,)',
    '\t': 'Tab (\\t)',
    ';': 'Semicolon (;)',
    '|': 'Pipe (|)',
}

# Delimiter implied by file extension
EXTENSION_DELIMITERS = {
    '.csv': ',',
    '.tsv': '\t',
}

# Lines sampled by delimiter detection
DETECTION_SAMPLE_LINES = 20


# === Configuration ===

@dataclass
class DelimiterConfig:
    """Delimited text format settings.

    Attributes:
        delimiter: Field separator (single character)
        use_quotes: Whether fields may be quoted
        quote_char: Quote character (single character)
    """
    delimiter: str = DEFAULT_DELIMITER
    use_quotes: bool = True
    quote_char: str = DEFAULT_QUOTE_CHAR

    def __post_init__(self):
        if len(self.delimiter) != 1:
            raise InvalidDelimiterConfig(f"Delimiter must be a single character, got {self.delimiter!r}")
        if len(self.quote_char) != 1:
            raise InvalidDelimiterConfig(f"Quote character must be a single character, got {self.quote_char!r}")
        if self.use_quotes and self.delimiter == self.quote_char:
            raise InvalidDelimiterConfig(f"Delimiter and quote character must differ, both are {self.delimiter!r}")
        if self.delimiter in ('\n', '\r') or self.quote_char in ('\n', '\r'):
            raise InvalidDelimiterConfig("Delimiter and quote character cannot be line terminators")

    @property
    def delimiter_name(self) -> str:
        return DELIMITER_NAMES.get(self.delimiter, repr(self.delimiter))


DEFAULT_DELIMITER_CONFIG = DelimiterConfig()
TSV_DELIMITER_CONFIG = DelimiterConfig(delimiter='\t')
