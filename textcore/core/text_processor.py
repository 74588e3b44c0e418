# textcore/core/text_processor.py
"""
TextProcessor - Entry point tying encoding, table and search together

Open:  bytes → detect encoding → decode → Document (text + how to save it)
Table: Document text ⇄ grid through the configured delimiter
Save:  text → restore newline style → encode with the document's encoding

Usage:
    from textcore import TextProcessor

    processor = TextProcessor({"delimiter": ","})
    doc = processor.read_file("data.csv")
    grid = processor.to_grid(doc.text, doc.delimiter_config)
    data = processor.save_bytes(processor.from_grid(grid), doc.kind, doc.newline)
"""
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from textcore.core.functions.encoding import EncodingConfig
from textcore.core.processor.csv_helper.csv_constants import DelimiterConfig
from textcore.core.processor.csv_helper.csv_parser import (
    Grid,
    delimiter_for_filename,
    parse_normalized,
    serialize,
)
from textcore.core.processor.encoding_helper.encoding_constants import (
    METHOD_SELECTED,
    DetectionResult,
    EncodingKind,
)
from textcore.core.processor.encoding_helper.encoding_decoder import TextEncoder
from textcore.core.processor.encoding_helper.encoding_detector import EncodingDetector
from textcore.core.processor.encoding_helper.newline import NewLineType
from textcore.core.processor.search_helper.table_search import TabularSearchEngine
from textcore.core.processor.search_helper.text_search import TextSearchEngine

logger = logging.getLogger("text-core")


@dataclass
class Document:
    """
    An opened document.

    Attributes:
        text: Editor text ('\\n' line terminators)
        encoding: Detection result the text was decoded with
        codec: Python codec actually used for decoding
        newline: Line terminator style to restore on save
        filename: Source file name, if any
        delimiter_config: Delimiter settings implied by the file name
            (None for files that are not .csv/.tsv)
    """
    text: str
    encoding: DetectionResult
    codec: str
    newline: NewLineType = NewLineType.CRLF
    filename: Optional[str] = None
    delimiter_config: Optional[DelimiterConfig] = None

    @property
    def kind(self) -> EncodingKind:
        return self.encoding.kind

    @property
    def is_table(self) -> bool:
        return self.delimiter_config is not None


class TextProcessor:
    """
    Facade over the encoding, delimited text and search helpers.

    Args:
        config: Optional dict with "delimiter", "use_quotes", "quote_char"
        encoding_config: Optional EncodingConfig for decoding/encoding
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        encoding_config: Optional[EncodingConfig] = None,
    ):
        config = config or {}
        self.delimiter_config = DelimiterConfig(
            delimiter=config.get("delimiter", ","),
            use_quotes=config.get("use_quotes", True),
            quote_char=config.get("quote_char", '"'),
        )
        self.encoding_config = encoding_config or EncodingConfig()

        self.detector = EncodingDetector()
        self.encoder = TextEncoder(self.encoding_config)
        self.text_search = TextSearchEngine()
        self.table_search = TabularSearchEngine()

    # ------------------------------------------------------------------
    # Open / save
    # ------------------------------------------------------------------

    def open_bytes(
        self,
        data: bytes,
        filename: Optional[str] = None,
        kind: Optional[EncodingKind] = None,
    ) -> Document:
        """
        Decode a byte buffer into a Document.

        Args:
            data: Raw file content
            filename: Source name; a .csv/.tsv extension selects table mode
            kind: Encoding chosen by the user (skips detection)

        Returns:
            Document
        """
        if kind is not None:
            result = DetectionResult(kind, True, METHOD_SELECTED)
        else:
            result = self.detector.detect(data)
            if not result.detected and data:
                logger.warning(
                    f"Encoding of {filename or 'buffer'} could not be determined, "
                    f"falling back (method={result.method})"
                )

        decoded = self.encoder.decode(data, result)

        delimiter_config = None
        if filename:
            delimiter = delimiter_for_filename(filename)
            if delimiter is not None:
                delimiter_config = DelimiterConfig(
                    delimiter=delimiter,
                    use_quotes=self.delimiter_config.use_quotes,
                    quote_char=self.delimiter_config.quote_char,
                )

        logger.info(
            f"Opened {filename or 'buffer'}: encoding={result.display_name}, "
            f"method={result.method}, newline={decoded.newline.name}"
        )
        return Document(
            text=decoded.text,
            encoding=result,
            codec=decoded.codec,
            newline=decoded.newline,
            filename=filename,
            delimiter_config=delimiter_config,
        )

    def read_file(self, file_path: str, kind: Optional[EncodingKind] = None) -> Document:
        """Read and decode a file."""
        try:
            with open(file_path, 'rb') as f:
                data = f.read()
        except OSError as e:
            logger.error(f"Error reading file {file_path}: {e}")
            raise
        return self.open_bytes(data, os.path.basename(file_path), kind)

    def save_bytes(
        self,
        text: str,
        kind: EncodingKind = EncodingKind.UTF8,
        newline: NewLineType = NewLineType.CRLF,
    ) -> bytes:
        """Encode editor text for storage."""
        return self.encoder.encode(text, kind, newline)

    def write_file(
        self,
        file_path: str,
        text: str,
        kind: EncodingKind = EncodingKind.UTF8,
        newline: NewLineType = NewLineType.CRLF,
    ) -> None:
        data = self.save_bytes(text, kind, newline)
        try:
            with open(file_path, 'wb') as f:
                f.write(data)
        except OSError as e:
            logger.error(f"Error writing file {file_path}: {e}")
            raise
        logger.info(f"Saved {file_path}: {len(data)} bytes, encoding={kind.display_name}")

    # ------------------------------------------------------------------
    # Table mode
    # ------------------------------------------------------------------

    def to_grid(self, text: str, delimiter_config: Optional[DelimiterConfig] = None) -> Grid:
        """Parse text into a rectangular grid."""
        return parse_normalized(text, delimiter_config or self.delimiter_config)

    def from_grid(self, grid: Grid, delimiter_config: Optional[DelimiterConfig] = None) -> str:
        """Serialize a grid back to delimited text."""
        return serialize(grid, delimiter_config or self.delimiter_config)


__all__ = [
    "Document",
    "TextProcessor",
]
