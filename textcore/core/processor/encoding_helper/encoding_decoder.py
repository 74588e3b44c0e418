# textcore/core/processor/encoding_helper/encoding_decoder.py
"""
Text Encoder - Decode file bytes to editor text and back

Decoding pipeline:
    bytes → EncodingDetector (unless a result is supplied) → strip BOM
          → decode → detect newline style → normalize to '\\n'

When detection is undetermined, chardet is consulted for a better guess.
A guess is only used if its confidence reaches the configured threshold
and it decodes the buffer without errors; otherwise the UTF-8 fallback is
decoded with replacement characters. The DetectionResult still reports
detected=False so callers can warn the user.

Encoding pipeline:
    text → convert '\\n' to the remembered newline → encode (+ BOM)
"""
import logging
from dataclasses import dataclass
from typing import Optional

import chardet

from textcore.core.functions.encoding import BaseEncoder, EncodingConfig
from textcore.core.processor.encoding_helper.encoding_constants import (
    BOM_KINDS,
    DetectionResult,
    EncodingKind,
)
from textcore.core.processor.encoding_helper.encoding_detector import detect_encoding
from textcore.core.processor.encoding_helper.newline import (
    NewLineType,
    apply_newline,
    detect_newline,
    normalize_newlines,
)

logger = logging.getLogger("text-core.Encoding")


@dataclass
class DecodedText:
    """
    Editor text decoded from a byte buffer.

    Attributes:
        text: Decoded text with '\\n' line terminators
        result: Detection result used for decoding
        codec: Python codec actually used
        newline: Dominant line terminator of the original bytes
    """
    text: str
    result: DetectionResult
    codec: str
    newline: NewLineType = NewLineType.CRLF


class TextEncoder(BaseEncoder):
    """Decodes bytes into editor text and encodes it back."""

    def __init__(self, config: Optional[EncodingConfig] = None):
        super().__init__(config)

    def decode(self, data: bytes, result: Optional[DetectionResult] = None) -> DecodedText:
        """
        Decode a byte buffer.

        Args:
            data: Raw bytes
            result: Encoding to use; detected from the bytes when None
                (pass a result built from a user-selected EncodingKind to
                reopen a file with a different encoding)

        Returns:
            DecodedText
        """
        data = bytes(data)
        if result is None:
            result = detect_encoding(data)

        codec = result.codec
        if not result.detected and data:
            codec = self._guess_codec(data)

        body = self._strip_bom(data, result.kind)
        text = body.decode(codec, errors=self.config.errors)

        newline = detect_newline(text)
        text = normalize_newlines(text)

        self.logger.debug(
            f"Decoded {len(data)} bytes: codec={codec}, newline={newline.name}, chars={len(text)}"
        )
        return DecodedText(text=text, result=result, codec=codec, newline=newline)

    def encode(
        self,
        text: str,
        kind: EncodingKind = EncodingKind.UTF8,
        newline: NewLineType = NewLineType.CRLF,
    ) -> bytes:
        """
        Encode editor text for storage.

        Args:
            text: Text with '\\n' line terminators
            kind: Target encoding; BOM kinds write their BOM
            newline: Line terminator style to restore

        Returns:
            Encoded bytes
        """
        content = apply_newline(text, newline)

        if kind is EncodingKind.UTF16_LE or kind is EncodingKind.UTF16_BE:
            return BOM_KINDS[kind] + content.encode(kind.codec, errors=self.config.errors)

        # utf-8-sig writes its own BOM
        return content.encode(kind.codec, errors=self.config.errors)

    def _strip_bom(self, data: bytes, kind: EncodingKind) -> bytes:
        bom = BOM_KINDS.get(kind)
        if bom and kind is not EncodingKind.UTF8_BOM and data.startswith(bom):
            return data[len(bom):]
        return data

    def _guess_codec(self, data: bytes) -> str:
        """Ask chardet for a codec when the detector could not decide."""
        fallback = self.config.fallback_encoding
        if not self.config.use_chardet:
            return fallback

        guess = chardet.detect(data)
        encoding = guess.get("encoding")
        confidence = guess.get("confidence") or 0.0

        if not encoding or confidence < self.config.chardet_confidence_threshold:
            self.logger.debug(
                f"chardet guess rejected: encoding={encoding}, confidence={confidence:.2f}"
            )
            return fallback

        try:
            data.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            self.logger.debug(f"chardet guess {encoding} does not decode cleanly: {e}")
            return fallback

        self.logger.info(f"Using chardet guess: encoding={encoding}, confidence={confidence:.2f}")
        return encoding


__all__ = [
    "DecodedText",
    "TextEncoder",
]
