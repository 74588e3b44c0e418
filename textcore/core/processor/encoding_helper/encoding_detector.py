# textcore/core/processor/encoding_helper/encoding_detector.py
"""
Encoding Detector - Byte-stream character encoding detection

Classifies a raw byte buffer into one of the supported encodings.
Detection is deterministic and pure (no I/O).

Detection order (first match wins):
1. BOM (UTF-8, UTF-16 LE, UTF-16 BE)
2. JIS escape sequences
3. Structurally valid UTF-8 containing non-ASCII bytes
4-6. EUC-JP vs Shift-JIS byte-pattern scores
7. Pure ASCII (reported as UTF-8)
8. Undetermined (falls back to UTF-8, detected=False)

BOM and escape sequences are unambiguous and dominate. UTF-8 validity is
checked before the double-byte scores because valid non-ASCII UTF-8 would
otherwise pick up EUC-JP/Shift-JIS score from byte-pair coincidences.

Usage:
    from textcore.core.processor.encoding_helper.encoding_detector import (
        EncodingDetector,
    )

    result = EncodingDetector().detect(data)
    text = data.decode(result.codec)
"""
import logging
from typing import Optional, Union

from textcore.core.processor.encoding_helper.encoding_constants import (
    BOM_UTF8,
    BOM_UTF16_BE,
    BOM_UTF16_LE,
    JIS_ESCAPE_SEQUENCES,
    METHOD_ASCII,
    METHOD_BOM,
    METHOD_DEFAULT,
    METHOD_EUC_JP,
    METHOD_JIS,
    METHOD_SHIFT_JIS,
    METHOD_UNDETERMINED,
    METHOD_UTF8,
    DetectionResult,
    EncodingKind,
)

logger = logging.getLogger("text-core.Encoding")

BytesLike = Union[bytes, bytearray, memoryview]


# ============================================================================
# Detection Rules
# ============================================================================

def detect_bom(data: bytes) -> Optional[EncodingKind]:
    """
    Detect encoding from a byte order mark.

    Args:
        data: Raw bytes

    Returns:
        EncodingKind for the BOM, or None if there is no BOM
    """
    if data.startswith(BOM_UTF8):
        return EncodingKind.UTF8_BOM
    if data.startswith(BOM_UTF16_LE):
        return EncodingKind.UTF16_LE
    if data.startswith(BOM_UTF16_BE):
        return EncodingKind.UTF16_BE
    return None


def is_jis(data: bytes) -> bool:
    """Check for any ISO-2022-JP escape sequence anywhere in the buffer."""
    return any(seq in data for seq in JIS_ESCAPE_SEQUENCES)


def is_valid_utf8(data: bytes) -> bool:
    """
    Check UTF-8 structural validity of the whole buffer.

    Each lead byte must be followed by exactly the number of 10xxxxxx
    continuation bytes it announces. Any violation fails the whole buffer.
    Overlong forms and surrogate code points are not rejected.
    """
    i = 0
    length = len(data)

    while i < length:
        b = data[i]

        if b <= 0x7F:
            i += 1
            continue
        elif (b & 0xE0) == 0xC0:
            continuation = 1
        elif (b & 0xF0) == 0xE0:
            continuation = 2
        elif (b & 0xF8) == 0xF0:
            continuation = 3
        else:
            return False

        for _ in range(continuation):
            i += 1
            if i >= length or (data[i] & 0xC0) != 0x80:
                return False

        i += 1

    return True


def has_non_ascii(data: bytes) -> bool:
    """Check whether any byte is >= 0x80."""
    return any(b >= 0x80 for b in data)


def euc_jp_score(data: bytes) -> int:
    """
    Score how much the buffer looks like EUC-JP.

    - Two bytes both in 0xA1-0xFE: +2
    - 0x8E followed by 0xA1-0xDF (half-width kana): +1
    - Any other byte in 0x80-0xA0: -1

    Returns:
        Integer score (may be negative)
    """
    score = 0
    i = 0
    length = len(data)

    while i < length:
        b = data[i]

        if 0xA1 <= b <= 0xFE and i + 1 < length and 0xA1 <= data[i + 1] <= 0xFE:
            score += 2
            i += 2
            continue

        if b == 0x8E and i + 1 < length and 0xA1 <= data[i + 1] <= 0xDF:
            score += 1
            i += 2
            continue

        if 0x80 <= b <= 0xA0:
            score -= 1

        i += 1

    return score


def shift_jis_score(data: bytes) -> int:
    """
    Score how much the buffer looks like Shift-JIS.

    - Lead 0x81-0x9F/0xE0-0xFC followed by trail 0x40-0x7E/0x80-0xFC: +2
    - Single byte 0xA1-0xDF (half-width kana): +1
    - Byte >= 0xFD: -1

    Returns:
        Integer score (may be negative)
    """
    score = 0
    i = 0
    length = len(data)

    while i < length:
        b = data[i]

        if (0x81 <= b <= 0x9F or 0xE0 <= b <= 0xFC) and i + 1 < length:
            b2 = data[i + 1]
            if 0x40 <= b2 <= 0x7E or 0x80 <= b2 <= 0xFC:
                score += 2
                i += 2
                continue

        if 0xA1 <= b <= 0xDF:
            score += 1
            i += 1
            continue

        if b >= 0xFD:
            score -= 1

        i += 1

    return score


# ============================================================================
# Encoding Detector Class
# ============================================================================

class EncodingDetector:
    """Byte-stream encoding detector.

    Stateless; a single instance can be shared.
    """

    def __init__(self):
        self.logger = logging.getLogger("text-core.Encoding")

    def detect(self, data: BytesLike) -> DetectionResult:
        """
        Detect the character encoding of a byte buffer.

        Args:
            data: Raw bytes (bytes, bytearray or memoryview)

        Returns:
            DetectionResult. When detected is False the kind is UTF-8.
        """
        data = bytes(data) if data else b""

        if not data:
            return DetectionResult(EncodingKind.UTF8, False, METHOD_DEFAULT)

        result = self._detect(data)
        self.logger.debug(
            f"Encoding detection: kind={result.kind.name}, "
            f"detected={result.detected}, method={result.method}, size={len(data)}"
        )
        return result

    def _detect(self, data: bytes) -> DetectionResult:
        bom_kind = detect_bom(data)
        if bom_kind is not None:
            return DetectionResult(bom_kind, True, METHOD_BOM)

        if is_jis(data):
            return DetectionResult(EncodingKind.JIS, True, METHOD_JIS)

        non_ascii = has_non_ascii(data)

        if non_ascii and is_valid_utf8(data):
            return DetectionResult(EncodingKind.UTF8, True, METHOD_UTF8)

        euc_score = euc_jp_score(data)
        sjis_score = shift_jis_score(data)

        if euc_score > 0 or sjis_score > 0:
            if euc_score > sjis_score:
                return DetectionResult(EncodingKind.EUC_JP, True, METHOD_EUC_JP)
            if sjis_score > 0:
                return DetectionResult(EncodingKind.SHIFT_JIS, True, METHOD_SHIFT_JIS)

        if not non_ascii:
            return DetectionResult(EncodingKind.UTF8, True, METHOD_ASCII)

        return DetectionResult(EncodingKind.UTF8, False, METHOD_UNDETERMINED)


_default_detector = EncodingDetector()


def detect_encoding(data: BytesLike) -> DetectionResult:
    """Detect encoding with the shared default detector."""
    return _default_detector.detect(data)


__all__ = [
    "EncodingDetector",
    "detect_encoding",
    "detect_bom",
    "is_jis",
    "is_valid_utf8",
    "has_non_ascii",
    "euc_jp_score",
    "shift_jis_score",
]
