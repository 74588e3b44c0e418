# textcore/core/processor/encoding_helper/__init__.py
"""
Encoding Helper Module

Turns raw file bytes into editor text and back.

Module layout:
- encoding_constants: EncodingKind, DetectionResult, BOMs, method tags
- encoding_detector: byte-stream encoding detection
- encoding_decoder: decode/encode with BOM and newline handling
- newline: line terminator detection and conversion
- char_info: status-bar description of a single character
"""

# Constants / types
from textcore.core.processor.encoding_helper.encoding_constants import (
    EncodingKind,
    DetectionResult,
    SELECTABLE_ENCODINGS,
)

# Detection
from textcore.core.processor.encoding_helper.encoding_detector import (
    EncodingDetector,
    detect_encoding,
    detect_bom,
    is_jis,
    is_valid_utf8,
    euc_jp_score,
    shift_jis_score,
)

# Decoding
from textcore.core.processor.encoding_helper.encoding_decoder import (
    DecodedText,
    TextEncoder,
)

# Newlines
from textcore.core.processor.encoding_helper.newline import (
    NewLineType,
    detect_newline,
    normalize_newlines,
    apply_newline,
)

# Character info
from textcore.core.processor.encoding_helper.char_info import (
    CharInfo,
    char_info,
)

__all__ = [
    # Constants / types
    "EncodingKind",
    "DetectionResult",
    "SELECTABLE_ENCODINGS",
    # Detection
    "EncodingDetector",
    "detect_encoding",
    "detect_bom",
    "is_jis",
    "is_valid_utf8",
    "euc_jp_score",
    "shift_jis_score",
    # Decoding
    "DecodedText",
    "TextEncoder",
    # Newlines
    "NewLineType",
    "detect_newline",
    "normalize_newlines",
    "apply_newline",
    # Character info
    "CharInfo",
    "char_info",
]
