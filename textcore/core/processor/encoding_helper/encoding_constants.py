# textcore/core/processor/encoding_helper/encoding_constants.py
"""
Encoding Detection Constants and Types

Defines the encoding kinds the detector can report, the detection result
type, and the byte patterns used by the detection heuristics.

Byte ranges follow the encodings' own definitions:
- UTF-8 lead bytes: 110xxxxx (1 trail), 1110xxxx (2), 11110xxx (3)
- EUC-JP: two bytes in 0xA1-0xFE, or 0x8E + 0xA1-0xDF (half-width kana)
- Shift-JIS: lead 0x81-0x9F / 0xE0-0xFC, trail 0x40-0x7E / 0x80-0xFC,
  single-byte half-width kana 0xA1-0xDF
- JIS (ISO-2022-JP): ESC sequences switching character sets
"""
from dataclasses import dataclass
from enum import Enum


class EncodingKind(Enum):
    """Character encodings the detector can report.

    The value is the Python codec used to decode/encode text.
    """
    UTF8_BOM = "utf-8-sig"
    UTF8 = "utf-8"
    UTF16_LE = "utf-16-le"
    UTF16_BE = "utf-16-be"
    SHIFT_JIS = "cp932"
    EUC_JP = "euc-jp"
    JIS = "iso2022_jp"

    @property
    def codec(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return ENCODING_DISPLAY_NAMES[self]

    @property
    def has_bom(self) -> bool:
        return self in BOM_KINDS


ENCODING_DISPLAY_NAMES = {
    EncodingKind.UTF8_BOM: "UTF-8 (BOM)",
    EncodingKind.UTF8: "UTF-8",
    EncodingKind.UTF16_LE: "UTF-16 LE",
    EncodingKind.UTF16_BE: "UTF-16 BE",
    EncodingKind.SHIFT_JIS: "Shift-JIS",
    EncodingKind.EUC_JP: "EUC-JP",
    EncodingKind.JIS: "JIS (ISO-2022-JP)",
}

# Order offered to users picking an encoding by hand
SELECTABLE_ENCODINGS = [
    EncodingKind.UTF8,
    EncodingKind.UTF8_BOM,
    EncodingKind.SHIFT_JIS,
    EncodingKind.EUC_JP,
    EncodingKind.JIS,
    EncodingKind.UTF16_LE,
    EncodingKind.UTF16_BE,
]


# === BOM ===

BOM_UTF8 = b"\xef\xbb\xbf"
BOM_UTF16_LE = b"\xff\xfe"
BOM_UTF16_BE = b"\xfe\xff"

BOM_KINDS = {
    EncodingKind.UTF8_BOM: BOM_UTF8,
    EncodingKind.UTF16_LE: BOM_UTF16_LE,
    EncodingKind.UTF16_BE: BOM_UTF16_BE,
}


# === JIS escape sequences ===

ESC = 0x1B

# ESC $ B / ESC $ @ : JIS X 0208 (new / old)
# ESC ( B / ESC ( J : ASCII / JIS X 0201 Roman
JIS_ESCAPE_SEQUENCES = (
    b"\x1b$B",
    b"\x1b$@",
    b"\x1b(B",
    b"\x1b(J",
)


# === Detection method tags ===

METHOD_DEFAULT = "default"
METHOD_BOM = "BOM"
METHOD_JIS = "JIS pattern"
METHOD_UTF8 = "UTF-8 pattern"
METHOD_EUC_JP = "EUC-JP pattern"
METHOD_SHIFT_JIS = "Shift-JIS pattern"
METHOD_ASCII = "ASCII"
METHOD_UNDETERMINED = "undetermined"
METHOD_SELECTED = "selected"


@dataclass(frozen=True)
class DetectionResult:
    """
    Result of encoding detection.

    Attributes:
        kind: Detected encoding (UTF8 when detection failed)
        detected: Whether detection succeeded
        method: Tag describing which rule decided the result
    """
    kind: EncodingKind = EncodingKind.UTF8
    detected: bool = False
    method: str = METHOD_DEFAULT

    def __post_init__(self):
        # Undetected results always fall back to UTF-8 without BOM
        if not self.detected and self.kind is not EncodingKind.UTF8:
            object.__setattr__(self, "kind", EncodingKind.UTF8)

    @property
    def codec(self) -> str:
        return self.kind.codec

    @property
    def display_name(self) -> str:
        return self.kind.display_name

    @property
    def has_bom(self) -> bool:
        return self.kind.has_bom
