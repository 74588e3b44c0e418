# textcore/core/processor/encoding_helper/char_info.py
"""
Character information for the status bar: the character under the caret,
its bytes in the document's encoding, and a rough category.
"""
import unicodedata
from dataclasses import dataclass
from typing import Optional

from textcore.core.processor.encoding_helper.encoding_constants import EncodingKind

IDEOGRAPHIC_SPACE = "\u3000"

_DISPLAY_NAMES = {
    "\n": "LF",
    "\r": "CR",
    "\t": "TAB",
    " ": "SP",
    IDEOGRAPHIC_SPACE: "IDSP",
}

_DESCRIPTIONS = {
    "\n": "line feed",
    "\r": "carriage return",
    "\t": "tab",
    " ": "space",
    IDEOGRAPHIC_SPACE: "ideographic space",
}

# (first, last, description)
_BLOCKS = (
    (0x3040, 0x309F, "hiragana"),
    (0x30A0, 0x30FF, "katakana"),
    (0x4E00, 0x9FFF, "kanji"),
    (0xFF00, 0xFFEF, "full-width"),
)


@dataclass(frozen=True)
class CharInfo:
    """
    Attributes:
        char: The character itself
        display: Printable label (control characters get a name)
        hex_bytes: Space separated hex bytes in the document encoding
        description: Category, empty for ordinary characters
    """
    char: str
    display: str
    hex_bytes: str
    description: str

    def __str__(self) -> str:
        text = f"'{self.display}' [{self.hex_bytes}]"
        if self.description:
            text += f" ({self.description})"
        return text


def display_char(c: str) -> str:
    if c in _DISPLAY_NAMES:
        return _DISPLAY_NAMES[c]
    if unicodedata.category(c) == "Cc":
        return "CTRL"
    return c


def describe_char(c: str) -> str:
    if c in _DESCRIPTIONS:
        return _DESCRIPTIONS[c]
    if unicodedata.category(c) == "Cc":
        return "control character"
    code = ord(c)
    for first, last, description in _BLOCKS:
        if first <= code <= last:
            return description
    return ""


def char_info(text: str, index: int, kind: EncodingKind = EncodingKind.UTF8) -> Optional[CharInfo]:
    """
    Describe the character at index.

    Args:
        text: Editor text
        index: Character index
        kind: Document encoding used to show the byte sequence

    Returns:
        CharInfo, or None when index is outside the text
    """
    if index < 0 or index >= len(text):
        return None

    c = text[index]
    # Show only the character's bytes, never a BOM
    codec = EncodingKind.UTF8.codec if kind is EncodingKind.UTF8_BOM else kind.codec
    encoded = c.encode(codec, errors="replace")
    hex_bytes = " ".join(f"{b:02X}" for b in encoded)

    return CharInfo(
        char=c,
        display=display_char(c),
        hex_bytes=hex_bytes,
        description=describe_char(c),
    )
