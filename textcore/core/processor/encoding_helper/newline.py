# textcore/core/processor/encoding_helper/newline.py
"""
Line terminator detection and conversion.

Editor text always uses '\\n' internally. The dominant terminator of a file
is remembered on open and restored on save.
"""
from enum import Enum


class NewLineType(Enum):
    """Line terminator styles."""
    CRLF = "\r\n"   # Windows
    LF = "\n"       # Unix/Linux/macOS
    CR = "\r"       # classic Mac OS

    @property
    def display_name(self) -> str:
        return self.name


def detect_newline(text: str) -> NewLineType:
    """
    Detect the dominant line terminator.

    Counts CRLF, lone LF and lone CR. Ties favor CRLF, then LF.
    Text without terminators reports CRLF.
    """
    crlf = text.count("\r\n")
    lf = text.count("\n") - crlf
    cr = text.count("\r") - crlf

    if crlf >= lf and crlf >= cr:
        return NewLineType.CRLF
    if lf >= cr:
        return NewLineType.LF
    return NewLineType.CR


def normalize_newlines(text: str) -> str:
    """Convert every CRLF and lone CR to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def apply_newline(text: str, newline: NewLineType) -> str:
    """Convert LF-terminated editor text to the given terminator style."""
    if newline is NewLineType.LF:
        return text
    return text.replace("\n", newline.value)
