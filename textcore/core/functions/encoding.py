# textcore/core/functions/encoding.py
"""
Encoding - Abstract Encoding Interface Module

Provides the abstract base class and configuration for turning raw bytes
into editor text and back. The concrete implementation lives in
encoding_helper/encoding_decoder.py.

Module Components:
- EncodingConfig: Configuration dataclass for encoding operations
- BaseEncoder: Abstract base class for encoders

Usage Example:
    from textcore.core.processor.encoding_helper.encoding_decoder import TextEncoder
    from textcore.core.functions.encoding import EncodingConfig

    encoder = TextEncoder(EncodingConfig(use_chardet=False))
    decoded = encoder.decode(data)
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class EncodingConfig:
    """Configuration for encoding operations.

    Attributes:
        use_chardet: Whether to ask chardet when detection is undetermined
        chardet_confidence_threshold: Minimum chardet confidence to accept
        fallback_encoding: Codec used when nothing decodes cleanly
        errors: Codec error handler for decoding and encoding
    """
    use_chardet: bool = True
    chardet_confidence_threshold: float = 0.7
    fallback_encoding: str = 'utf-8'
    errors: str = 'replace'


class BaseEncoder(ABC):
    """Abstract base class for encoders.

    Implementations:
        - TextEncoder: encoding_helper/encoding_decoder.py

    Implementation Guidelines:
        - decode() returns text with '\\n' line terminators only
        - encode() restores the original terminator style and BOM
    """

    def __init__(self, config: Optional[EncodingConfig] = None):
        """Initialize the encoder.

        Args:
            config: Encoding configuration
        """
        self.config = config or EncodingConfig()
        self.logger = logging.getLogger("text-core.Encoding")

    @abstractmethod
    def decode(self, data: bytes, result=None):
        """Decode binary data to editor text.

        Args:
            data: Binary data to decode
            result: Optional DetectionResult to use instead of detecting

        Returns:
            DecodedText
        """
        pass

    @abstractmethod
    def encode(self, text: str, kind, newline) -> bytes:
        """Encode editor text to bytes for storage.

        Args:
            text: Text with '\\n' line terminators
            kind: Target EncodingKind
            newline: Target NewLineType

        Returns:
            Encoded bytes
        """
        pass


# Default configuration instance
DEFAULT_ENCODING_CONFIG = EncodingConfig()
