"""Normalization layer for converting untrusted AI responses to domain models.

This module provides:
- FormatError: Raised when a response's top-level shape is unusable
- TailorResponseNormalizer: Service coercing decoded payloads into TailorResult
- normalize_tailor_payload / normalize_response_text: Module-level shortcuts
- parse_response_text: Code-fence aware JSON decoding of raw response text
"""

from .exceptions import FormatError
from .service import (
    TailorResponseNormalizer,
    normalize_response_text,
    normalize_tailor_payload,
    parse_response_text,
)

__all__ = [
    "FormatError",
    "TailorResponseNormalizer",
    "normalize_tailor_payload",
    "normalize_response_text",
    "parse_response_text",
]
