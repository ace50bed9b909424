"""Domain models for resume tailoring."""

from .models import (
    DEFAULT_CONFIDENCE,
    ConfidenceLevel,
    Segment,
    Suggestion,
    TailorResult,
    TailorSummary,
)

__all__ = [
    "ConfidenceLevel",
    "DEFAULT_CONFIDENCE",
    "Suggestion",
    "TailorSummary",
    "TailorResult",
    "Segment",
]
