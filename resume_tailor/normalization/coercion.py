"""Field-level coercion helpers for untrusted AI payloads.

Each helper maps an arbitrary decoded JSON value to a value of the expected
type, substituting the documented default instead of raising.
"""

import math
from collections.abc import Mapping
from typing import Any, Tuple

from resume_tailor.domain.models import DEFAULT_CONFIDENCE, ConfidenceLevel

SEQUENCE_TYPES = (list, tuple)


def as_mapping(value: Any) -> Mapping:
    """Return value if it is a mapping, otherwise an empty dict."""
    if isinstance(value, Mapping):
        return value
    return {}


def coerce_text(value: Any) -> str:
    """Coerce a value to trimmed text.

    Example:
        >>> coerce_text("  Led a team ")
        'Led a team'
        >>> coerce_text(None)
        ''
        >>> coerce_text(42)
        '42'
    """
    if value is None:
        return ""
    if not isinstance(value, str):
        value = str(value)
    return value.strip()


def coerce_confidence(value: Any) -> ConfidenceLevel:
    """Coerce a value to a ConfidenceLevel, case-insensitively.

    Anything that is not low/medium/high falls back to medium.
    """
    if value is None:
        return DEFAULT_CONFIDENCE

    normalized = str(value).lower().strip()
    try:
        return ConfidenceLevel(normalized)
    except ValueError:
        return DEFAULT_CONFIDENCE


def coerce_score(value: Any) -> float:
    """Coerce a value to a score clamped into [0, 1].

    Numbers and numeric strings are accepted, including integers too large
    for a float. Booleans, NaN, other types and missing values score 0.

    Example:
        >>> coerce_score("0.75")
        0.75
        >>> coerce_score(7)
        1.0
        >>> coerce_score(-3)
        0.0
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        return 0.0

    try:
        score = float(value)
    except ValueError:
        return 0.0
    except OverflowError:
        # Only integers beyond float range get here
        return 1.0 if value > 0 else 0.0

    if math.isnan(score):
        return 0.0

    return max(0.0, min(1.0, score))


def coerce_string_list(value: Any) -> Tuple[str, ...]:
    """Coerce a value to a tuple of strings, preserving element order.

    Non-sequences become an empty tuple. Elements are stringified; None
    elements become empty strings.
    """
    if not isinstance(value, SEQUENCE_TYPES):
        return ()
    return tuple("" if item is None else str(item) for item in value)
