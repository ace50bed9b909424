"""Normalization service for AI tailoring responses.

This module implements the decoding logic that:
1. Strips Markdown code fences and decodes the response text as JSON
2. Rejects payloads whose top level is not a JSON object
3. Coerces every suggestion field individually to its expected type
4. Clamps the alignment score and coerces the keyword lists
5. Echoes the caller's resume text and job description into the result

This is a coercing decoder, not a strict schema validator: only a wrong
top-level shape raises FormatError.
"""

import json
import logging
import re
from collections.abc import Mapping
from typing import Any, Optional, Tuple

from resume_tailor.domain.models import Suggestion, TailorResult, TailorSummary
from resume_tailor.logging import get_logger

from .coercion import (
    SEQUENCE_TYPES,
    as_mapping,
    coerce_confidence,
    coerce_score,
    coerce_string_list,
    coerce_text,
)
from .exceptions import FormatError

logger = get_logger(__name__, component="normalization")

_CODE_FENCE_RE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)


def parse_response_text(text: Optional[str]) -> Any:
    """Decode the raw text returned by the AI service.

    The service is asked for bare JSON but often wraps it in a ```json fence.

    Args:
        text: Raw response content

    Returns:
        Decoded JSON value (of any type)

    Raises:
        FormatError: If the text is empty or not valid JSON
    """
    stripped = _CODE_FENCE_RE.sub("", (text or "").strip()).strip()
    if not stripped:
        raise FormatError("AI response is empty")

    try:
        return json.loads(stripped)
    except json.JSONDecodeError as e:
        raise FormatError(
            f"AI response is not valid JSON: {e.msg} (line {e.lineno}, column {e.colno})"
        ) from e


class TailorResponseNormalizer:
    """Converts decoded AI responses into TailorResult domain models.

    Holds no state besides its logger, so one instance can serve concurrent
    requests.
    """

    def __init__(self, logger_instance: Optional[logging.Logger] = None):
        """Initialize TailorResponseNormalizer.

        Args:
            logger_instance: Logger instance (defaults to module logger)
        """
        self.logger = logger_instance or logger

    def normalize(self, raw_payload: Any, source_text: str, job_description: str) -> TailorResult:
        """Normalize a decoded payload into a TailorResult.

        Args:
            raw_payload: Decoded AI response; must be a mapping
            source_text: Resume text the suggestions refer to
            job_description: Job description the resume was compared with

        Returns:
            Fresh TailorResult; raw_payload is never mutated

        Raises:
            FormatError: If raw_payload is not a mapping
        """
        if not isinstance(raw_payload, Mapping):
            payload_type = type(raw_payload).__name__
            raise FormatError(
                f"Invalid AI response format: expected a JSON object, got {payload_type}",
                payload_type=payload_type,
            )

        suggestions = self._normalize_suggestions(raw_payload.get("suggestions"))
        summary = self._normalize_summary(raw_payload.get("summary"))

        self.logger.info(
            "Normalized AI response",
            extra={
                "event": "normalization.response.normalized",
                "suggestion_count": len(suggestions),
                "alignment_score": summary.alignment_score,
            },
        )

        return TailorResult(
            source_text=source_text,
            job_description=job_description,
            suggestions=suggestions,
            summary=summary,
        )

    def _normalize_suggestions(self, raw_suggestions: Any) -> Tuple[Suggestion, ...]:
        if not isinstance(raw_suggestions, SEQUENCE_TYPES):
            if raw_suggestions is not None:
                self.logger.warning(
                    "Ignoring non-list suggestions field",
                    extra={
                        "event": "normalization.suggestions.invalid",
                        "value_type": type(raw_suggestions).__name__,
                    },
                )
            return ()

        return tuple(
            self._normalize_suggestion(item, index)
            for index, item in enumerate(raw_suggestions)
        )

    def _normalize_suggestion(self, item: Any, index: int) -> Suggestion:
        fields = as_mapping(item)
        if fields is not item:
            self.logger.debug(
                "Suggestion is not an object, using defaults",
                extra={
                    "event": "normalization.suggestion.defaulted",
                    "index": index,
                    "value_type": type(item).__name__,
                },
            )

        return Suggestion(
            current_phrase=coerce_text(fields.get("currentPhrase")),
            suggested_phrase=coerce_text(fields.get("suggestedPhrase")),
            requirement=coerce_text(fields.get("requirement")),
            reason=coerce_text(fields.get("reason")),
            confidence=coerce_confidence(fields.get("confidence")),
        )

    @staticmethod
    def _normalize_summary(raw_summary: Any) -> TailorSummary:
        fields = as_mapping(raw_summary)

        raw_score = fields.get("atsAlignmentScore")
        if raw_score is None:
            raw_score = fields.get("score")

        return TailorSummary(
            alignment_score=coerce_score(raw_score),
            keyword_coverage=coerce_string_list(fields.get("keywordCoverage")),
            missing_keywords=coerce_string_list(fields.get("missingKeywords")),
        )


_default_normalizer = TailorResponseNormalizer()


def normalize_tailor_payload(raw_payload: Any, source_text: str, job_description: str) -> TailorResult:
    """Normalize a decoded AI payload with the shared default normalizer.

    Example:
        >>> result = normalize_tailor_payload(
        ...     {"suggestions": "not-an-array", "summary": None}, "resume", "job"
        ... )
        >>> result.suggestions, result.summary.alignment_score
        ((), 0.0)
    """
    return _default_normalizer.normalize(raw_payload, source_text, job_description)


def normalize_response_text(text: Optional[str], source_text: str, job_description: str) -> TailorResult:
    """Decode raw AI response text and normalize it in one step.

    Raises:
        FormatError: If the text is not JSON or its top level is not an object
    """
    return normalize_tailor_payload(parse_response_text(text), source_text, job_description)
