"""Core domain models for tailoring suggestions and highlighted resumes.

This module defines the data structures exchanged between the normalizer,
the highlighter and the rest of the application:
- ConfidenceLevel: how strongly a suggestion is expected to improve alignment
- Suggestion: one proposed resume-phrase edit tied to a job requirement
- TailorSummary: overall alignment score and keyword coverage
- TailorResult: validated aggregate built from an AI service response
- Segment: contiguous slice of the resume, plain or annotated with one suggestion

Python attributes are snake_case. The JSON interchange names are camelCase
(``currentPhrase``, ``alignmentScore``, ...) and are produced with
``model_dump(by_alias=True)``. Either spelling is accepted on input.
"""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ConfidenceLevel(str, Enum):
    """Confidence attached to a suggestion."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


DEFAULT_CONFIDENCE = ConfidenceLevel.MEDIUM


class _InterchangeModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Suggestion(_InterchangeModel):
    """A single proposed edit to the resume.

    An empty current_phrase is valid; such a suggestion is simply never
    matched against the resume text.
    """

    current_phrase: str = Field("", description="Phrase as it appears in the resume")
    suggested_phrase: str = Field("", description="Proposed replacement phrase")
    requirement: str = Field("", description="Job requirement motivating the edit")
    reason: str = Field("", description="Why the edit improves alignment")
    confidence: ConfidenceLevel = Field(DEFAULT_CONFIDENCE, description="low, medium or high")

    @field_validator("current_phrase", "suggested_phrase", "requirement", "reason")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        """Strip whitespace from text fields."""
        return v.strip()


class TailorSummary(_InterchangeModel):
    """Aggregate view of how well the resume covers the job description."""

    alignment_score: float = Field(0.0, ge=0.0, le=1.0, description="ATS alignment in [0, 1]")
    keyword_coverage: Tuple[str, ...] = Field(
        default_factory=tuple, description="Important keywords already present, service order"
    )
    missing_keywords: Tuple[str, ...] = Field(
        default_factory=tuple, description="Critical keywords absent from the resume"
    )


class TailorResult(_InterchangeModel):
    """Validated result of a tailoring request.

    source_text and job_description are the caller's originals, never the
    copies echoed back by the AI service. Collections are tuples, so a result
    cannot be changed once produced.
    """

    source_text: str = Field(..., description="Plain resume text the suggestions refer to")
    job_description: str = Field(..., description="Job description the resume was compared with")
    suggestions: Tuple[Suggestion, ...] = Field(default_factory=tuple)
    summary: TailorSummary = Field(default_factory=TailorSummary)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "sourceText": "Led a team of engineers.",
                "jobDescription": "We need a people leader for our platform team.",
                "suggestions": [
                    {
                        "currentPhrase": "Led a team",
                        "suggestedPhrase": "Managed a cross-functional team",
                        "requirement": "People leadership",
                        "reason": "Mirrors the leadership wording of the posting",
                        "confidence": "high",
                    }
                ],
                "summary": {
                    "alignmentScore": 0.72,
                    "keywordCoverage": ["engineers"],
                    "missingKeywords": ["platform"],
                },
            }
        }
    )


class Segment(_InterchangeModel):
    """Contiguous slice of the source text.

    A segment without a suggestion is plain text; a segment with one is
    annotated and attributed to exactly that suggestion.
    """

    content: str = Field(..., description="Exact slice of the source text")
    suggestion: Optional[Suggestion] = Field(None, description="Originating suggestion, if annotated")

    @property
    def is_annotated(self) -> bool:
        """Whether this segment carries a suggestion."""
        return self.suggestion is not None
