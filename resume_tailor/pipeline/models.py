"""Data models for tailoring run results."""

from dataclasses import dataclass
from datetime import datetime
from typing import List

from resume_tailor.domain.models import Segment, Suggestion, TailorResult


@dataclass
class TailorAnalysis:
    """
    Output of a single tailoring run.

    Attributes:
        result: Validated TailorResult built from the AI response
        segments: Highlighted segments of result.source_text
        analysis_key: Deterministic fingerprint of the resume/job pair
        started_at: UTC timestamp when the run began
        finished_at: UTC timestamp when the run completed
        duration_seconds: Wall-clock duration of the run
    """

    result: TailorResult
    segments: List[Segment]
    analysis_key: str
    started_at: datetime
    finished_at: datetime
    duration_seconds: float = 0.0

    @property
    def annotated_count(self) -> int:
        """Number of annotated segments."""
        return sum(1 for segment in self.segments if segment.is_annotated)

    @property
    def unmatched_suggestions(self) -> List[Suggestion]:
        """Suggestions that did not end up annotating any segment.

        Covers empty phrases, phrases absent from the text and phrases whose
        every occurrence lost to an overlapping match.
        """
        # Identity, not equality: two suggestions may carry identical fields
        used = {id(segment.suggestion) for segment in self.segments if segment.is_annotated}
        return [s for s in self.result.suggestions if id(s) not in used]
