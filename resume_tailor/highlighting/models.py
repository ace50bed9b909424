"""Working data for the highlighting engine."""

from dataclasses import dataclass

from resume_tailor.domain.models import Suggestion


@dataclass(frozen=True)
class MatchSpan:
    """One literal occurrence of a suggestion's current phrase.

    Attributes:
        start: Offset of the first matched character in the source text
        end: Offset one past the last matched character (half-open)
        suggestion: Suggestion whose current_phrase produced this match
    """

    start: int
    end: int
    suggestion: Suggestion
