"""Projection of tailoring suggestions onto resume text.

This module implements the highlighting logic that:
1. Finds every case-insensitive literal occurrence of each suggestion's phrase
2. Orders the matches by start offset, longest first on ties
3. Greedily accepts matches that do not overlap an accepted one
4. Emits plain and annotated segments that reconstruct the text exactly

Any overlap, even partial, discards the later match entirely so each
annotated segment stays attributable to exactly one suggestion.
"""

import logging
import re
from typing import Iterable, List, Optional, Sequence

from resume_tailor.domain.models import Segment, Suggestion
from resume_tailor.logging import get_logger

from .models import MatchSpan

logger = get_logger(__name__, component="highlighting")


def find_match_spans(text: str, suggestions: Iterable[Suggestion]) -> List[MatchSpan]:
    """Find every occurrence of every suggestion's current phrase.

    Suggestions are scanned in input order. Within one phrase the scan resumes
    after each hit, so occurrences of the same phrase never overlap each other.
    Occurrences of different phrases may overlap and are all recorded.

    Args:
        text: Source text to search
        suggestions: Suggestions whose current_phrase is searched for

    Returns:
        Match spans in discovery order
    """
    spans: List[MatchSpan] = []

    for suggestion in suggestions:
        phrase = suggestion.current_phrase
        if not phrase:
            continue

        pattern = re.compile(re.escape(phrase), re.IGNORECASE)
        for match in pattern.finditer(text):
            spans.append(MatchSpan(start=match.start(), end=match.end(), suggestion=suggestion))

    return spans


def order_spans(spans: Iterable[MatchSpan]) -> List[MatchSpan]:
    """Sort spans by start ascending, then end descending.

    The sort is stable, so spans with identical offsets keep discovery order.
    """
    return sorted(spans, key=lambda span: (span.start, -span.end))


def select_spans(ordered_spans: Iterable[MatchSpan]) -> List[MatchSpan]:
    """Greedily keep spans that start at or after the end of the last kept span.

    Args:
        ordered_spans: Spans already sorted with order_spans()

    Returns:
        Non-overlapping spans in text order
    """
    selected: List[MatchSpan] = []
    cursor = 0

    for span in ordered_spans:
        if span.start < cursor:
            continue
        selected.append(span)
        cursor = span.end

    return selected


def segments_from_spans(text: str, spans: Sequence[MatchSpan]) -> List[Segment]:
    """Cut text into plain and annotated segments around selected spans.

    Args:
        text: Source text
        spans: Non-overlapping spans in text order (see select_spans())

    Returns:
        Segments whose contents concatenate back to text
    """
    segments: List[Segment] = []
    cursor = 0

    for span in spans:
        if cursor < span.start:
            segments.append(Segment(content=text[cursor:span.start]))
        segments.append(Segment(content=text[span.start:span.end], suggestion=span.suggestion))
        cursor = span.end

    if cursor < len(text):
        segments.append(Segment(content=text[cursor:]))

    return segments


class SuggestionHighlighter:
    """Builds display segments for a resume and its suggestions.

    Stateless apart from its logger; safe to share between requests.
    """

    def __init__(self, logger_instance: Optional[logging.Logger] = None):
        """Initialize SuggestionHighlighter.

        Args:
            logger_instance: Optional logger instance (defaults to module logger)
        """
        self.logger = logger_instance or logger

    def build_segments(self, text: str, suggestions: Sequence[Suggestion]) -> List[Segment]:
        """Project suggestions onto text.

        Args:
            text: Source (resume) text
            suggestions: Validated suggestions, in the order they were reported

        Returns:
            Ordered, non-overlapping segments covering text exactly. Empty text
            yields an empty list.
        """
        discovered = find_match_spans(text, suggestions)
        selected = select_spans(order_spans(discovered))
        segments = segments_from_spans(text, selected)

        self.logger.debug(
            "Built highlighted segments",
            extra={
                "event": "highlighting.segments.built",
                "suggestion_count": len(suggestions),
                "match_count": len(discovered),
                "accepted_count": len(selected),
                "discarded_count": len(discovered) - len(selected),
                "segment_count": len(segments),
            },
        )

        return segments


_default_highlighter = SuggestionHighlighter()


def build_segments(text: str, suggestions: Sequence[Suggestion]) -> List[Segment]:
    """Project suggestions onto text with the shared default highlighter.

    Example:
        >>> suggestion = Suggestion(current_phrase="Led a team", confidence="high")
        >>> [s.content for s in build_segments("Led a team of engineers.", [suggestion])]
        ['Led a team', ' of engineers.']
    """
    return _default_highlighter.build_segments(text, suggestions)
