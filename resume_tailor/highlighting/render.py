"""Rendering helpers for highlighted resume segments.

Turns a segment sequence into text a user can read: marker-wrapped plain
text for terminals, or an HTML fragment (rendered with Jinja2) where each
annotated segment is a <mark> whose tooltip shows the requirement and reason
behind the suggestion.
"""

from functools import partial
from typing import Iterable, List, Optional

from jinja2 import Environment, PackageLoader, StrictUndefined, TemplateError

from resume_tailor.domain.models import Segment, Suggestion, TailorSummary
from resume_tailor.logging import get_logger

from .exceptions import HighlightTemplateError

logger = get_logger(__name__, component="highlighting")


def segment_tooltip(suggestion: Suggestion, separator: str = " - ") -> str:
    """Build tooltip text from a suggestion's requirement and reason.

    Empty parts are omitted, so a suggestion with neither yields "".

    Example:
        >>> segment_tooltip(Suggestion(requirement="Leadership", reason="Matches wording"))
        'Leadership - Matches wording'
    """
    parts = [part for part in (suggestion.requirement, suggestion.reason) if part]
    return separator.join(parts)


def render_marked_text(
    segments: Iterable[Segment], marker_start: str = "**", marker_end: str = "**"
) -> str:
    """Render segments as text with annotated segments wrapped in markers.

    Args:
        segments: Segments from build_segments()
        marker_start: Marker inserted before each annotated segment
        marker_end: Marker inserted after each annotated segment

    Returns:
        Source text with markers around annotated spans

    Example:
        >>> from resume_tailor.highlighting import build_segments
        >>> suggestion = Suggestion(current_phrase="Led a team")
        >>> render_marked_text(build_segments("Led a team of engineers.", [suggestion]))
        '**Led a team** of engineers.'
    """
    parts: List[str] = []
    for segment in segments:
        if segment.is_annotated:
            parts.append(f"{marker_start}{segment.content}{marker_end}")
        else:
            parts.append(segment.content)
    return "".join(parts)


class HtmlRenderer:
    """Renders segments as an HTML fragment using Jinja2.

    The template lives in the resume_tailor.highlighting.templates package
    directory and is cached by the environment after its first use. Content
    and tooltips are auto-escaped; whitespace is preserved by the
    ``white-space: pre-wrap`` style on the wrapper.
    """

    def __init__(
        self,
        template_dir: str = "templates",
        template_name: str = "highlighted_resume.html.j2",
    ):
        """Initialize the renderer with a Jinja2 environment.

        Args:
            template_dir: Directory name within the resume_tailor.highlighting package
            template_name: Filename of the HTML template
        """
        self.template_name = template_name
        self.env = Environment(
            loader=PackageLoader("resume_tailor.highlighting", template_dir),
            autoescape=True,
            undefined=StrictUndefined,
        )

    def render(
        self,
        segments: Iterable[Segment],
        tooltip_separator: str = " - ",
        summary: Optional[TailorSummary] = None,
    ) -> str:
        """Render segments, optionally followed by a summary paragraph.

        Args:
            segments: Segments from build_segments()
            tooltip_separator: Separator between requirement and reason in the title attribute
            summary: Summary appended as <p class="tailor-summary"> when given

        Returns:
            A <div> element containing <span> and <mark> children

        Raises:
            HighlightTemplateError: If the template cannot be loaded or rendered
        """
        context = {
            "segments": list(segments),
            "tooltip": partial(segment_tooltip, separator=tooltip_separator),
            "summary_lines": format_summary(summary).splitlines() if summary is not None else [],
        }

        try:
            return self.env.get_template(self.template_name).render(context)
        except TemplateError as e:
            error_msg = f"Highlight template rendering failed: {e}"
            logger.error(error_msg, exc_info=True, extra={"event": "highlighting.render.failed"})
            raise HighlightTemplateError(error_msg) from e


_default_html_renderer = HtmlRenderer()


def render_html(
    segments: Iterable[Segment],
    tooltip_separator: str = " - ",
    summary: Optional[TailorSummary] = None,
) -> str:
    """Render segments as an HTML fragment with the default template.

    Example:
        >>> from resume_tailor.highlighting import build_segments
        >>> suggestion = Suggestion(current_phrase="Led a team", requirement="Leadership")
        >>> render_html(build_segments("Led a team of engineers.", [suggestion]))
        '<div class="highlighted-resume" style="white-space: pre-wrap"><mark class="suggestion confidence-medium" title="Leadership">Led a team</mark><span> of engineers.</span></div>'
    """
    return _default_html_renderer.render(segments, tooltip_separator, summary)


def format_summary(summary: TailorSummary) -> str:
    """Format a tailoring summary for display.

    Example:
        >>> format_summary(TailorSummary(alignment_score=0.72, keyword_coverage=["python"]))
        'ATS alignment: 72%\\nKeyword coverage: python\\nMissing keywords: none'
    """
    coverage = ", ".join(summary.keyword_coverage) if summary.keyword_coverage else "none"
    missing = ", ".join(summary.missing_keywords) if summary.missing_keywords else "none"

    lines = [
        f"ATS alignment: {round(summary.alignment_score * 100)}%",
        f"Keyword coverage: {coverage}",
        f"Missing keywords: {missing}",
    ]
    return "\n".join(lines)
