"""Highlighting of tailoring suggestions inside resume text.

This module provides:
- SuggestionHighlighter / build_segments: Project suggestions onto text as segments
- HtmlRenderer / render_html: Jinja2 rendering of segments as an HTML fragment
- Helpers for marker-wrapped text, tooltips and summaries
"""

from .engine import SuggestionHighlighter, build_segments
from .exceptions import HighlightTemplateError
from .render import (
    HtmlRenderer,
    format_summary,
    render_html,
    render_marked_text,
    segment_tooltip,
)

__all__ = [
    "SuggestionHighlighter",
    "build_segments",
    "HtmlRenderer",
    "HighlightTemplateError",
    "render_marked_text",
    "render_html",
    "segment_tooltip",
    "format_summary",
]
