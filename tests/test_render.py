"""Unit tests for segment rendering helpers."""

import doctest

import pytest

from resume_tailor.domain.models import Segment, Suggestion, TailorSummary
from resume_tailor.highlighting import (
    HighlightTemplateError,
    HtmlRenderer,
    build_segments,
    format_summary,
    render_html,
    render_marked_text,
    segment_tooltip,
)
from resume_tailor.highlighting import render as render_module


class TestSegmentTooltip:
    """Tests for segment_tooltip."""

    def test_joins_requirement_and_reason(self, led_team_suggestion):
        """Test the default tooltip layout."""
        assert (
            segment_tooltip(led_team_suggestion)
            == "People leadership - Mirrors the leadership wording of the posting"
        )

    def test_custom_separator(self):
        """Test a custom separator."""
        suggestion = Suggestion(requirement="Go", reason="Listed in posting")
        assert segment_tooltip(suggestion, separator=": ") == "Go: Listed in posting"

    def test_omits_empty_parts(self):
        """Test that missing parts leave no dangling separator."""
        assert segment_tooltip(Suggestion(reason="Only reason")) == "Only reason"
        assert segment_tooltip(Suggestion()) == ""


class TestRenderMarkedText:
    """Tests for render_marked_text."""

    def test_wraps_annotated_segments(self, resume_text, led_team_suggestion):
        """Test default markers."""
        segments = build_segments(resume_text, [led_team_suggestion])

        assert render_marked_text(segments) == "**Led a team** of engineers."

    def test_custom_markers(self, resume_text, led_team_suggestion):
        """Test custom markers."""
        segments = build_segments(resume_text, [led_team_suggestion])

        assert render_marked_text(segments, "[", "]") == "[Led a team] of engineers."

    def test_empty_segments(self):
        """Test rendering nothing."""
        assert render_marked_text([]) == ""


class TestRenderHtml:
    """Tests for render_html."""

    def test_renders_mark_and_span(self, resume_text, led_team_suggestion):
        """Test the HTML structure."""
        html = render_html(build_segments(resume_text, [led_team_suggestion]))

        assert html.startswith('<div class="highlighted-resume"')
        assert html.endswith("</div>")
        assert (
            '<mark class="suggestion confidence-high" '
            'title="People leadership - Mirrors the leadership wording of the posting">'
            "Led a team</mark>"
        ) in html
        assert "<span> of engineers.</span>" in html

    def test_escapes_content_and_title(self):
        """Test that untrusted text cannot inject markup."""
        suggestion = Suggestion(
            current_phrase="<b>", requirement='say "hi"', reason="<script>x</script>"
        )
        segments = [
            Segment(content="a & "),
            Segment(content="<b>", suggestion=suggestion),
        ]

        html = render_html(segments)

        assert "<span>a &amp; </span>" in html
        assert ">&lt;b&gt;</mark>" in html
        assert 'title="say &#34;hi&#34; - &lt;script&gt;x&lt;/script&gt;"' in html
        assert "<script>" not in html

    def test_summary_paragraph(self, resume_text, led_team_suggestion):
        """Test that a summary is appended as an escaped paragraph."""
        summary = TailorSummary(alignment_score=0.5, missing_keywords=["C&C++"])

        html = render_html(build_segments(resume_text, [led_team_suggestion]), summary=summary)

        assert html.endswith(
            "</div>\n"
            '<p class="tailor-summary">ATS alignment: 50%<br>'
            "Keyword coverage: none<br>Missing keywords: C&amp;C++</p>"
        )

    def test_whitespace_preserved(self):
        """Test that newlines in the resume survive rendering."""
        html = render_html([Segment(content="line one\n\nline two\n")])

        assert "<span>line one\n\nline two\n</span>" in html

    def test_custom_separator(self, resume_text, led_team_suggestion):
        """Test the tooltip separator option."""
        html = render_html(build_segments(resume_text, [led_team_suggestion]), tooltip_separator=": ")

        assert 'title="People leadership: Mirrors the leadership wording of the posting"' in html

    def test_empty_segments(self):
        """Test that no segments still yields the wrapper."""
        assert render_html([]) == '<div class="highlighted-resume" style="white-space: pre-wrap"></div>'

    def test_missing_template_raises(self):
        """Test that template errors are wrapped."""
        renderer = HtmlRenderer(template_name="missing.html.j2")

        with pytest.raises(HighlightTemplateError, match="missing.html.j2"):
            renderer.render([])


class TestFormatSummary:
    """Tests for format_summary."""

    def test_full_summary(self):
        """Test a summary with all fields populated."""
        summary = TailorSummary(
            alignment_score=0.72,
            keyword_coverage=["team", "engineers"],
            missing_keywords=["Python"],
        )

        assert format_summary(summary) == (
            "ATS alignment: 72%\nKeyword coverage: team, engineers\nMissing keywords: Python"
        )

    def test_empty_summary(self):
        """Test a default summary."""
        assert format_summary(TailorSummary()) == (
            "ATS alignment: 0%\nKeyword coverage: none\nMissing keywords: none"
        )


class TestDocumentedExamples:
    """The usage examples in the render module docstrings."""

    def test_examples_run_as_written(self):
        """Test that every docstring example produces its documented output."""
        results = doctest.testmod(render_module)

        assert results.attempted >= 4
        assert results.failed == 0
