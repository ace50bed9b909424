"""Orchestration of a tailoring run: decode, normalize, highlight."""

import time
from typing import Any, Optional

from resume_tailor.highlighting.engine import SuggestionHighlighter
from resume_tailor.logging import get_logger
from resume_tailor.logging.context import log_context
from resume_tailor.normalization.exceptions import FormatError
from resume_tailor.normalization.service import TailorResponseNormalizer, parse_response_text
from resume_tailor.utils.hashing import compute_analysis_key
from resume_tailor.utils.timestamps import utc_now

from .models import TailorAnalysis

logger = get_logger(__name__, component="pipeline")


class TailorPipeline:
    """
    Turns one AI service response into a highlighted resume.

    The pipeline holds only stateless collaborators, so a single instance can
    serve concurrent requests.
    """

    def __init__(
        self,
        normalizer: Optional[TailorResponseNormalizer] = None,
        highlighter: Optional[SuggestionHighlighter] = None,
    ):
        """
        Initialize the tailoring pipeline.

        Args:
            normalizer: Normalizer for decoded responses (default instance if omitted)
            highlighter: Highlighter for segment building (default instance if omitted)
        """
        self.normalizer = normalizer or TailorResponseNormalizer()
        self.highlighter = highlighter or SuggestionHighlighter()

    def run(self, response: Any, source_text: str, job_description: str) -> TailorAnalysis:
        """
        Execute a tailoring run.

        Args:
            response: Raw response text from the AI service, or an already
                decoded value (dict, list, ...)
            source_text: Resume text
            job_description: Job description text

        Returns:
            TailorAnalysis with the validated result and its segments

        Raises:
            FormatError: If the response is not a JSON object
        """
        started_at = utc_now()
        start = time.time()
        analysis_key = compute_analysis_key(source_text, job_description)

        with log_context(analysis_key=analysis_key):
            logger.info(
                "Tailoring run started",
                extra={
                    "event": "tailor.run.started",
                    "source_length": len(source_text),
                    "job_description_length": len(job_description),
                    "response_is_text": isinstance(response, str),
                },
            )

            try:
                payload = parse_response_text(response) if isinstance(response, str) else response
                result = self.normalizer.normalize(payload, source_text, job_description)
            except FormatError as e:
                logger.error(
                    f"AI response rejected: {e}",
                    extra={
                        "event": "tailor.run.format_error",
                        "payload_type": e.payload_type,
                    },
                )
                raise

            segments = self.highlighter.build_segments(result.source_text, result.suggestions)

            analysis = TailorAnalysis(
                result=result,
                segments=segments,
                analysis_key=analysis_key,
                started_at=started_at,
                finished_at=utc_now(),
                duration_seconds=round(time.time() - start, 6),
            )

            logger.info(
                "Tailoring run completed",
                extra={
                    "event": "tailor.run.completed",
                    "suggestion_count": len(result.suggestions),
                    "annotated_count": analysis.annotated_count,
                    "unmatched_count": len(analysis.unmatched_suggestions),
                    "alignment_score": result.summary.alignment_score,
                    "duration_seconds": analysis.duration_seconds,
                },
            )

        return analysis
