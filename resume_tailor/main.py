"""Command-line entry point for resume-tailor.

Reads an AI service response, the resume text and the job description from
files, validates the response and prints the highlighted resume.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, Sequence, Tuple

from dotenv import load_dotenv

from resume_tailor.config.environment import EnvironmentConfig
from resume_tailor.config.exceptions import ConfigurationError
from resume_tailor.config.loader import load_config
from resume_tailor.config.models import AppConfig, OutputFormat
from resume_tailor.highlighting.render import format_summary, render_html, render_marked_text
from resume_tailor.logging import get_logger
from resume_tailor.logging.config import configure_logging
from resume_tailor.normalization.exceptions import FormatError
from resume_tailor.pipeline import TailorAnalysis, TailorPipeline
from resume_tailor.utils.timestamps import format_timestamp

logger = get_logger(__name__, component="cli")

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_FORMAT_ERROR = 3


def load_runtime_config(
    config_path: Optional[Path],
    log_level_override: Optional[str] = None,
    output_format_override: Optional[str] = None,
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load configuration and resolve overrides.

    Priority for log level, log format and output format: CLI > environment > config file.
    The resolved values are written back into the returned AppConfig.

    Raises:
        ConfigurationError: If configuration is invalid
    """
    app_config, env_config = load_config(config_path)

    log_level = log_level_override or env_config.log_level or app_config.logging.level
    log_format = env_config.log_format or app_config.logging.format
    output_format = output_format_override or env_config.output_format or app_config.output.format

    app_config = app_config.model_copy(
        update={
            "logging": app_config.logging.model_copy(
                update={"level": log_level, "format": log_format}
            ),
            "output": app_config.output.model_copy(update={"format": output_format}),
        }
    )
    return app_config, env_config


def read_input(path: str) -> str:
    """Read a UTF-8 text input; '-' reads standard input."""
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def render_analysis(analysis: TailorAnalysis, app_config: AppConfig) -> str:
    """Render an analysis in the configured output format."""
    output_format = app_config.output.format
    highlighting = app_config.highlighting

    if output_format == OutputFormat.JSON.value:
        document = {
            "analysisKey": analysis.analysis_key,
            "analyzedAt": format_timestamp(analysis.finished_at),
            "data": analysis.result.model_dump(mode="json", by_alias=True),
            "segments": [
                segment.model_dump(mode="json", by_alias=True, exclude_none=True)
                for segment in analysis.segments
            ],
        }
        return json.dumps(document, indent=2, ensure_ascii=False)

    if output_format == OutputFormat.HTML.value:
        return render_html(
            analysis.segments,
            tooltip_separator=highlighting.tooltip_separator,
            summary=analysis.result.summary if app_config.output.include_summary else None,
        )

    body = render_marked_text(
        analysis.segments,
        marker_start=highlighting.marker_start,
        marker_end=highlighting.marker_end,
    )
    if app_config.output.include_summary:
        body += "\n\n" + format_summary(analysis.result.summary)
    return body


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the resume-tailor command."""
    parser = argparse.ArgumentParser(
        prog="resume-tailor",
        description="Validate AI resume-tailoring suggestions and highlight them in the resume",
    )
    parser.add_argument(
        "--response",
        required=True,
        help="File containing the AI service response ('-' for stdin)",
    )
    parser.add_argument("--resume", required=True, help="Plain-text resume file")
    parser.add_argument("--job", required=True, help="Plain-text job description file")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: config.yaml if present)",
    )
    parser.add_argument(
        "--format",
        default=None,
        choices=[output_format.value for output_format in OutputFormat],
        help="Output format (overrides config and environment)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config and environment)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        0 on success, 1 on configuration or input errors, 3 when the AI
        response is rejected as malformed. argparse itself exits with 2 on
        usage errors.
    """
    load_dotenv()
    args = build_parser().parse_args(argv)

    try:
        app_config, env_config = load_runtime_config(args.config, args.log_level, args.format)
    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    configure_logging(
        level=app_config.logging.level,
        format_type=app_config.logging.format,
        environment=env_config.environment,
    )

    try:
        response_text = read_input(args.response)
        resume_text = read_input(args.resume)
        job_description = read_input(args.job)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(
            f"Failed to read input: {e}",
            extra={"event": "cli.input.failed", "error_type": type(e).__name__},
        )
        print(f"Input Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    try:
        analysis = TailorPipeline().run(response_text, resume_text, job_description)
    except FormatError as e:
        print(f"Format Error: {e}", file=sys.stderr)
        return EXIT_FORMAT_ERROR

    print(render_analysis(analysis, app_config))

    logger.info(
        "Output rendered",
        extra={
            "event": "cli.output.rendered",
            "output_format": app_config.output.format,
            "segment_count": len(analysis.segments),
        },
    )
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
