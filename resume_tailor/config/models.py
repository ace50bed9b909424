"""Configuration schema models using Pydantic."""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class OutputFormat(str, Enum):
    """How the CLI renders a tailoring analysis."""

    MARKERS = "markers"
    HTML = "html"
    JSON = "json"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True}


class HighlightingConfig(BaseModel):
    """Markers and tooltip layout used when rendering annotated segments."""

    marker_start: str = Field("**", description="Inserted before each annotated segment")
    marker_end: str = Field("**", description="Inserted after each annotated segment")
    tooltip_separator: str = Field(
        " - ", min_length=1, description="Separator between requirement and reason in tooltips"
    )

    @field_validator("marker_start", "marker_end")
    @classmethod
    def reject_newlines(cls, v: str) -> str:
        """Markers must stay on one line so they cannot split resume lines."""
        if "\n" in v or "\r" in v:
            raise ValueError("Markers cannot contain line breaks")
        return v


class OutputConfig(BaseModel):
    """CLI output settings."""

    format: OutputFormat = Field(OutputFormat.MARKERS, description="markers, html or json")
    include_summary: bool = Field(
        True, description="Append the alignment summary to markers and html output"
    )

    model_config = {"use_enum_values": True}


class AppConfig(BaseModel):
    """Root configuration object for resume-tailor.

    Every section has defaults, so an empty file (or no file) is valid.
    """

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    highlighting: HighlightingConfig = Field(
        default_factory=HighlightingConfig, description="Highlight rendering settings"
    )
    output: OutputConfig = Field(default_factory=OutputConfig, description="CLI output settings")
