"""Environment variable loading and validation."""

import os
from typing import Optional

from .exceptions import ConfigurationError
from .models import LogFormat, LogLevel, OutputFormat

VALID_LOG_LEVELS = [level.value for level in LogLevel]
VALID_LOG_FORMATS = [log_format.value for log_format in LogFormat]
VALID_OUTPUT_FORMATS = [output_format.value for output_format in OutputFormat]


class EnvironmentConfig:
    """Environment variable configuration holder."""

    def __init__(
        self,
        log_level: Optional[str] = None,
        log_format: Optional[str] = None,
        output_format: Optional[str] = None,
        environment: Optional[str] = None,
    ):
        self.log_level = log_level
        self.log_format = log_format
        self.output_format = output_format
        self.environment = environment or "local"


def load_environment_config() -> EnvironmentConfig:
    """
    Load and validate environment variables.

    All variables are optional:
    - LOG_LEVEL: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - LOG_FORMAT: Override log format (json, key-value)
    - TAILOR_OUTPUT_FORMAT: Override CLI output format (markers, html, json)
    - ENVIRONMENT: Environment label attached to every log record (default: local)

    Returns:
        EnvironmentConfig object with validated values

    Raises:
        ConfigurationError: If a variable is set to an invalid value
    """
    errors = []

    log_level = os.getenv("LOG_LEVEL")
    log_format = os.getenv("LOG_FORMAT")
    output_format = os.getenv("TAILOR_OUTPUT_FORMAT")
    environment = os.getenv("ENVIRONMENT")

    if log_level:
        log_level = log_level.strip().upper()
        if log_level not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid LOG_LEVEL: '{log_level}'. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
            )

    if log_format:
        log_format = log_format.strip().lower()
        if log_format not in VALID_LOG_FORMATS:
            errors.append(
                f"Invalid LOG_FORMAT: '{log_format}'. Must be one of: {', '.join(VALID_LOG_FORMATS)}"
            )

    if output_format:
        output_format = output_format.strip().lower()
        if output_format not in VALID_OUTPUT_FORMATS:
            errors.append(
                f"Invalid TAILOR_OUTPUT_FORMAT: '{output_format}'. "
                f"Must be one of: {', '.join(VALID_OUTPUT_FORMATS)}"
            )

    if errors:
        raise ConfigurationError(
            "Environment variable validation failed",
            errors=errors,
            suggestions=[
                "Check the values in your .env file",
                "Unset the variable to fall back to the configuration file",
            ],
        )

    return EnvironmentConfig(
        log_level=log_level or None,
        log_format=log_format or None,
        output_format=output_format or None,
        environment=(environment or "").strip() or None,
    )
