"""Configuration management module for resume-tailor."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import load_config, parse_config_dict, validate_config_file
from .models import (
    AppConfig,
    HighlightingConfig,
    LogFormat,
    LoggingConfig,
    LogLevel,
    OutputConfig,
    OutputFormat,
)

__all__ = [
    # Loader functions
    "load_config",
    "parse_config_dict",
    "validate_config_file",
    "load_environment_config",
    # Configuration models
    "AppConfig",
    "LoggingConfig",
    "HighlightingConfig",
    "OutputConfig",
    "EnvironmentConfig",
    # Enums
    "LogLevel",
    "LogFormat",
    "OutputFormat",
    # Exceptions
    "ConfigurationError",
]
