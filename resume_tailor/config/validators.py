"""Additional validation utilities for configuration."""

import warnings
from typing import Any, Dict, List

KNOWN_SECTIONS = {"logging", "highlighting", "output"}


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check configuration for potential issues and return warnings.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    unknown = sorted(str(key) for key in config_dict if key not in KNOWN_SECTIONS)
    if unknown:
        warning_messages.append(
            f"Unknown configuration sections will be ignored: {', '.join(unknown)}"
        )

    highlighting = config_dict.get("highlighting", {})
    if isinstance(highlighting, dict):
        marker_start = highlighting.get("marker_start", "**")
        marker_end = highlighting.get("marker_end", "**")
        if marker_start == "" and marker_end == "":
            warning_messages.append(
                "Both highlight markers are empty; annotated segments will be "
                "indistinguishable in markers output"
            )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """Emit warning messages using Python's warnings module."""
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
