"""Structured logging helpers shared by every resume_tailor component."""

import logging
from typing import Optional


class ComponentLoggerAdapter(logging.LoggerAdapter):
    """LoggerAdapter that merges its component field with per-call extras."""

    def process(self, msg, kwargs):
        extra = kwargs.get("extra", {})

        # Call-level extras win over the adapter defaults
        kwargs["extra"] = {**self.extra, **extra}

        return msg, kwargs


def get_logger(name: str, component: Optional[str] = None):
    """Get a logger that stamps every record with a component field.

    Args:
        name: Logger name (typically __name__)
        component: Optional component identifier to inject into all logs

    Returns:
        Logger or ComponentLoggerAdapter instance

    Example:
        >>> logger = get_logger(__name__, component="highlighting")
        >>> logger.info("Segments built", extra={"event": "highlighting.segments.built"})
    """
    logger = logging.getLogger(name)

    if component:
        return ComponentLoggerAdapter(logger, {"component": component})

    return logger
