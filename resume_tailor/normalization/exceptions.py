"""Exceptions raised while decoding AI service responses."""

from typing import Optional


class FormatError(Exception):
    """The AI service response does not have the expected top-level shape.

    Raised when the decoded payload is not a JSON object, or when the response
    text cannot be decoded as JSON at all. Everything below the top level is
    coerced to defaults instead of raising. Callers decide whether to retry
    the upstream call or surface a failure to the user.
    """

    def __init__(self, message: str, payload_type: Optional[str] = None) -> None:
        """Initialize format error.

        Args:
            message: Human-readable error message
            payload_type: Python type name of the rejected payload, if one was decoded
        """
        super().__init__(message)
        self.payload_type = payload_type
