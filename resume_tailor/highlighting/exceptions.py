"""Exceptions for highlight rendering."""


class HighlightTemplateError(Exception):
    """Raised when the HTML template for highlighted segments fails to render."""
