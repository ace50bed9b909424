"""Resume tailoring core: normalize AI suggestions and highlight them in resume text."""

__version__ = "0.1.0"
