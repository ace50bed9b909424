"""Utility functions for hashing and time handling."""

from .hashing import compute_analysis_key, hash_string
from .timestamps import format_timestamp, utc_now

__all__ = [
    "compute_analysis_key",
    "hash_string",
    "utc_now",
    "format_timestamp",
]
