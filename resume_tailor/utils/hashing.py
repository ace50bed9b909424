"""Hashing utilities for identifying tailoring runs.

The analysis key is a deterministic fingerprint of a resume and job
description pair. It tags every log record of a run and lets callers
recognise repeated requests for the same pair.
"""

import hashlib
import re


def compute_analysis_key(source_text: str, job_description: str) -> str:
    """Compute a deterministic key for a resume/job description pair.

    Both texts are normalized first (lowercase, trimmed, whitespace collapsed),
    so formatting-only differences produce the same key.

    Args:
        source_text: Resume text
        job_description: Job description text

    Returns:
        Hexadecimal SHA256 digest (64 characters)
    """
    composite = f"{_normalize_text(source_text)}\n---\n{_normalize_text(job_description)}"
    return hash_string(composite)


def _normalize_text(text: str) -> str:
    return re.sub(r"\s+", " ", text.lower().strip())


def hash_string(value: str) -> str:
    """Compute the SHA256 hex digest of a string."""
    return hashlib.sha256(value.encode("utf-8")).hexdigest()
