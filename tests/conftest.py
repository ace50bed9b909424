"""Shared pytest fixtures for resume-tailor tests."""

import logging

import pytest

from resume_tailor.domain.models import Suggestion
from resume_tailor.logging.context import clear_log_context

ENV_VARS = ("LOG_LEVEL", "LOG_FORMAT", "TAILOR_OUTPUT_FORMAT", "ENVIRONMENT")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every environment variable the config layer reads."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture(autouse=True)
def clean_log_context():
    """Clear logging context before and after each test."""
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def resume_text():
    """Short resume used across scenarios."""
    return "Led a team of engineers."


@pytest.fixture
def led_team_suggestion():
    """Suggestion targeting the start of resume_text."""
    return Suggestion(
        current_phrase="Led a team",
        suggested_phrase="Managed a cross-functional team",
        requirement="People leadership",
        reason="Mirrors the leadership wording of the posting",
        confidence="high",
    )


@pytest.fixture
def raw_payload():
    """Well-formed AI response payload."""
    return {
        "suggestions": [
            {
                "currentPhrase": "Led a team",
                "suggestedPhrase": "Managed a cross-functional team",
                "requirement": "People leadership",
                "reason": "Mirrors the leadership wording of the posting",
                "confidence": "high",
            },
            {
                "currentPhrase": "engineers",
                "suggestedPhrase": "backend engineers",
                "requirement": "Backend experience",
                "reason": "Names the stack the role uses",
                "confidence": "low",
            },
        ],
        "summary": {
            "atsAlignmentScore": 0.72,
            "keywordCoverage": ["team", "engineers"],
            "missingKeywords": ["Python", "AWS"],
        },
    }


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level changed by configure_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level

    yield root

    root.handlers[:] = handlers
    root.setLevel(level)
