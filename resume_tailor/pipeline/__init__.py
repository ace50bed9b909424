"""Pipeline orchestration for decoding, normalizing and highlighting AI responses."""

from .models import TailorAnalysis
from .runner import TailorPipeline

__all__ = [
    "TailorPipeline",
    "TailorAnalysis",
]
