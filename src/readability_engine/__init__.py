"""
readability_engine scores free-form text content for readability.
"""

from __future__ import annotations

from .classification import (
    audience_for_score,
    badge_for_score,
    grade_for_score,
    level_for_score,
)
from .config import ReadabilityConfig, config_from_dict, config_from_yaml, load_config
from .metrics import analyze_text
from .models import Document, ReadabilityReport, ScoreBreakdown, TextMetrics
from .pipeline import analyze_corpus, analyze_document
from .scoring import compute_readability_score, score_breakdown

__all__ = [
    "ReadabilityConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "Document",
    "ReadabilityReport",
    "ScoreBreakdown",
    "TextMetrics",
    "analyze_text",
    "analyze_corpus",
    "analyze_document",
    "compute_readability_score",
    "score_breakdown",
    "level_for_score",
    "audience_for_score",
    "badge_for_score",
    "grade_for_score",
]

__version__ = "0.1.0"
