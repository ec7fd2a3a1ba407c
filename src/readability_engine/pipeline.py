from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from .classification import (
    audience_for_score,
    badge_for_score,
    grade_for_score,
    level_for_score,
)
from .config import ReadabilityConfig
from .constraints import find_content_issues, has_blocking_issues
from .markup import looks_like_markup, strip_markup
from .models import ContentIssue, Document, ReadabilityReport
from .scoring import score_breakdown
from .textutils import count_display_words

logger = logging.getLogger(__name__)


def prepare_text(document: Document, config: ReadabilityConfig) -> str:
    """Return the text that will actually be scored."""
    if config.strip_markup and looks_like_markup(document.text):
        return strip_markup(document.text)
    return document.text


def analyze_document(
    document: Document, config: ReadabilityConfig | None = None
) -> ReadabilityReport:
    """Score a single document and attach its display labels."""
    cfg = config or ReadabilityConfig()
    return _build_report(document.doc_id, prepare_text(document, cfg), cfg)


def _build_report(
    doc_id: str, text: str, config: ReadabilityConfig
) -> ReadabilityReport:
    breakdown = score_breakdown(text)
    score = breakdown.score
    logger.debug(
        "Scored doc=%s score=%.2f paragraphs=%d",
        doc_id,
        score,
        breakdown.paragraph_count,
    )
    return ReadabilityReport(
        doc_id=doc_id,
        score=score,
        level=level_for_score(score),
        audience=audience_for_score(score),
        badge=badge_for_score(score),
        grade=grade_for_score(score),
        word_count=count_display_words(text),
        character_count=len(text),
        breakdown=breakdown if config.include_breakdown else None,
    )


def analyze_corpus(
    documents: List[Document], config: ReadabilityConfig | None = None
) -> Dict[str, Tuple[ReadabilityReport, List[ContentIssue]]]:
    """Score every document and run the content checks on each."""
    cfg = config or ReadabilityConfig()
    results: Dict[str, Tuple[ReadabilityReport, List[ContentIssue]]] = {}
    for document in documents:
        prepared = Document(document.doc_id, prepare_text(document, cfg))
        report = _build_report(prepared.doc_id, prepared.text, cfg)
        issues = find_content_issues(prepared, report, cfg)
        if has_blocking_issues(issues):
            logger.warning(
                "Document %s has blocking issues: %s",
                document.doc_id,
                ", ".join(issue.code for issue in issues),
            )
        results[document.doc_id] = (report, issues)
    return results
