from __future__ import annotations

from .config import ReadabilityConfig
from .models import ContentIssue, Document, ReadabilityReport
from .textutils import trim

EMPTY_CONTENT = "empty-content"
TOO_SHORT = "too-short"
LOW_READABILITY = "low-readability"

BLOCKING_CODES = frozenset({EMPTY_CONTENT, TOO_SHORT})


def find_content_issues(
    document: Document, report: ReadabilityReport, config: ReadabilityConfig
) -> list[ContentIssue]:
    """Check a document against the publishing rules in the config."""
    issues: list[ContentIssue] = []
    stripped = trim(document.text)

    if not stripped:
        issues.append(
            ContentIssue(
                doc_id=document.doc_id,
                code=EMPTY_CONTENT,
                message="Content is empty.",
            )
        )
        return issues

    if len(stripped) < config.min_content_chars:
        issues.append(
            ContentIssue(
                doc_id=document.doc_id,
                code=TOO_SHORT,
                message=(
                    f"Content has {len(stripped)} characters; at least "
                    f"{config.min_content_chars} are required"
                ),
            )
        )

    minimum = config.min_readability_score
    if minimum is not None and report.score < minimum:
        issues.append(
            ContentIssue(
                doc_id=document.doc_id,
                code=LOW_READABILITY,
                message=f"Readability {report.score:.1f} is below minimum {minimum:.1f}",
            )
        )

    return issues


def has_blocking_issues(issues: list[ContentIssue]) -> bool:
    """Return True if any issue should prevent publishing."""
    return any(issue.code in BLOCKING_CODES for issue in issues)
