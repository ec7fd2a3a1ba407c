from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import Any, Iterable, cast

import pandas as pd

from .models import ReadabilityReport

REPORT_COLUMNS = [
    "doc_id",
    "score",
    "level",
    "audience",
    "badge",
    "grade",
    "word_count",
    "character_count",
]


def report_to_dict(report: ReadabilityReport) -> dict[str, Any]:
    """Serialize a report into a flat JSON-friendly dictionary."""
    payload: dict[str, Any] = {name: getattr(report, name) for name in REPORT_COLUMNS}
    breakdown = report.breakdown
    if breakdown is not None:
        payload["flesch"] = breakdown.flesch
        payload["complex_penalty"] = breakdown.complex_penalty
        payload["sentence_bonus"] = breakdown.sentence_bonus
        payload["paragraph_bonus"] = breakdown.paragraph_bonus
        payload["paragraph_count"] = breakdown.paragraph_count
        metrics = breakdown.metrics
        if metrics is not None:
            # Scored counts are floored at 1, so keep them apart from the
            # display word_count above.
            payload.update(
                {f"scored_{key}": value for key, value in asdict(metrics).items()}
            )
            payload["avg_words_per_sentence"] = metrics.avg_words_per_sentence
            payload["avg_syllables_per_word"] = metrics.avg_syllables_per_word
    return payload


def reports_to_frame(reports: Iterable[ReadabilityReport]) -> pd.DataFrame:
    """Build a table with one row per document."""
    rows = [report_to_dict(report) for report in reports]
    if not rows:
        return pd.DataFrame(columns=REPORT_COLUMNS)
    return pd.DataFrame(rows)


def write_report(frame: pd.DataFrame, path: Path) -> Path:
    """Write the table as CSV, or Parquet for any other suffix."""
    df = cast(Any, frame)
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() == ".csv":
        df.to_csv(path, index=False)
    else:
        df.to_parquet(path, index=False)
    return path
