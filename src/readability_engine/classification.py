from __future__ import annotations

from typing import Sequence, Tuple

# Lower bounds are inclusive and checked top-down.
LEVEL_BANDS: Sequence[Tuple[float, str]] = (
    (90.0, "Very Easy"),
    (80.0, "Easy"),
    (70.0, "Fairly Easy"),
    (60.0, "Standard"),
    (50.0, "Fairly Difficult"),
    (30.0, "Difficult"),
)
LEVEL_FLOOR = "Very Difficult"

AUDIENCE_BANDS: Sequence[Tuple[float, str]] = (
    (90.0, "5th grade"),
    (80.0, "6th grade"),
    (70.0, "7th grade"),
    (60.0, "8th & 9th grade"),
    (50.0, "10th to 12th grade"),
    (30.0, "College level"),
)
AUDIENCE_FLOOR = "Graduate level"

BADGE_BANDS: Sequence[Tuple[float, str]] = (
    (80.0, "Excellent"),
    (60.0, "Good"),
    (40.0, "Average"),
)
BADGE_FLOOR = "Needs Work"

GRADE_BANDS: Sequence[Tuple[float, str]] = (
    (80.0, "A"),
    (60.0, "B"),
    (40.0, "C"),
)
GRADE_FLOOR = "D"


def _lookup(score: float, bands: Sequence[Tuple[float, str]], floor: str) -> str:
    for threshold, label in bands:
        if score >= threshold:
            return label
    return floor


def level_for_score(score: float) -> str:
    """Readability level, "Very Easy" through "Very Difficult"."""
    return _lookup(score, LEVEL_BANDS, LEVEL_FLOOR)


def audience_for_score(score: float) -> str:
    """Target audience, "5th grade" through "Graduate level"."""
    return _lookup(score, AUDIENCE_BANDS, AUDIENCE_FLOOR)


def badge_for_score(score: float) -> str:
    """Coarse badge label shown on post cards."""
    return _lookup(score, BADGE_BANDS, BADGE_FLOOR)


def grade_for_score(score: float) -> str:
    """Letter grade shown in the editor's analysis panel."""
    return _lookup(score, GRADE_BANDS, GRADE_FLOOR)
