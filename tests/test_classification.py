import pytest

from readability_engine.classification import (
    AUDIENCE_BANDS,
    AUDIENCE_FLOOR,
    LEVEL_BANDS,
    LEVEL_FLOOR,
    audience_for_score,
    badge_for_score,
    grade_for_score,
    level_for_score,
)


@pytest.mark.parametrize(
    ("score", "level", "audience"),
    [
        (100, "Very Easy", "5th grade"),
        (90, "Very Easy", "5th grade"),
        (89.999, "Easy", "6th grade"),
        (80, "Easy", "6th grade"),
        (70, "Fairly Easy", "7th grade"),
        (60, "Standard", "8th & 9th grade"),
        (50, "Fairly Difficult", "10th to 12th grade"),
        (30, "Difficult", "College level"),
        (29.99, "Very Difficult", "Graduate level"),
        (0, "Very Difficult", "Graduate level"),
    ],
)
def test_level_and_audience_boundaries(score: float, level: str, audience: str):
    assert level_for_score(score) == level
    assert audience_for_score(score) == audience


def test_labels_get_no_easier_as_score_drops():
    levels = [label for _, label in LEVEL_BANDS] + [LEVEL_FLOOR]
    audiences = [label for _, label in AUDIENCE_BANDS] + [AUDIENCE_FLOOR]
    previous_level = previous_audience = 0
    for tenth in range(1000, -1, -1):
        score = tenth / 10
        level_idx = levels.index(level_for_score(score))
        audience_idx = audiences.index(audience_for_score(score))
        assert level_idx >= previous_level
        assert audience_idx >= previous_audience
        previous_level, previous_audience = level_idx, audience_idx


@pytest.mark.parametrize(
    ("score", "badge", "grade"),
    [
        (95, "Excellent", "A"),
        (80, "Excellent", "A"),
        (79.9, "Good", "B"),
        (60, "Good", "B"),
        (40, "Average", "C"),
        (39.9, "Needs Work", "D"),
        (0, "Needs Work", "D"),
    ],
)
def test_badge_and_grade(score: float, badge: str, grade: str):
    assert badge_for_score(score) == badge
    assert grade_for_score(score) == grade
