from __future__ import annotations

import re
from typing import List

from .metrics import analyze_text
from .models import ScoreBreakdown
from .textutils import JS_WHITESPACE_CLASS, is_blank, trim

PARAGRAPH_SPLIT_RE = re.compile(r"\n" + JS_WHITESPACE_CLASS + r"*\n")

OPTIMAL_WORDS_PER_SENTENCE = 17.5
SINGLE_PARAGRAPH_BONUS = 60.0

FLESCH_WEIGHT = 0.6
SENTENCE_WEIGHT = 0.2
PARAGRAPH_WEIGHT = 0.1
COMPLEX_WEIGHT = 0.1

# (max deviation from the optimal sentence length, bonus)
SENTENCE_LENGTH_BANDS = ((2.5, 100.0), (5.0, 80.0), (10.0, 60.0))
SENTENCE_LENGTH_FLOOR = 40.0

# (min avg chars, max avg chars, bonus)
PARAGRAPH_LENGTH_BANDS = ((50.0, 150.0, 100.0), (30.0, 200.0, 80.0))
PARAGRAPH_LENGTH_FLOOR = 60.0


def flesch_reading_ease(
    avg_words_per_sentence: float, avg_syllables_per_word: float
) -> float:
    """Classic Flesch Reading Ease; not clamped."""
    return 206.835 - 1.015 * avg_words_per_sentence - 84.6 * avg_syllables_per_word


def complex_word_penalty(complex_word_count: int, word_count: int) -> float:
    """Percentage of complex words (0-100)."""
    return complex_word_count / word_count * 100


def sentence_length_bonus(avg_words_per_sentence: float) -> float:
    """Reward sentences close to 17.5 words on average."""
    deviation = abs(avg_words_per_sentence - OPTIMAL_WORDS_PER_SENTENCE)
    for max_deviation, bonus in SENTENCE_LENGTH_BANDS:
        if deviation <= max_deviation:
            return bonus
    return SENTENCE_LENGTH_FLOOR


def split_paragraphs(text: str) -> List[str]:
    """Split raw text on blank lines, dropping empty paragraphs."""
    return [part for part in PARAGRAPH_SPLIT_RE.split(text) if trim(part)]


def paragraph_structure_bonus(
    text: str, paragraph_count: int | None = None
) -> float:
    """
    Score paragraph sizing of the raw (unnormalized) text.

    The average length divides the full input length, separators and markup
    included, by the paragraph count. Pass ``paragraph_count`` when the
    paragraphs were already split.
    """
    if paragraph_count is None:
        paragraph_count = len(split_paragraphs(text))
    if paragraph_count <= 1:
        return SINGLE_PARAGRAPH_BONUS
    avg_length = len(text) / paragraph_count
    for lower, upper, bonus in PARAGRAPH_LENGTH_BANDS:
        if lower <= avg_length <= upper:
            return bonus
    return PARAGRAPH_LENGTH_FLOOR


def clamp_score(value: float) -> float:
    return max(0.0, min(100.0, value))


def score_breakdown(text: str) -> ScoreBreakdown:
    """Run the full scoring pipeline and keep every intermediate value."""
    if not isinstance(text, str):
        raise TypeError(f"Expected text as str, got {type(text).__name__}.")
    if is_blank(text):
        return ScoreBreakdown(
            metrics=None,
            flesch=0.0,
            complex_penalty=0.0,
            sentence_bonus=0.0,
            paragraph_bonus=0.0,
            paragraph_count=0,
            score=0.0,
        )

    metrics = analyze_text(text)
    flesch = flesch_reading_ease(
        metrics.avg_words_per_sentence, metrics.avg_syllables_per_word
    )
    penalty = complex_word_penalty(metrics.complex_word_count, metrics.word_count)
    sentence_bonus = sentence_length_bonus(metrics.avg_words_per_sentence)
    paragraph_count = len(split_paragraphs(text))
    paragraph_bonus = paragraph_structure_bonus(text, paragraph_count)

    combined = (
        FLESCH_WEIGHT * flesch
        + SENTENCE_WEIGHT * sentence_bonus
        + PARAGRAPH_WEIGHT * paragraph_bonus
        - COMPLEX_WEIGHT * penalty
    )
    return ScoreBreakdown(
        metrics=metrics,
        flesch=flesch,
        complex_penalty=penalty,
        sentence_bonus=sentence_bonus,
        paragraph_bonus=paragraph_bonus,
        paragraph_count=paragraph_count,
        score=clamp_score(combined),
    )


def compute_readability_score(text: str) -> float:
    """Return a 0-100 readability score; blank text scores 0."""
    return score_breakdown(text).score
