from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(frozen=True, slots=True)
class TextMetrics:
    """Lexical statistics derived from normalized text."""

    sentence_count: int
    word_count: int
    syllable_count: int
    complex_word_count: int

    @property
    def avg_words_per_sentence(self) -> float:
        return self.word_count / self.sentence_count

    @property
    def avg_syllables_per_word(self) -> float:
        return self.syllable_count / self.word_count


@dataclass(frozen=True, slots=True)
class ScoreBreakdown:
    """Every intermediate value of one scoring run."""

    metrics: TextMetrics | None
    flesch: float
    complex_penalty: float
    sentence_bonus: float
    paragraph_bonus: float
    paragraph_count: int
    score: float


@dataclass(frozen=True, slots=True)
class ReadabilityReport:
    """Score and display labels for a full document."""

    doc_id: str
    score: float
    level: str
    audience: str
    badge: str
    grade: str
    word_count: int
    character_count: int
    breakdown: ScoreBreakdown | None = None


@dataclass(slots=True)
class ContentIssue:
    """Represents a failed content check."""

    doc_id: str
    code: str
    message: str
