"""
Vowel-count syllable heuristic and complex-word rule.

The estimator counts every vowel letter rather than vowel groups, so words
with adjacent vowels ("beautiful") are over-counted. Scores already computed
by the editor depend on that behaviour, so it is kept as is.
"""

from __future__ import annotations

from typing import Iterable, Tuple

VOWELS = frozenset("aeiouyAEIOUY")
COMPLEX_MIN_SYLLABLES = 3
COMPLEX_MIN_LENGTH = 7


def estimate_syllables(word: str) -> int:
    """Estimate the syllable count of a single word (always >= 1)."""
    if len(word) <= 3:
        return 1

    syllables = sum(1 for ch in word if ch in VOWELS)
    # Silent trailing e.
    if word.endswith("e"):
        syllables -= 1
    # Trailing "-le" as in "table".
    if "le" in word and len(word) > 2:
        syllables += 1
    return max(1, syllables)


def is_complex_word(word: str, syllables: int | None = None) -> bool:
    """A word is complex with 3+ syllables or 7+ characters."""
    if syllables is None:
        syllables = estimate_syllables(word)
    return syllables >= COMPLEX_MIN_SYLLABLES or len(word) >= COMPLEX_MIN_LENGTH


def tally_words(words: Iterable[str]) -> Tuple[int, int]:
    """Return (total syllables, complex word count) for the given words."""
    total_syllables = 0
    complex_words = 0
    for word in words:
        syllables = estimate_syllables(word)
        total_syllables += syllables
        if is_complex_word(word, syllables):
            complex_words += 1
    return total_syllables, complex_words
