from __future__ import annotations

from .models import TextMetrics
from .syllables import tally_words
from .textutils import normalize_text
from .tokenization import count_sentences, count_words, tokenize_words


def analyze_text(text: str) -> TextMetrics:
    """Derive sentence, word, syllable and complex-word counts from raw text."""
    clean = normalize_text(text)
    words = tokenize_words(clean)
    syllable_count, complex_word_count = tally_words(words)
    return TextMetrics(
        sentence_count=count_sentences(clean),
        word_count=count_words(clean),
        syllable_count=syllable_count,
        complex_word_count=complex_word_count,
    )
