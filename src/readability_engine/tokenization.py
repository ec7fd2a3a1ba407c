from __future__ import annotations

import re
from typing import List

SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
WORD_SPLIT_RE = re.compile(r"\s+")


def split_sentences(clean_text: str) -> List[str]:
    """Split normalized text on runs of terminal punctuation."""
    return [part for part in SENTENCE_SPLIT_RE.split(clean_text) if part.strip()]


def tokenize_words(clean_text: str) -> List[str]:
    """Split normalized text into whitespace-delimited words."""
    return [word for word in WORD_SPLIT_RE.split(clean_text) if word]


def count_sentences(clean_text: str) -> int:
    # Text without terminal punctuation still counts as one sentence.
    return len(split_sentences(clean_text)) or 1


def count_words(clean_text: str) -> int:
    return len(tokenize_words(clean_text)) or 1
