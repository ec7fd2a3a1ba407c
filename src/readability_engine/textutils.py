from __future__ import annotations

import re

# Characters removed by a browser's String.prototype.trim (and matched by \s
# there). Python's str.strip() differs: it keeps U+FEFF but drops U+001C-U+001F
# and U+0085.
JS_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
JS_WHITESPACE_CLASS = "[" + re.escape(JS_WHITESPACE) + "]"

DISALLOWED_RE = re.compile(r"[^A-Za-z0-9_\s.!?]")
WHITESPACE_RE = re.compile(r"\s+")
JS_WHITESPACE_RUN_RE = re.compile(JS_WHITESPACE_CLASS + "+")


def normalize_text(text: str) -> str:
    """Replace non-word punctuation with spaces and collapse whitespace."""
    cleaned = DISALLOWED_RE.sub(" ", text)
    return WHITESPACE_RE.sub(" ", cleaned).strip()


def trim(text: str) -> str:
    """Strip the same leading/trailing whitespace a browser's trim() does."""
    return text.strip(JS_WHITESPACE)


def is_blank(text: str) -> bool:
    return not text or not trim(text)


def count_display_words(text: str) -> int:
    """Word count shown next to the editor; unlike the scorer it can be 0."""
    return len([word for word in JS_WHITESPACE_RUN_RE.split(trim(text)) if word])
