from __future__ import annotations

import re

from bs4 import BeautifulSoup

BLOCK_TAGS = [
    "p",
    "div",
    "li",
    "ul",
    "ol",
    "section",
    "article",
    "blockquote",
    "pre",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
]
INLINE_SPACE_RE = re.compile(r"[ \t\r\f\v]+")
EXTRA_BLANK_LINES_RE = re.compile(r"\n{3,}")


def strip_markup(text: str) -> str:
    """
    Remove HTML tags from editor content.

    Block elements are separated by a blank line so paragraph detection in
    the scorer still sees them; ``<br>`` becomes a single newline.
    """
    soup = BeautifulSoup(text, "html.parser")
    for tag in soup(["script", "style"]):
        tag.decompose()
    for br in soup.find_all("br"):
        br.replace_with("\n")
    for block in soup.find_all(BLOCK_TAGS):
        block.insert_after("\n\n")

    raw = INLINE_SPACE_RE.sub(" ", soup.get_text())
    lines = [line.strip() for line in raw.splitlines()]
    return EXTRA_BLANK_LINES_RE.sub("\n\n", "\n".join(lines)).strip()


def looks_like_markup(text: str) -> bool:
    return bool(re.search(r"<[A-Za-z][^>]*>", text))
