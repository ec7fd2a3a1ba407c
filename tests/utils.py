from __future__ import annotations

from pathlib import Path

EASY_POST = (
    "Short posts are easy to read. Each line says one thing. "
    "Readers like that.\n\n"
    "Keep words small and plain. Break long ideas into parts. "
    "Then stop."
)

HTML_POST = (
    "<h1>Plain words win</h1>"
    "<p>Short posts are easy to read. Each line says one thing.</p>"
    "<p>Keep words small and plain. Break long ideas into parts.</p>"
)


def write_sample_corpus(tmp_path: Path) -> Path:
    """Create a small corpus with a text post, an HTML post and a stray file."""
    corpus_dir = tmp_path / "corpus"
    (corpus_dir / "drafts").mkdir(parents=True)
    (corpus_dir / "welcome.txt").write_text(EASY_POST, encoding="utf-8")
    (corpus_dir / "drafts" / "tips.html").write_text(HTML_POST, encoding="utf-8")
    (corpus_dir / "cover.png").write_bytes(b"\x89PNG\r\n")
    return corpus_dir
