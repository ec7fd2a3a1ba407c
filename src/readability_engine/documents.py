from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from .models import Document


class DocumentLoadError(RuntimeError):
    """Raised when an input file cannot be read as text."""


def read_document(path: Path, doc_id: str) -> Document:
    """Read a UTF-8 file from disk and wrap it in a Document."""
    try:
        text = path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise DocumentLoadError(f"{path} is not valid UTF-8 text") from exc
    except OSError as exc:
        raise DocumentLoadError(f"Unable to read {path}: {exc}") from exc
    return Document(doc_id=doc_id, text=text)


def load_documents(input_path: Path, extensions: Iterable[str]) -> List[Document]:
    """
    Expand a file or directory into documents.

    A single file is loaded whatever its suffix. Directories are walked
    recursively and only files with one of ``extensions`` are kept; their
    relative paths become the doc ids, in sorted order.
    """
    if input_path.is_file():
        return [read_document(input_path, input_path.name)]
    if not input_path.is_dir():
        raise DocumentLoadError(f"Input path does not exist: {input_path}")

    allowed = {ext.lower() for ext in extensions}
    files = sorted(
        p for p in input_path.rglob("*") if p.is_file() and p.suffix.lower() in allowed
    )
    return [read_document(file, file.relative_to(input_path).as_posix()) for file in files]
