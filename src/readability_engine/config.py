from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, List, Mapping, MutableMapping

import yaml


@dataclass(slots=True)
class ReadabilityConfig:
    """Options for document analysis, content checks and reporting."""

    min_content_chars: int = 50
    min_readability_score: float | None = None
    strip_markup: bool = False
    include_breakdown: bool = False
    input_extensions: List[str] = field(
        default_factory=lambda: [".txt", ".md", ".html", ".htm"]
    )

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {item.name for item in fields(ReadabilityConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "input_extensions" in kwargs:
        kwargs["input_extensions"] = [
            _normalize_extension(ext) for ext in kwargs["input_extensions"]
        ]
    return kwargs


def _normalize_extension(value: str) -> str:
    ext = str(value).strip().lower()
    return ext if ext.startswith(".") else f".{ext}"


def config_from_dict(data: Mapping[str, Any] | None) -> ReadabilityConfig:
    """Build a ReadabilityConfig from a dictionary-like input."""
    if data is None:
        return ReadabilityConfig()
    return ReadabilityConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> ReadabilityConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> ReadabilityConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return ReadabilityConfig()
    return config_from_yaml(path)
