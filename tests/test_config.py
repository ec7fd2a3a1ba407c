from pathlib import Path

import pytest

from readability_engine.config import (
    ReadabilityConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)


def test_load_config_defaults():
    cfg = load_config()
    assert cfg == ReadabilityConfig()
    assert cfg.min_content_chars == 50
    assert cfg.min_readability_score is None
    assert ".txt" in cfg.input_extensions


def test_config_from_dict_ignores_unknown_keys_and_normalizes_extensions():
    cfg = config_from_dict(
        {"min_content_chars": 10, "unknown": 1, "input_extensions": ["TXT", ".Html"]}
    )
    assert cfg.min_content_chars == 10
    assert cfg.input_extensions == [".txt", ".html"]


def test_config_from_yaml(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "min_readability_score: 55\nstrip_markup: true\n", encoding="utf-8"
    )
    cfg = config_from_yaml(path)
    assert cfg.min_readability_score == 55
    assert cfg.strip_markup is True
    assert cfg.to_dict()["strip_markup"] is True


def test_config_from_yaml_rejects_non_mapping(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("- one\n- two\n", encoding="utf-8")
    with pytest.raises(ValueError):
        config_from_yaml(path)


def test_empty_yaml_gives_defaults(tmp_path: Path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == ReadabilityConfig()
