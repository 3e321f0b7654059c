"""Tests for promptdoc.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from promptdoc.config import ConfigError, PromptDocConfig, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, PromptDocConfig)
    assert config.root == tmp_path.resolve()
    assert config.templates_dir is None
    assert config.development_mode is False
    assert config.schema_format is None
    assert config.doc_format is None


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".promptdoc.yml"
    config_file.write_text(
        """
templates:
  dir: prompts
  development_mode: "yes"
schema:
  format: md
doc:
  format: simple
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.templates_dir == tmp_path.resolve() / "prompts"
    assert config.development_mode is True
    assert config.schema_format == "md"
    assert config.doc_format == "simple"


def test_empty_config_file_yields_defaults(tmp_path: Path) -> None:
    (tmp_path / ".promptdoc.yml").write_text("\n", encoding="utf-8")

    assert load_config(tmp_path) == PromptDocConfig(root=tmp_path.resolve())


def test_unexpected_value_types_are_ignored(tmp_path: Path) -> None:
    (tmp_path / ".promptdoc.yml").write_text(
        "templates: [a, b]\nschema:\n  format: {nested: true}\n", encoding="utf-8"
    )

    config = load_config(tmp_path)

    assert config.templates_dir is None
    assert config.schema_format is None


def test_non_mapping_root_raises(tmp_path: Path) -> None:
    (tmp_path / ".promptdoc.yml").write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_invalid_yaml_raises(tmp_path: Path) -> None:
    (tmp_path / ".promptdoc.yml").write_text("templates: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError) as excinfo:
        load_config(tmp_path)

    assert ".promptdoc.yml" in str(excinfo.value)
