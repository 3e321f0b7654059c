"""Configuration loading for promptdoc (.promptdoc.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".promptdoc.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class PromptDocConfig:
    """Settings defined in .promptdoc.yml.

    Example::

        templates:
          dir: prompts
          development_mode: true
        schema:
          format: markdown
        doc:
          format: simple
    """

    root: Path
    templates_dir: Optional[Path] = None
    development_mode: bool = False
    schema_format: Optional[str] = None
    doc_format: Optional[str] = None


def load_config(config_path: Path) -> PromptDocConfig:
    """Load configuration from ``config_path`` (a file or its directory)."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return PromptDocConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    templates_data = _as_dict(data.get("templates"))
    templates_dir_str = _as_str(templates_data.get("dir"))
    templates_dir = root / templates_dir_str if templates_dir_str else None
    development_mode = _as_bool(templates_data.get("development_mode")) or False

    schema_data = _as_dict(data.get("schema"))
    doc_data = _as_dict(data.get("doc"))

    return PromptDocConfig(
        root=root,
        templates_dir=templates_dir,
        development_mode=development_mode,
        schema_format=_as_str(schema_data.get("format")),
        doc_format=_as_str(doc_data.get("format")),
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = ["CONFIG_FILENAME", "ConfigError", "PromptDocConfig", "load_config"]
