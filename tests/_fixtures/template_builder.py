"""Helper utilities for constructing temporary template directories in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Mapping

from promptdoc.template import TemplateEngine


class TemplateDirBuilder:
    """Utility for writing template files into a throwaway directory."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "templates"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the template directory."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def write_bytes(self, relative: str, raw: bytes) -> Path:
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(raw)
        return path

    def engine(self, **kwargs: object) -> TemplateEngine:
        """Return an engine rooted at the template directory."""
        return TemplateEngine(self.root, **kwargs)  # type: ignore[arg-type]

    def path(self) -> Path:
        """Return the template directory path."""
        return self.root


__all__ = ["TemplateDirBuilder"]
