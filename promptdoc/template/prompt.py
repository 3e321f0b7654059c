"""Single-file prompt templates with change detection."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Mapping

from .engine import CompiledTemplate, TemplateEngine


class PromptTemplate:
    """A prompt template file bound to its own engine.

    ``digest()`` identifies the source bytes currently compiled; ``reload()``
    re-reads the file so edits are picked up by the next ``render``.
    """

    def __init__(
        self,
        path: Path | str,
        funcs: Mapping[str, Callable[..., Any]] | None = None,
    ) -> None:
        self.path = Path(path)
        self.name = self.path.name
        self._engine = TemplateEngine(self.path.parent, funcs=funcs)
        self._template: CompiledTemplate = self._engine.load(self.name)

    def render(self, data: Any) -> str:
        return self._engine.render(self._template, data)

    def digest(self) -> str:
        """SHA-256 hex digest of the compiled source."""
        return self._template.digest

    def reload(self) -> None:
        self._template = self._engine.reload(self.name)

    @property
    def engine(self) -> TemplateEngine:
        return self._engine


__all__ = ["PromptTemplate"]
