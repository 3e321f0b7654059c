"""Template engine: compiled-template cache, function registry and executor."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, Mapping, Optional

from jinja2 import (
    Environment,
    StrictUndefined,
    Template,
    TemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
    UndefinedError,
)

from ..errors import LoadError, RenderError
from ..logging import get_logger
from .funcs import DEFAULT_FUNCS
from .loader import TemplateLoader, TemplateSource
from .syntax import ROOT_NAME, translate

DEFAULT_TEMPLATE_DIR = Path("./templates")
BUNDLED_PROMPTS_DIR = Path(__file__).resolve().parent.parent / "prompts"

NIL_TEXT = "<nil>"

logger = get_logger("template")


@dataclass(frozen=True)
class CompiledTemplate:
    """A parsed, executable template. Never modified after compilation."""

    name: str
    path: str
    source: TemplateSource
    program: Template

    @property
    def digest(self) -> str:
        return self.source.digest


class TemplateEngine:
    """Loads, caches and renders templates from one template directory.

    Every template rendered by an engine sees the same function registry.
    The registry starts with the helpers in ``DEFAULT_FUNCS``; ``add_func``
    replaces or extends bindings for all later renders.

    Outside development mode compiled templates are cached by path and a
    repeated ``load`` returns the cached instance without touching the disk.
    In development mode every ``load`` re-reads and re-compiles.
    """

    def __init__(
        self,
        template_dir: Path | str | None = None,
        *,
        development_mode: bool = False,
        funcs: Mapping[str, Callable[..., Any]] | None = None,
        encoding: str = "utf-8",
    ) -> None:
        self.template_dir = Path(template_dir) if template_dir else DEFAULT_TEMPLATE_DIR
        self.development_mode = development_mode
        self._loader = TemplateLoader(str(self.template_dir), encoding=encoding)
        self._env = Environment(
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            finalize=_finalize,
        )
        self._cache: Dict[str, CompiledTemplate] = {}
        self._funcs: Dict[str, Callable[..., Any]] = dict(DEFAULT_FUNCS)
        self._lock = _ReadWriteLock()
        if funcs:
            self.add_funcs(funcs)

    # ------------------------------------------------------------------
    # Loading

    def load(self, path: str) -> CompiledTemplate:
        """Return the compiled template for ``path``."""
        if self.development_mode:
            return self._compile(path)

        with self._lock.read():
            cached = self._cache.get(path)
        if cached is not None:
            logger.debug("Template cache hit for %s", path)
            return cached

        compiled = self._compile(path)
        with self._lock.write():
            # Concurrent loads of one path may both compile; the first insert wins.
            return self._cache.setdefault(path, compiled)

    def reload(self, path: str) -> CompiledTemplate:
        """Re-read and re-compile ``path``, replacing any cached entry."""
        compiled = self._compile(path)
        if not self.development_mode:
            with self._lock.write():
                self._cache[path] = compiled
        logger.debug("Reloaded template %s (digest %s)", path, compiled.digest[:12])
        return compiled

    def _compile(self, path: str) -> CompiledTemplate:
        try:
            source = self._loader.read(path)
        except TemplateNotFound:
            raise LoadError(path, f"template not found in {self.template_dir}") from None
        except OSError as exc:
            raise LoadError(path, str(exc)) from exc

        try:
            text = source.text(self._loader.encoding)
        except UnicodeDecodeError as exc:
            raise LoadError(path, f"source is not valid {self._loader.encoding}: {exc}") from exc

        try:
            program = self._env.from_string(translate(text, name=path))
        except TemplateSyntaxError as exc:
            raise LoadError(path, f"line {exc.lineno}: {exc.message}") from exc

        logger.debug("Compiled template %s from %s", path, source.filename)
        return CompiledTemplate(name=path, path=path, source=source, program=program)

    # ------------------------------------------------------------------
    # Function registry

    def add_func(self, name: str, fn: Callable[..., Any]) -> None:
        """Bind ``name`` to ``fn`` for every later render."""
        with self._lock.write():
            self._funcs[name] = fn

    def add_funcs(self, funcs: Mapping[str, Callable[..., Any]]) -> None:
        for name, fn in funcs.items():
            self.add_func(name, fn)

    @property
    def funcs(self) -> Dict[str, Callable[..., Any]]:
        with self._lock.read():
            return dict(self._funcs)

    # ------------------------------------------------------------------
    # Rendering

    def render(self, template: Optional[CompiledTemplate], data: Any) -> str:
        """Execute ``template`` against ``data`` and return the output text."""
        if template is None or not isinstance(template, CompiledTemplate):
            raise RenderError("<invalid>", "invalid template")

        context = self.funcs
        context[ROOT_NAME] = data
        try:
            return template.program.render(context)
        except UndefinedError as exc:
            raise RenderError(template.path, f"unknown variable: {exc.message}") from exc
        except TemplateError as exc:
            raise RenderError(template.path, str(exc)) from exc
        except Exception as exc:
            raise RenderError(template.path, f"{type(exc).__name__}: {exc}") from exc


def _finalize(value: Any) -> Any:
    """Print whole floats without a fraction, booleans in lower case and None as <nil>."""
    if value is None:
        return NIL_TEXT
    if type(value) is float and value.is_integer():
        return int(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


class _ReadWriteLock:
    """Shared/exclusive lock: many readers or a single writer."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writing = False

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writing:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            while self._writing or self._readers:
                self._cond.wait()
            self._writing = True
        try:
            yield
        finally:
            with self._cond:
                self._writing = False
                self._cond.notify_all()


__all__ = ["BUNDLED_PROMPTS_DIR", "CompiledTemplate", "DEFAULT_TEMPLATE_DIR", "TemplateEngine"]
