"""File-backed template sources."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Iterator

from jinja2 import FileSystemLoader, TemplateNotFound
from jinja2.loaders import split_template_path

TEMPLATE_EXTENSIONS = (".jet", ".tmpl")


def content_digest(raw: bytes) -> str:
    """SHA-256 hex digest of template source bytes."""
    return hashlib.sha256(raw).hexdigest()


@dataclass(frozen=True)
class TemplateSource:
    """Raw bytes of a template as read from disk."""

    path: str
    filename: str
    raw: bytes

    @property
    def digest(self) -> str:
        return content_digest(self.raw)

    def text(self, encoding: str = "utf-8") -> str:
        return self.raw.decode(encoding)


class TemplateLoader(FileSystemLoader):
    """Reads template sources below one or more search directories.

    Paths are ``/``-separated and relative to a search directory; ``..``
    segments are rejected. A path without an extension is tried with
    ``.jet`` and then ``.tmpl``.
    """

    def read(self, path: str) -> TemplateSource:
        for candidate in self._candidates(path):
            pieces = split_template_path(candidate)
            for searchpath in self.searchpath:
                filename = Path(searchpath).joinpath(*pieces)
                if filename.is_file():
                    return TemplateSource(
                        path=path,
                        filename=str(filename),
                        raw=filename.read_bytes(),
                    )
        raise TemplateNotFound(path)

    @staticmethod
    def _candidates(path: str) -> Iterator[str]:
        yield path
        if not PurePosixPath(path).suffix:
            for extension in TEMPLATE_EXTENSIONS:
                yield path + extension


__all__ = ["TEMPLATE_EXTENSIONS", "TemplateLoader", "TemplateSource", "content_digest"]
