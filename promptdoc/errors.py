"""Exception types raised by the template engine and the schema generator."""

from __future__ import annotations

from typing import Sequence


class PromptDocError(Exception):
    """Base class for all promptdoc errors."""


class LoadError(PromptDocError):
    """Raised when a template cannot be read or compiled."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"load template {path!r}: {reason}")


class RenderError(PromptDocError):
    """Raised when executing a compiled template fails."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"render template {path!r}: {reason}")


class ExtractError(PromptDocError):
    """Raised when schema extraction is asked for something that is not a record."""

    def __init__(self, type_name: str, reason: str) -> None:
        self.type_name = type_name
        self.reason = reason
        super().__init__(f"extract schema for {type_name}: {reason}")


class UnsupportedFormatError(PromptDocError):
    """Raised when a caller requests an output format nobody implements."""

    def __init__(self, fmt: str, supported: Sequence[str] = ()) -> None:
        self.format = fmt
        self.supported = tuple(supported)
        message = f"unsupported format: {fmt}"
        if self.supported:
            message += f" (expected one of: {', '.join(self.supported)})"
        super().__init__(message)


class UnknownTypeError(PromptDocError, LookupError):
    """Raised when a type name is missing from a type registry."""

    def __init__(self, name: str, available: Sequence[str] = ()) -> None:
        self.name = name
        self.available = tuple(available)
        message = f"unknown type: {name}"
        if self.available:
            listing = "\n".join(f"  - {item}" for item in self.available)
            message += f"\n\nAvailable types:\n{listing}"
        super().__init__(message)


__all__ = [
    "ExtractError",
    "LoadError",
    "PromptDocError",
    "RenderError",
    "UnknownTypeError",
    "UnsupportedFormatError",
]
