"""Bundled prompt data records and their registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from . import prompts
from .common import Duration, Percentage, Range
from .prompts import SystemPromptData, UserPromptData

if TYPE_CHECKING:  # pragma: no cover - typing aid
    from ..schema.registry import TypeRegistry

_RECORD_TYPES = (Range, Duration, *(getattr(prompts, name) for name in prompts.__all__))


def register_types(registry: "TypeRegistry") -> None:
    """Register every bundled record under its class name."""
    for record_type in _RECORD_TYPES:
        registry.register(record_type.__name__, record_type)


__all__ = [
    "Duration",
    "Percentage",
    "Range",
    "SystemPromptData",
    "UserPromptData",
    "register_types",
]
