"""Name to record-type registry consumed by the schema and doc commands."""

from __future__ import annotations

from typing import Dict, Iterator, List, Tuple

from ..errors import UnknownTypeError


class TypeRegistry:
    """Holds the record types that can be documented by name."""

    def __init__(self) -> None:
        self._types: Dict[str, type] = {}

    def register(self, name: str, record_type: type) -> None:
        """Bind ``name`` to ``record_type``, replacing any previous binding."""
        self._types[name] = record_type

    def get(self, name: str) -> type:
        try:
            return self._types[name]
        except KeyError:
            raise UnknownTypeError(name, self.describe()) from None

    def names(self) -> List[str]:
        return sorted(self._types)

    def items(self) -> Iterator[Tuple[str, type]]:
        for name in self.names():
            yield name, self._types[name]

    def describe(self) -> List[str]:
        """``name (module.QualName)`` lines for every registered type."""
        return [f"{name} ({qualified_name(record_type)})" for name, record_type in self.items()]

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __len__(self) -> int:
        return len(self._types)


def qualified_name(record_type: type) -> str:
    return f"{record_type.__module__}.{record_type.__qualname__}"


def build_default_registry() -> TypeRegistry:
    """Return a registry holding every bundled prompt data type."""
    from ..types import register_types

    registry = TypeRegistry()
    register_types(registry)
    return registry


__all__ = ["TypeRegistry", "build_default_registry", "qualified_name"]
