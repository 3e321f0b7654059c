"""Declarative field tags for documented records.

Records are dataclasses. Each field may carry tags in its ``metadata``
mapping, read by the schema extractor and by ``toJSON``:

``json``
    Wire name, optionally followed by comma separated options
    (``"starting_capital,omitempty"``). ``"-"`` hides the field from JSON.
``doc`` / ``description``
    Human readable description; ``doc`` wins when both are present.
``example``
    Example value, always treated as text.
``schema``
    Free-form schema flags. A field is required when this text contains
    ``"required"`` anywhere.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Dict, Iterator, Mapping, Tuple

JSON_TAG = "json"
DOC_TAG = "doc"
DESCRIPTION_TAG = "description"
EXAMPLE_TAG = "example"
SCHEMA_TAG = "schema"

OMITEMPTY = "omitempty"

_MISSING = dataclasses.MISSING


def doc_field(
    default: Any = _MISSING,
    *,
    json: str | None = None,
    doc: str | None = None,
    description: str | None = None,
    example: Any = None,
    schema: str | None = None,
    default_factory: Any = _MISSING,
    **kwargs: Any,
) -> Any:
    """Return a dataclass field carrying documentation tags."""
    metadata: Dict[str, Any] = dict(kwargs.pop("metadata", None) or {})
    tags = (
        (JSON_TAG, json),
        (DOC_TAG, doc),
        (DESCRIPTION_TAG, description),
        (EXAMPLE_TAG, example),
        (SCHEMA_TAG, schema),
    )
    for key, value in tags:
        if value is not None:
            metadata[key] = value
    return dataclasses.field(
        default=default,
        default_factory=default_factory,
        metadata=metadata,
        **kwargs,
    )


def tag(field: dataclasses.Field, key: str) -> str:
    """Return the text of tag ``key`` on ``field``, or an empty string."""
    value = field.metadata.get(key)
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def is_exported(field: dataclasses.Field) -> bool:
    return not field.name.startswith("_")


def wire_name(field: dataclasses.Field) -> str:
    """First comma separated segment of the ``json`` tag."""
    return tag(field, JSON_TAG).split(",", 1)[0]


def exported_fields(record_type: type) -> Iterator[dataclasses.Field]:
    for field in dataclasses.fields(record_type):
        if is_exported(field):
            yield field


def tag_options(field: dataclasses.Field) -> Tuple[str, ...]:
    """Options after the wire name in the ``json`` tag, e.g. ``("omitempty",)``."""
    return tuple(option.strip() for option in tag(field, JSON_TAG).split(",")[1:])


def to_wire(record: Any) -> Mapping[str, Any]:
    """Map a record instance to a dict keyed by wire names.

    Fields tagged ``json:"-"`` and unexported fields are dropped; untagged
    fields keep their declared name. Fields tagged ``omitempty`` are dropped
    while they hold ``None``, ``False``, zero, or an empty string or container.
    """
    payload: Dict[str, Any] = {}
    for field in exported_fields(type(record)):
        name = wire_name(field)
        if name == "-":
            continue
        value = getattr(record, field.name)
        if OMITEMPTY in tag_options(field) and _is_empty(value):
            continue
        payload[name or field.name] = value
    return payload


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (bool, int, float, str, bytes, list, tuple, dict, set, frozenset)):
        return not value
    return False


__all__ = [
    "DESCRIPTION_TAG",
    "DOC_TAG",
    "EXAMPLE_TAG",
    "JSON_TAG",
    "OMITEMPTY",
    "SCHEMA_TAG",
    "doc_field",
    "exported_fields",
    "is_exported",
    "tag",
    "tag_options",
    "to_wire",
    "wire_name",
]
