"""Builds field manifests from tagged dataclass records."""

from __future__ import annotations

import dataclasses
from typing import Any

from ..errors import ExtractError
from ..models import FieldDescriptor, TypeManifest
from .fields import (
    DESCRIPTION_TAG,
    DOC_TAG,
    EXAMPLE_TAG,
    SCHEMA_TAG,
    exported_fields,
    tag,
    wire_name,
)


class DocGenerator:
    """Generates documentation manifests for record types."""

    def generate(self, record: Any) -> TypeManifest:
        """Return the manifest for ``record``, a dataclass instance or class."""
        record_type = record if isinstance(record, type) else type(record)
        if not dataclasses.is_dataclass(record_type):
            raise ExtractError(
                record_type.__name__,
                f"expected record type, got {_kind(record)}",
            )

        manifest = TypeManifest(
            name=record_type.__name__,
            description=_type_description(record_type),
        )
        for field in exported_fields(record_type):
            manifest.fields.append(
                FieldDescriptor(
                    name=field.name,
                    json_name=wire_name(field),
                    type=type_name(field.type),
                    description=_field_description(field),
                    example=tag(field, EXAMPLE_TAG),
                    required=_is_required(field),
                )
            )
        return manifest


def type_name(annotation: Any) -> str:
    """Render a field annotation as text.

    String annotations (postponed evaluation) are already the declared text.
    """
    if isinstance(annotation, str):
        return annotation
    if isinstance(annotation, type) and not getattr(annotation, "__args__", None):
        return annotation.__name__
    return repr(annotation).replace("typing.", "")


def count_fields(record_type: type) -> int:
    """Number of exported fields on a record type, zero for non-records."""
    if not dataclasses.is_dataclass(record_type):
        return 0
    return sum(1 for _ in exported_fields(record_type))


def _field_description(field: dataclasses.Field) -> str:
    return tag(field, DOC_TAG) or tag(field, DESCRIPTION_TAG)


def _is_required(field: dataclasses.Field) -> bool:
    return "required" in tag(field, SCHEMA_TAG)


def _type_description(record_type: type) -> str:
    # TODO: read a type-level ``doc`` attribute once records declare one.
    return ""


def _kind(record: Any) -> str:
    if record is None:
        return "None"
    if isinstance(record, type):
        return f"class {record.__name__}"
    return type(record).__name__


__all__ = ["DocGenerator", "count_fields", "type_name"]
