"""Core data models shared by the schema extractor and its formatters."""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class FieldDescriptor:
    """Documentation for a single exported record field."""

    name: str
    json_name: str
    type: str
    description: str = ""
    example: str = ""
    required: bool = False


@dataclass
class TypeManifest:
    """Ordered field documentation for a record type."""

    name: str
    description: str = ""
    fields: List[FieldDescriptor] = field(default_factory=list)
