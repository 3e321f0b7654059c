"""Schema extraction and documentation output for tagged records."""

from .extractor import DocGenerator, count_fields, type_name
from .fields import doc_field
from .formatters import (
    DOC_FORMATS,
    SCHEMA_FORMATS,
    export_markdown,
    format_simple,
    format_table,
    resolve_formatter,
)
from .registry import TypeRegistry, build_default_registry

__all__ = [
    "DOC_FORMATS",
    "DocGenerator",
    "SCHEMA_FORMATS",
    "TypeRegistry",
    "build_default_registry",
    "count_fields",
    "doc_field",
    "export_markdown",
    "format_simple",
    "format_table",
    "resolve_formatter",
    "type_name",
]
