"""Render type manifests as Markdown or terminal text."""

from __future__ import annotations

from typing import Callable, List, Mapping, Sequence

from ..errors import UnsupportedFormatError
from ..models import FieldDescriptor, TypeManifest

Formatter = Callable[[TypeManifest], str]

_MAX_EXAMPLE_WIDTH = 30
_RULE_WIDTH = 80
_COLUMN_PADDING = 2


def export_markdown(manifest: TypeManifest) -> str:
    """Render ``manifest`` as a Markdown document with a field table."""
    lines: List[str] = [f"# {manifest.name}", ""]
    if manifest.description:
        lines.extend([manifest.description, ""])

    lines.append("| Field | Type | Template Variable | Description | Example |")
    lines.append("|-------|------|-------------------|-------------|----------|")
    for field in manifest.fields:
        template_var = f"{{{{.{field.name}}}}}"
        if field.json_name and field.json_name != "-":
            template_var += f" or {{{{.{field.json_name}}}}}"
        required = "✓ " if field.required else ""
        lines.append(
            f"| {field.name} | {field.type} | `{template_var}` "
            f"| {required}{field.description} | `{field.example}` |"
        )
    return "\n".join(lines) + "\n"


def format_table(manifest: TypeManifest) -> str:
    """Render ``manifest`` as an aligned terminal table."""
    lines = _preamble(manifest)
    header = ("FIELD", "TYPE", "JSON", "DESCRIPTION", "EXAMPLE")
    rows = [
        (
            field.name + (" *" if field.required else ""),
            field.type,
            field.json_name or "-",
            field.description,
            _truncate_example(field.example),
        )
        for field in manifest.fields
    ]
    aligned = _align([header, *rows])
    lines.append(aligned[0])
    lines.append("-" * _RULE_WIDTH)
    lines.extend(aligned[1:])
    lines.append("")
    lines.append("* = required field")
    return "\n".join(lines) + "\n"


def format_simple(manifest: TypeManifest) -> str:
    """Render ``manifest`` as one indented block per field."""
    lines = _preamble(manifest)
    for field in manifest.fields:
        lines.extend(_simple_block(field))
        lines.append("")
    return "\n".join(lines) + "\n"


SCHEMA_FORMATS: Mapping[str, Formatter] = {
    "markdown": export_markdown,
    "md": export_markdown,
}

DOC_FORMATS: Mapping[str, Formatter] = {
    "table": format_table,
    "simple": format_simple,
}


def resolve_formatter(fmt: str, formats: Mapping[str, Formatter]) -> Formatter:
    """Look up ``fmt`` in ``formats``, raising UnsupportedFormatError when absent."""
    formatter = formats.get(fmt)
    if formatter is None:
        raise UnsupportedFormatError(fmt, sorted(formats))
    return formatter


def _preamble(manifest: TypeManifest) -> List[str]:
    lines = [f"Type: {manifest.name}"]
    if manifest.description:
        lines.append(f"Description: {manifest.description}")
    lines.append("")
    return lines


def _simple_block(field: FieldDescriptor) -> List[str]:
    suffix = " (required)" if field.required else ""
    block = [f"{field.name}{suffix}", f"  Type: {field.type}"]
    if field.json_name and field.json_name != "-":
        block.append(f"  JSON: {field.json_name}")
    if field.description:
        block.append(f"  Description: {field.description}")
    if field.example:
        block.append(f"  Example: {field.example}")
    return block


def _truncate_example(example: str) -> str:
    if not example:
        return "-"
    if len(example) > _MAX_EXAMPLE_WIDTH:
        return example[: _MAX_EXAMPLE_WIDTH - 3] + "..."
    return example


def _align(rows: Sequence[Sequence[str]]) -> List[str]:
    """Pad every cell but the last to its column width plus padding."""
    widths = [max(len(row[index]) for row in rows) for index in range(len(rows[0]) - 1)]
    aligned: List[str] = []
    for row in rows:
        cells = [cell.ljust(width + _COLUMN_PADDING) for cell, width in zip(row, widths)]
        cells.append(row[-1])
        aligned.append("".join(cells).rstrip())
    return aligned


__all__ = [
    "DOC_FORMATS",
    "SCHEMA_FORMATS",
    "export_markdown",
    "format_simple",
    "format_table",
    "resolve_formatter",
]
