"""Tests for the Markdown and terminal formatters."""

from __future__ import annotations

import pytest

from promptdoc.errors import UnsupportedFormatError
from promptdoc.models import FieldDescriptor, TypeManifest
from promptdoc.schema import (
    DOC_FORMATS,
    SCHEMA_FORMATS,
    DocGenerator,
    export_markdown,
    format_simple,
    format_table,
    resolve_formatter,
)
from tests.schema._records import Sample


@pytest.fixture
def manifest() -> TypeManifest:
    return DocGenerator().generate(Sample)


def test_export_markdown(manifest: TypeManifest) -> None:
    assert export_markdown(manifest) == (
        "# Sample\n"
        "\n"
        "| Field | Type | Template Variable | Description | Example |\n"
        "|-------|------|-------------------|-------------|----------|\n"
        "| Name | str | `{{.Name}} or {{.name}}` | ✓ Display name | `Ada` |\n"
        "| Age | int | `{{.Age}} or {{.age}}` | Age in years | `` |\n"
        "| Notes | str | `{{.Notes}}` |  | `` |\n"
    )


def test_export_markdown_includes_description() -> None:
    manifest = TypeManifest(name="Empty", description="Nothing here.")

    lines = export_markdown(manifest).splitlines()

    assert lines[:4] == ["# Empty", "", "Nothing here.", ""]
    assert len(lines) == 6


def test_format_table(manifest: TypeManifest) -> None:
    lines = format_table(manifest).splitlines()

    assert lines[0] == "Type: Sample"
    assert lines[1] == ""
    assert lines[2] == "FIELD   TYPE  JSON  DESCRIPTION   EXAMPLE"
    assert lines[3] == "-" * 80
    assert lines[4] == "Name *  str   name  Display name  Ada"
    assert lines[5] == "Age     int   age   Age in years  -"
    assert lines[6].startswith("Notes   str   -")
    assert lines[6].endswith(" -")
    assert lines[-2:] == ["", "* = required field"]


def test_format_table_truncates_long_examples() -> None:
    manifest = TypeManifest(
        name="Long",
        fields=[FieldDescriptor(name="Blob", json_name="blob", type="str", example="x" * 40)],
    )

    row = format_table(manifest).splitlines()[4]

    assert row.endswith("x" * 27 + "...")


def test_format_simple(manifest: TypeManifest) -> None:
    assert format_simple(manifest) == (
        "Type: Sample\n"
        "\n"
        "Name (required)\n"
        "  Type: str\n"
        "  JSON: name\n"
        "  Description: Display name\n"
        "  Example: Ada\n"
        "\n"
        "Age\n"
        "  Type: int\n"
        "  JSON: age\n"
        "  Description: Age in years\n"
        "\n"
        "Notes\n"
        "  Type: str\n"
        "\n"
    )


def test_resolve_formatter() -> None:
    assert resolve_formatter("md", SCHEMA_FORMATS) is export_markdown
    assert resolve_formatter("simple", DOC_FORMATS) is format_simple


def test_unsupported_format_lists_alternatives() -> None:
    with pytest.raises(UnsupportedFormatError) as excinfo:
        resolve_formatter("html", SCHEMA_FORMATS)

    assert excinfo.value.format == "html"
    assert str(excinfo.value) == "unsupported format: html (expected one of: markdown, md)"
