"""Tests for schema extraction from tagged records."""

from __future__ import annotations

import dataclasses

import pytest

from promptdoc.errors import ExtractError
from promptdoc.models import FieldDescriptor
from promptdoc.schema import DocGenerator, count_fields, type_name
from promptdoc.schema.fields import tag, to_wire, wire_name
from tests.schema._records import Annotated, Sample


def test_generate_lists_exported_fields_in_order() -> None:
    manifest = DocGenerator().generate(Sample)

    assert manifest.name == "Sample"
    assert manifest.description == ""
    assert manifest.fields == [
        FieldDescriptor(
            name="Name",
            json_name="name",
            type="str",
            description="Display name",
            example="Ada",
            required=True,
        ),
        FieldDescriptor(name="Age", json_name="age", type="int", description="Age in years"),
        FieldDescriptor(name="Notes", json_name="", type="str"),
    ]


def test_generate_accepts_instances() -> None:
    assert DocGenerator().generate(Sample(Name="x")) == DocGenerator().generate(Sample)


def test_generic_annotations_keep_their_text() -> None:
    manifest = DocGenerator().generate(Annotated)

    assert [field.type for field in manifest.fields] == [
        "List[str]",
        "Dict[str, float]",
        "Optional[Sample]",
    ]
    assert manifest.fields[2].json_name == "-"
    assert manifest.fields[2].description == "Ignored in JSON"


def test_doc_tag_wins_over_description() -> None:
    @dataclasses.dataclass
    class Both:
        Value: int = dataclasses.field(
            default=0, metadata={"doc": "from doc", "description": "from description"}
        )

    assert DocGenerator().generate(Both).fields[0].description == "from doc"


def test_required_is_a_substring_match() -> None:
    @dataclasses.dataclass
    class Flags:
        A: int = dataclasses.field(default=0, metadata={"schema": "notrequired"})
        B: int = dataclasses.field(default=0, metadata={"schema": "min=1"})

    required = [field.required for field in DocGenerator().generate(Flags).fields]
    assert required == [True, False]


@pytest.mark.parametrize(
    ("record", "kind"),
    [(42, "int"), (None, "None"), (dict, "class dict"), ("text", "str")],
)
def test_non_records_raise_extract_error(record: object, kind: str) -> None:
    with pytest.raises(ExtractError) as excinfo:
        DocGenerator().generate(record)

    assert f"expected record type, got {kind}" in str(excinfo.value)


def test_type_name_renders_runtime_annotations() -> None:
    assert type_name(int) == "int"
    assert type_name("List[str]") == "List[str]"
    assert type_name(Sample) == "Sample"


def test_count_fields_skips_unexported() -> None:
    assert count_fields(Sample) == 3
    assert count_fields(int) == 0


def test_tag_helpers() -> None:
    fields = {field.name: field for field in dataclasses.fields(Sample)}

    assert wire_name(fields["Age"]) == "age"
    assert tag(fields["Notes"], "doc") == ""
    assert tag(fields["Name"], "schema") == "required,minLength=1"


def test_to_wire_uses_json_names() -> None:
    assert to_wire(Sample(Name="Ada", Age=3, Notes="n", _secret="s")) == {
        "name": "Ada",
        "age": 3,
        "Notes": "n",
    }
    assert "Parent" not in to_wire(Annotated())


def test_to_wire_omits_empty_omitempty_fields() -> None:
    assert to_wire(Sample(Name="Ada")) == {"name": "Ada", "Notes": ""}
