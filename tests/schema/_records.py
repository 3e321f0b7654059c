"""Records shared by the schema tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from promptdoc.schema import doc_field


@dataclass
class Sample:
    Name: str = doc_field(
        "", json="name", doc="Display name", example="Ada", schema="required,minLength=1"
    )
    Age: int = doc_field(0, json="age,omitempty", description="Age in years")
    Notes: str = ""
    _secret: str = ""


@dataclass
class Annotated:
    Tags: List[str] = doc_field(default_factory=list, json="tags", doc="Labels")
    Scores: Dict[str, float] = doc_field(default_factory=dict, json="scores")
    Parent: Optional[Sample] = doc_field(None, json="-", description="Ignored in JSON")
