"""Small value types shared by prompt records."""

from __future__ import annotations

from dataclasses import dataclass

from ..schema.fields import doc_field

_MINUTES_PER_UNIT = {
    "minutes": 1,
    "hours": 60,
    "days": 24 * 60,
}


@dataclass
class Range:
    """Numeric range with inclusive bounds."""

    Min: float = doc_field(0.0, json="min", doc="Minimum value", example="1")
    Max: float = doc_field(0.0, json="max", doc="Maximum value", example="20")

    def __str__(self) -> str:
        return f"{self.Min:.2f}-{self.Max:.2f}"

    def is_valid(self) -> bool:
        return self.Max > self.Min

    def contains(self, value: float) -> bool:
        return self.Min <= value <= self.Max


@dataclass
class Duration:
    """Time span expressed as a count of units."""

    Value: int = doc_field(0, json="value", doc="Duration value", example="5")
    Unit: str = doc_field(
        "minutes", json="unit", doc="Time unit (minutes, hours, days)", example="minutes"
    )

    def __str__(self) -> str:
        return f"{self.Value} {self.Unit}"

    def minutes(self) -> int:
        # Unknown units are taken as minutes.
        return self.Value * _MINUTES_PER_UNIT.get(self.Unit, 1)


class Percentage(float):
    """Percentage points, e.g. ``Percentage(5)`` is five percent."""

    def __str__(self) -> str:
        return f"{float(self):.2f}%"

    def decimal(self) -> float:
        return float(self) / 100.0


__all__ = ["Duration", "Percentage", "Range"]
