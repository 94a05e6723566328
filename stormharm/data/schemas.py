"""
Record, field and ranking schemas shared by the pipeline stages.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from stormharm.config import COST_DISPLAY_SCALE

Number = Union[int, float]
AggregateResult = dict[str, Number]
TopNReport = list[tuple[str, Number]]


class HarmField(str, Enum):
    FATALITIES = "fatalities"
    INJURIES = "injuries"
    PROPERTY_COST = "property_cost"
    CROP_COST = "crop_cost"

    @property
    def is_cost(self) -> bool:
        return self in (HarmField.PROPERTY_COST, HarmField.CROP_COST)

    @property
    def label(self) -> str:
        return _FIELD_TITLES[self]

    @property
    def unit(self) -> str:
        return "Billions of USD" if self.is_cost else "People"

    @property
    def display_scale(self) -> float:
        """Divisor applied to summed values when they are shown to a reader."""
        return COST_DISPLAY_SCALE if self.is_cost else 1.0


_FIELD_TITLES = {
    HarmField.FATALITIES: "Fatalities",
    HarmField.INJURIES: "Injuries",
    HarmField.PROPERTY_COST: "Property Damage",
    HarmField.CROP_COST: "Crop Damage",
}

# The two fixed questions, each answered by a pair of rankings
QUESTIONS = {
    "population_health": (HarmField.FATALITIES, HarmField.INJURIES),
    "economic_consequences": (HarmField.PROPERTY_COST, HarmField.CROP_COST),
}

QUESTION_TITLES = {
    "population_health": "Event Types Most Harmful to Population Health",
    "economic_consequences": "Event Types with the Greatest Economic Consequences",
}


@dataclass(frozen=True)
class StormRecord:
    """One observed storm event.

    ``property_exp``/``crop_exp`` are the raw magnitude codes (K, M, B);
    after normalization they are folded into the damage values and blank.
    """
    event_type: str
    fatalities: int = 0
    injuries: int = 0
    property_damage: float = 0.0
    property_exp: str = ""
    crop_damage: float = 0.0
    crop_exp: str = ""

    @property
    def property_cost(self) -> float:
        return self.property_damage

    @property
    def crop_cost(self) -> float:
        return self.crop_damage


@dataclass
class RankingTable:
    """Top-N ranking for one field, in aggregation units."""
    field: HarmField
    entries: TopNReport

    @property
    def label(self) -> str:
        return self.field.label

    @property
    def unit(self) -> str:
        return self.field.unit

    def display_entries(self) -> TopNReport:
        """Entries rescaled for display (costs in billions)."""
        scale = self.field.display_scale
        if scale == 1.0:
            return list(self.entries)
        return [(cat, value / scale) for cat, value in self.entries]

    def chart_series(self) -> tuple[list[str], list[Number]]:
        """(labels, values) in ascending order for horizontal bar charts."""
        shown = list(reversed(self.display_entries()))
        return [cat for cat, _ in shown], [value for _, value in shown]

    def to_dict(self) -> dict:
        return {
            "field": self.field.value,
            "label": self.label,
            "unit": self.unit,
            "entries": [
                {"rank": i, "event_type": cat, "value": value}
                for i, (cat, value) in enumerate(self.display_entries(), 1)
            ],
        }
