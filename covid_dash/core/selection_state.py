from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Set


@dataclass
class SelectionState:
    """
    Represents the current user selection on the pie and bar charts.

    Fields:

    - races: race/ethnicity values selected on the pie chart
    - age_groups: age-group values selected on the bar chart

    An empty set means "no filter on this dimension".
    """

    races: Set[str] = field(default_factory=set)
    age_groups: Set[str] = field(default_factory=set)

    def is_empty(self) -> bool:
        return not self.races and not self.age_groups

    def copy(self) -> SelectionState:
        return SelectionState(races=set(self.races), age_groups=set(self.age_groups))

    def to_dict(self) -> Dict[str, Any]:
        # Sorted lists keep the stored JSON stable between identical states
        return {
            "races": sorted(self.races),
            "age_groups": sorted(self.age_groups),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> SelectionState:
        data = data or {}
        return cls(
            races=_as_str_set(data.get("races")),
            age_groups=_as_str_set(data.get("age_groups")),
        )


def _as_str_set(values: Iterable[Any] | None) -> Set[str]:
    if not values:
        return set()
    if isinstance(values, str):
        raise TypeError("Selection values must be a list of strings, not a string")
    return {str(v) for v in values if v is not None}
