from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Set

from .dataset import Dataset, Dimension, Record
from .selection_state import SelectionState

logger = logging.getLogger(__name__)


class FilteredRecords(Iterable[Record]):
    """
    Lazy, restartable view over the records matching a selection snapshot.

    Each iteration re-scans the source, so iterating twice yields the same
    records as long as the source is unchanged. Later toggles on the
    controller do not affect an already created view.
    """

    def __init__(self, records: Iterable[Record], races: Set[str], age_groups: Set[str]) -> None:
        self._records = records
        self._races = frozenset(races)
        self._age_groups = frozenset(age_groups)

    def matches(self, record: Record) -> bool:
        if self._races and record.race_ethnicity not in self._races:
            return False
        if self._age_groups and record.age_group not in self._age_groups:
            return False
        return True

    def __iter__(self) -> Iterator[Record]:
        return (r for r in self._records if self.matches(r))

    def __len__(self) -> int:
        return sum(1 for _ in self)


class CrossFilterController:
    """
    Owns the SelectionState shared by the pie, bar and heatmap views.

    Policy:
    - multi-select per dimension (a set per dimension)
    - AND across dimensions, OR within one dimension
    - toggling a selected value removes it, toggling an unselected value adds it
    - a heatmap cell is highlighted when its row OR its column is selected

    The controller only mutates selection state. Re-rendering after a
    mutation is the caller's job.
    """

    def __init__(self, state: Optional[SelectionState] = None) -> None:
        self._state = state.copy() if state is not None else SelectionState()

    @classmethod
    def from_state(cls, state: SelectionState) -> CrossFilterController:
        return cls(state)

    @property
    def state(self) -> SelectionState:
        """A copy of the current selection; mutate through the toggles only."""
        return self._state.copy()

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def toggle_race(self, value: str) -> None:
        self._toggle(self._state.races, value)

    def toggle_age_group(self, value: str) -> None:
        self._toggle(self._state.age_groups, value)

    def toggle(self, dimension: Dimension | str, value: str) -> None:
        self._toggle(self._selected(dimension), value)

    def clear(self) -> None:
        self._state.races.clear()
        self._state.age_groups.clear()
        logger.debug("Selection cleared")

    def prune(self, dataset: Dataset) -> Dict[Dimension, List[str]]:
        """
        Drop selected values that never occur in the dataset.
        Returns the removed values per dimension.
        """
        stale_races = sorted(self._state.races - dataset.valid_values(Dimension.RACE))
        stale_ages = sorted(self._state.age_groups - dataset.valid_values(Dimension.AGE_GROUP))
        self._state.races -= set(stale_races)
        self._state.age_groups -= set(stale_ages)

        if stale_races or stale_ages:
            logger.info(
                "Pruned stale selections",
                extra={"races": stale_races, "age_groups": stale_ages},
            )
        return {Dimension.RACE: stale_races, Dimension.AGE_GROUP: stale_ages}

    def _selected(self, dimension: Dimension | str) -> Set[str]:
        """
        The selection set for a dimension. Plain strings ("race", "age_group")
        are accepted.

        Raises:
            ValueError: if dimension is not a known Dimension
        """
        dimension = Dimension(dimension)
        if dimension is Dimension.RACE:
            return self._state.races
        if dimension is Dimension.AGE_GROUP:
            return self._state.age_groups
        raise ValueError(f"Unknown dimension '{dimension}'")

    @staticmethod
    def _toggle(selected: Set[str], value: str) -> None:
        if value in selected:
            selected.remove(value)
        else:
            selected.add(value)
        logger.debug("Selection toggled", extra={"value": value, "selected": sorted(selected)})

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def filtered_records(self, records: Iterable[Record]) -> FilteredRecords:
        return FilteredRecords(records, self._state.races, self._state.age_groups)

    def is_selected(self, dimension: Dimension | str, value: str) -> bool:
        return value in self._selected(dimension)

    def is_cell_selected(self, age_group: str, race: str) -> bool:
        return age_group in self._state.age_groups or race in self._state.races

    def has_selection(self) -> bool:
        return not self._state.is_empty()
