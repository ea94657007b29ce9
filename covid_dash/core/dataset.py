from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, overload

import pandas as pd


class Dimension(str, Enum):
    """The two categorical attributes the dashboard filters on."""

    RACE = "race"
    AGE_GROUP = "age_group"


@dataclass(frozen=True)
class Record:
    """
    One observation of the dataset.

    Fields:

    - age_group: age-group category, None when missing in the source row
    - race_ethnicity: race/ethnicity category, None when missing in the source row
    - extra: any other columns of the source row, carried along untouched
    """
    age_group: Optional[str]
    race_ethnicity: Optional[str]
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def value(self, dimension: Dimension) -> Optional[str]:
        if dimension is Dimension.RACE:
            return self.race_ethnicity
        return self.age_group


def _clean(value: Any) -> Optional[str]:
    """Normalise a raw cell to a stripped string, or None for blank / NaN."""
    if value is None:
        return None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass
    text = str(value).strip()
    return text or None


class Dataset(Sequence[Record]):
    """
    Read-only, ordered collection of Records shared by every view.

    Includes:
    - Sequence access (len, indexing, iteration)
    - Distinct observed values per dimension, in first-occurrence order
    - Cached valid-value sets used to prune stale selections
    """

    def __init__(self, records: Sequence[Record], name: str = "dataset") -> None:
        self.name = name
        self._records: tuple[Record, ...] = tuple(records)
        self._distinct: Dict[Dimension, List[str]] = {}
        self._valid: Dict[Dimension, frozenset[str]] = {}

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------
    @classmethod
    def from_frame(
        cls,
        df: pd.DataFrame,
        *,
        name: str = "dataset",
        age_column: str = "age_group",
        race_column: str = "race_ethnicity_combined",
    ) -> Dataset:
        """
        Build a Dataset from a DataFrame. The two category columns are
        string-normalised; every other column goes into Record.extra.
        """
        other_columns = [c for c in df.columns if c not in (age_column, race_column)]
        records = []
        for row in df.to_dict(orient="records"):
            records.append(
                Record(
                    age_group=_clean(row.get(age_column)),
                    race_ethnicity=_clean(row.get(race_column)),
                    extra={c: row[c] for c in other_columns},
                )
            )
        return cls(records, name=name)

    # -------------------------------------------------------------------------
    # Sequence protocol
    # -------------------------------------------------------------------------
    @overload
    def __getitem__(self, index: int) -> Record: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Record]: ...

    def __getitem__(self, index):
        return self._records[index]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"Dataset(name={self.name!r}, n_records={len(self)})"

    # -------------------------------------------------------------------------
    # Distinct values
    # -------------------------------------------------------------------------
    def distinct(self, dimension: Dimension) -> List[str]:
        """Observed values for a dimension, first-occurrence order, missing values skipped."""
        cached = self._distinct.get(dimension)
        if cached is not None:
            return list(cached)

        seen: Dict[str, None] = {}
        for record in self._records:
            value = record.value(dimension)
            if value is not None:
                seen.setdefault(value, None)

        self._distinct[dimension] = list(seen)
        return list(seen)

    def age_groups(self) -> List[str]:
        return self.distinct(Dimension.AGE_GROUP)

    def races(self) -> List[str]:
        return self.distinct(Dimension.RACE)

    def valid_values(self, dimension: Dimension) -> frozenset[str]:
        """Cached set of observed values; avoids rescanning on every callback."""
        if dimension not in self._valid:
            self._valid[dimension] = frozenset(self.distinct(dimension))
        return self._valid[dimension]
