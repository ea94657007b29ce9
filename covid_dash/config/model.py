from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict


@dataclass(frozen=True)
class ColumnMapping:
    """
    Source column names for the two dimensions the dashboard filters on.
    """
    age_group: str = "age_group"
    race_ethnicity: str = "race_ethnicity_combined"

    @classmethod
    def from_raw(cls, raw: Dict[str, Any] | None) -> ColumnMapping:
        raw = raw or {}
        return cls(
            age_group=str(raw.get("age_group", cls.age_group)),
            race_ethnicity=str(raw.get("race_ethnicity", cls.race_ethnicity)),
        )


@dataclass
class GlobalConfig:
    ui_title: str
    data_file: Path
    columns: ColumnMapping = field(default_factory=ColumnMapping)
    dataset_name: str = "COVID-19 cases"
