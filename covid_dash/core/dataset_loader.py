from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from covid_dash.config.model import ColumnMapping, GlobalConfig
from covid_dash.core.dataset import Dataset
from covid_dash.core.exceptions import DatasetLoadError, DatasetSchemaError

logger = logging.getLogger(__name__)


def _validate_columns(df: pd.DataFrame, columns: ColumnMapping, path: Path) -> None:
    """
    Both category columns must exist. Blank cells inside them are fine;
    those rows are simply left out of the counts.
    """
    missing = [c for c in (columns.age_group, columns.race_ethnicity) if c not in df.columns]
    if missing:
        msg = f"{path.name}: required column(s) {missing} not found; available: {list(df.columns)}"
        logger.error(msg, extra={"path": str(path), "missing": missing})
        raise DatasetSchemaError(msg)


def load_csv(path: Path | str, columns: ColumnMapping | None = None, name: str | None = None) -> Dataset:
    """
    Read a delimited file into a Dataset.

    Raises:
        DatasetLoadError: the file is missing, unreadable or not parseable
        DatasetSchemaError: the age-group or race/ethnicity column is absent
    """
    path = Path(path)
    columns = columns or ColumnMapping()

    logger.info("Loading dataset", extra={"path": str(path)})

    try:
        # Categories stay strings: "0 - 17 years" must not be coerced
        df = pd.read_csv(
            path,
            dtype={columns.age_group: "string", columns.race_ethnicity: "string"},
            keep_default_na=True,
        )
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        logger.error("Failed to load dataset", extra={"path": str(path), "error": str(e)})
        raise DatasetLoadError(f"Could not load dataset from {path}: {e}") from e

    _validate_columns(df, columns, path)

    ds = Dataset.from_frame(
        df,
        name=name or path.stem,
        age_column=columns.age_group,
        race_column=columns.race_ethnicity,
    )

    logger.info(
        "Dataset loaded",
        extra={
            "dataset": ds.name,
            "n_records": len(ds),
            "n_age_groups": len(ds.age_groups()),
            "n_races": len(ds.races()),
        },
    )
    return ds


def from_config(cfg: GlobalConfig) -> Dataset:
    """
    Materialise the Dataset described by the global config.
    """
    return load_csv(cfg.data_file, columns=cfg.columns, name=cfg.dataset_name)
