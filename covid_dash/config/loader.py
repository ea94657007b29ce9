from __future__ import annotations

import json
import logging
from pathlib import Path

from covid_dash.config.model import ColumnMapping, GlobalConfig
from covid_dash.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "COVID-19 Demographics"


def load_global_config(root: Path | str) -> GlobalConfig:
    """
    Load global.json from the config directory.

    A relative data_file is resolved against the config directory.
    """
    root = Path(root)
    logger.info("Loading global config", extra={"config_root": str(root)})

    global_path = root / "global.json"
    if not global_path.is_file():
        raise ConfigError(f"File not found at {global_path}")

    try:
        with global_path.open() as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    data_file_raw = raw.get("data_file")
    if not data_file_raw:
        raise ConfigError(f"'data_file' is required in {global_path}")

    data_file = Path(data_file_raw)
    if not data_file.is_absolute():
        data_file = (root / data_file).resolve()

    columns_raw = raw.get("columns")
    if columns_raw is not None and not isinstance(columns_raw, dict):
        raise ConfigError(f"'columns' must be an object in {global_path}")

    config = GlobalConfig(
        ui_title=raw.get("ui_title", DEFAULT_TITLE),
        data_file=data_file,
        columns=ColumnMapping.from_raw(columns_raw),
        dataset_name=raw.get("dataset_name", "COVID-19 cases"),
    )

    logger.info(
        "Global config loaded",
        extra={"data_file": str(config.data_file), "columns": vars(config.columns)},
    )
    return config
