from __future__ import annotations

import json

import pytest

from covid_dash.config.loader import load_global_config
from covid_dash.config.model import ColumnMapping
from covid_dash.core.exceptions import ConfigError


def _write_global(tmp_path, payload) -> None:
    (tmp_path / "global.json").write_text(json.dumps(payload))


def test_load_global_config_resolves_relative_data_file(tmp_path):
    _write_global(
        tmp_path,
        {
            "ui_title": "Test Dashboard",
            "data_file": "data/cases.csv",
            "columns": {"age_group": "AgeBand"},
        },
    )

    cfg = load_global_config(tmp_path)

    assert cfg.ui_title == "Test Dashboard"
    assert cfg.data_file == (tmp_path / "data" / "cases.csv").resolve()
    assert cfg.columns == ColumnMapping(age_group="AgeBand", race_ethnicity="race_ethnicity_combined")


def test_load_global_config_defaults(tmp_path):
    _write_global(tmp_path, {"data_file": "/abs/cases.csv"})

    cfg = load_global_config(tmp_path)

    assert cfg.ui_title == "COVID-19 Demographics"
    assert str(cfg.data_file) == "/abs/cases.csv"
    assert cfg.columns == ColumnMapping()


def test_load_global_config_missing_file_raises(tmp_path):
    with pytest.raises(ConfigError):
        load_global_config(tmp_path)


def test_load_global_config_missing_data_file_raises(tmp_path):
    _write_global(tmp_path, {"ui_title": "No data"})

    with pytest.raises(ConfigError):
        load_global_config(tmp_path)


def test_load_global_config_invalid_json_raises(tmp_path):
    (tmp_path / "global.json").write_text("{not json")

    with pytest.raises(ConfigError):
        load_global_config(tmp_path)
