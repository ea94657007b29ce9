from __future__ import annotations

import json

import pytest
from dash import Dash, dcc

from covid_dash.core.exceptions import DatasetLoadError
from covid_dash.ui.dash_app import build_view_registry, create_dash_app
from covid_dash.ui.ids import graph_id


def _write_config(tmp_path, data_file: str) -> None:
    (tmp_path / "global.json").write_text(
        json.dumps({"ui_title": "Test COVID", "data_file": data_file})
    )


def test_create_dash_app_from_config(tmp_path):
    (tmp_path / "cases.csv").write_text(
        "age_group,race_ethnicity_combined\n18-24,White\n25-34,Black\n"
    )
    _write_config(tmp_path, "cases.csv")

    app = create_dash_app(tmp_path)

    assert isinstance(app, Dash)
    assert app.title == "Test COVID"
    assert app.layout is not None


def test_create_dash_app_reports_load_failure(tmp_path):
    _write_config(tmp_path, "missing.csv")

    with pytest.raises(DatasetLoadError):
        create_dash_app(tmp_path)


def _graph_ids(component) -> list:
    if isinstance(component, (list, tuple)):
        return [gid for child in component for gid in _graph_ids(child)]
    if isinstance(component, dcc.Graph):
        return [component.id]
    children = getattr(component, "children", None)
    if children is None or isinstance(children, str):
        return []
    return _graph_ids(children)


def test_layout_has_one_graph_per_registered_view(tmp_path):
    (tmp_path / "cases.csv").write_text(
        "age_group,race_ethnicity_combined\n18-24,White\n25-34,Black\n"
    )
    _write_config(tmp_path, "cases.csv")

    app = create_dash_app(tmp_path)
    expected = [graph_id(cls.id) for cls in build_view_registry().all_classes()]

    assert _graph_ids(app.layout) == expected
