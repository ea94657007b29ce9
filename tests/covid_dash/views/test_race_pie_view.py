from __future__ import annotations

import plotly.graph_objs as go

from covid_dash.core.base_view import HIGHLIGHT_COLOUR
from covid_dash.core.controller import CrossFilterController
from covid_dash.core.dataset import Dataset, Record
from covid_dash.views.race_pie_view import RacePieView


def _make_dataset() -> Dataset:
    """
    4 records: White ×2, Black ×1, Asian ×1, plus one with no race.
    """
    return Dataset(
        [
            Record(age_group="18-24", race_ethnicity="White"),
            Record(age_group="18-24", race_ethnicity="Black"),
            Record(age_group="25-34", race_ethnicity="White"),
            Record(age_group="25-34", race_ethnicity="Asian"),
            Record(age_group="25-34", race_ethnicity=None),
        ],
        name="PieDataset",
    )


def test_pie_compute_data_counts_and_percentages():
    view = RacePieView(dataset=_make_dataset())

    df = view.compute_data(CrossFilterController())

    assert list(df["race"]) == ["White", "Black", "Asian"]
    assert list(df["count"]) == [2, 1, 1]
    assert list(df["percentage"]) == [50.0, 25.0, 25.0]
    assert not df["selected"].any()


def test_pie_is_not_filtered_by_own_or_other_selection():
    view = RacePieView(dataset=_make_dataset())
    ctrl = CrossFilterController()
    ctrl.toggle_race("Black")
    ctrl.toggle_age_group("18-24")

    df = view.compute_data(ctrl)

    assert list(df["count"]) == [2, 1, 1]
    assert list(df["selected"]) == [False, True, False]


def test_pie_render_highlights_selected_slice():
    view = RacePieView(dataset=_make_dataset())
    ctrl = CrossFilterController()
    ctrl.toggle_race("White")

    fig = view.render_figure(view.compute_data(ctrl), ctrl)

    assert isinstance(fig, go.Figure)
    pie = fig.data[0]
    assert list(pie.labels) == ["White", "Black", "Asian"]
    assert pie.marker.colors[0] == HIGHLIGHT_COLOUR
    assert pie.marker.colors[1] != HIGHLIGHT_COLOUR
    assert pie.pull[0] > 0
    assert pie.pull[1] == 0


def test_pie_render_empty_dataset():
    view = RacePieView(dataset=Dataset([]))
    ctrl = CrossFilterController()

    df = view.compute_data(ctrl)
    assert df.empty

    fig = view.render_figure(df, ctrl)
    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 0
