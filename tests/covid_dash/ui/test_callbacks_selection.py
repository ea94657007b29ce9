from __future__ import annotations

from covid_dash.core.dataset import Dataset, Dimension, Record
from covid_dash.core.selection_state import SelectionState
from covid_dash.core.view_registry import ViewRegistry
from covid_dash.ui.callbacks.callbacks_selection import apply_interaction, click_sources
from covid_dash.ui.callbacks.callbacks_utils import clicked_value, try_parse_selection_state
from covid_dash.ui.dash_app import build_view_registry
from covid_dash.ui.ids import IDs, graph_id
from covid_dash.views import AgeRaceHeatmapView, RacePieView

PIE = graph_id("race_pie")
BAR = graph_id("age_bar")
SOURCES = click_sources(build_view_registry())


def _make_dataset() -> Dataset:
    return Dataset(
        [
            Record(age_group="18-24", race_ethnicity="White"),
            Record(age_group="18-24", race_ethnicity="Black"),
            Record(age_group="25-34", race_ethnicity="White"),
        ],
        name="CallbackDataset",
    )


def _pie_click(label: str) -> dict:
    return {"points": [{"curveNumber": 0, "pointNumber": 0, "label": label, "value": 2}]}


def _bar_click(x: str) -> dict:
    return {"points": [{"curveNumber": 0, "pointNumber": 0, "x": x, "y": 2}]}


def test_pie_click_toggles_race():
    ds = _make_dataset()

    state = apply_interaction(ds, SOURCES, SelectionState().to_dict(), PIE, _pie_click("White"))
    assert state == {"races": ["White"], "age_groups": []}

    state = apply_interaction(ds, SOURCES, state, PIE, _pie_click("White"))
    assert state == {"races": [], "age_groups": []}


def test_second_pie_click_adds_to_selection():
    ds = _make_dataset()

    state = apply_interaction(ds, SOURCES, None, PIE, _pie_click("White"))
    state = apply_interaction(ds, SOURCES, state, PIE, _pie_click("Black"))

    assert state["races"] == ["Black", "White"]


def test_bar_click_toggles_age_group():
    ds = _make_dataset()

    state = apply_interaction(ds, SOURCES, None, BAR, _bar_click("25-34"))

    assert state == {"races": [], "age_groups": ["25-34"]}


def test_clear_button_empties_selection():
    ds = _make_dataset()
    start = SelectionState(races={"White"}, age_groups={"18-24"}).to_dict()

    state = apply_interaction(ds, SOURCES, start, IDs.Control.CLEAR_SELECTION_BTN)

    assert state == SelectionState().to_dict()


def test_interaction_prunes_stale_values():
    ds = _make_dataset()
    start = {"races": ["Martian", "White"], "age_groups": []}

    state = apply_interaction(ds, SOURCES, start, BAR, _bar_click("18-24"))

    assert state == {"races": ["White"], "age_groups": ["18-24"]}


def test_malformed_store_is_treated_as_empty():
    ds = _make_dataset()

    state = apply_interaction(ds, SOURCES, ["not", "a", "dict"], PIE, _pie_click("Black"))

    assert state == {"races": ["Black"], "age_groups": []}


def test_click_without_points_leaves_selection_unchanged():
    ds = _make_dataset()
    start = {"races": ["White"], "age_groups": []}

    state = apply_interaction(ds, SOURCES, start, PIE, {"points": []})

    assert state == start


def test_clicked_value_reads_field():
    assert clicked_value(_pie_click("White"), "label") == "White"
    assert clicked_value(_bar_click("18-24"), "x") == "18-24"
    assert clicked_value(None, "x") is None
    assert clicked_value({"points": [{"y": 1}]}, "x") is None


def test_try_parse_selection_state():
    assert try_parse_selection_state(None) == SelectionState()
    assert try_parse_selection_state({"races": ["White"]}) == SelectionState(races={"White"})
    assert try_parse_selection_state("garbage") is None
    assert try_parse_selection_state({"races": "White"}) is None


def test_click_sources_come_from_registered_views():
    assert SOURCES == {
        PIE: (Dimension.RACE, "label"),
        BAR: (Dimension.AGE_GROUP, "x"),
    }


def test_click_sources_skip_views_without_a_dimension():
    registry = ViewRegistry()
    registry.register(AgeRaceHeatmapView)
    registry.register(RacePieView)

    assert click_sources(registry) == {PIE: (Dimension.RACE, "label")}


def test_click_on_unregistered_graph_leaves_selection_unchanged():
    ds = _make_dataset()
    start = {"races": ["White"], "age_groups": []}
    pie_only = {PIE: SOURCES[PIE]}

    state = apply_interaction(ds, pie_only, start, BAR, _bar_click("18-24"))

    assert state == start
