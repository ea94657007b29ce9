from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Tuple

import dash
from dash import Input, Output, State, ctx as dash_ctx
from dash.exceptions import PreventUpdate

from covid_dash.core.controller import CrossFilterController
from covid_dash.core.dataset import Dataset, Dimension
from covid_dash.core.view_registry import ViewRegistry
from covid_dash.ui.callbacks.callbacks_utils import clicked_value, try_parse_selection_state
from covid_dash.ui.ids import IDs, graph_id

if TYPE_CHECKING:
    from covid_dash.ui.config import AppConfig

logger = logging.getLogger(__name__)

# graph id -> (dimension, clickData field holding the category)
ClickSources = Mapping[str, Tuple[Dimension, str]]


def click_sources(registry: ViewRegistry) -> Dict[str, Tuple[Dimension, str]]:
    """Graph ids of the registered views whose clicks toggle a dimension."""
    return {
        graph_id(cls.id): (cls.dimension, cls.click_field)
        for cls in registry.all_classes()
        if cls.dimension is not None and cls.click_field is not None
    }


def apply_interaction(
    dataset: Dataset,
    sources: ClickSources,
    state_data: Optional[dict[str, Any]],
    trigger_id: Optional[str],
    click_data: Any = None,
) -> dict[str, Any]:
    """
    Pure helper: apply one user interaction to the stored selection and
    return the new store payload.

    - clear button -> empty selection
    - click on a filter source graph -> toggle the clicked category
    - anything else -> selection unchanged (stale values pruned)
    """
    state = try_parse_selection_state(state_data)
    controller = CrossFilterController.from_state(state) if state is not None else CrossFilterController()

    if trigger_id == IDs.Control.CLEAR_SELECTION_BTN:
        controller.clear()
    elif trigger_id in sources:
        dimension, field = sources[trigger_id]
        value = clicked_value(click_data, field)
        if value is not None:
            controller.toggle(dimension, value)
        else:
            logger.warning(
                "Click without a category value",
                extra={"trigger": trigger_id, "click_data": click_data},
            )

    controller.prune(dataset)
    return controller.state.to_dict()


def register_selection_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    sources = click_sources(ctx.registry)
    source_ids = list(sources)

    # ---------------------------------------------------------
    # Filter source clicks and the clear button -> selection store
    #
    # clickData is written back as None so that clicking the same mark
    # again fires a new event (that is how a slice gets deselected).
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.SELECTION_STATE, "data"),
        *[Output(gid, "clickData") for gid in source_ids],
        *[Input(gid, "clickData") for gid in source_ids],
        Input(IDs.Control.CLEAR_SELECTION_BTN, "n_clicks"),
        State(IDs.Store.SELECTION_STATE, "data"),
        prevent_initial_call=True,
    )
    def update_selection(*args):
        clicks = dict(zip(source_ids, args[: len(source_ids)]))
        state_data = args[-1]

        trigger_id = dash_ctx.triggered_id
        click_data = clicks.get(trigger_id)
        if trigger_id in sources and click_data is None:
            raise PreventUpdate

        new_state = apply_interaction(ctx.dataset, sources, state_data, trigger_id, click_data)
        logger.info(
            "selection_changed",
            extra={"trigger": trigger_id, "selection": new_state},
        )
        return (new_state, *([None] * len(source_ids)))
