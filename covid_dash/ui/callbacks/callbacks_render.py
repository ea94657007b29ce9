from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
import plotly.graph_objs as go
from dash import Input, Output

from covid_dash.core.controller import CrossFilterController
from covid_dash.core.dataset import Dataset
from covid_dash.core.selection_state import SelectionState
from covid_dash.core.view_registry import ViewRegistry
from covid_dash.ui.callbacks.callbacks_utils import try_parse_selection_state
from covid_dash.ui.ids import IDs, graph_id

if TYPE_CHECKING:
    from covid_dash.ui.config import AppConfig

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Helper: Empty/Error Figures
# -----------------------------------------------------------------------------
def _message_figure(title: str, details: Optional[str] = None) -> go.Figure:
    fig = go.Figure()
    text = title if details is None else f"{title}<br><br>{details}"
    fig.add_annotation(
        text=text,
        showarrow=False,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
    return fig


def _error_figure(details: str) -> go.Figure:
    return _message_figure("Something went wrong while rendering this view.", details)


def render_view(registry: ViewRegistry, view_id: str, dataset: Dataset, controller: CrossFilterController) -> go.Figure:
    """Compute + render one view; errors become an error figure instead of breaking the page."""
    try:
        view = registry.create(view_id, dataset)
        data = view.timed_compute(controller)
        return view.render_figure(data, controller)
    except Exception:
        logger.exception(
            "Error while rendering view",
            extra={"view_id": view_id, "selection": controller.state.to_dict()},
        )
        return _error_figure(
            "The app hit an unexpected error. "
            "If this keeps happening, grab the logs and open an issue."
        )


def summarise_selection(state: SelectionState) -> str:
    if state.is_empty():
        return "No filters applied - click a slice or a bar to filter."
    parts = []
    if state.races:
        parts.append("Race: " + ", ".join(sorted(state.races)))
    if state.age_groups:
        parts.append("Age: " + ", ".join(sorted(state.age_groups)))
    return " · ".join(parts)


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    view_ids = [cls.id for cls in ctx.registry.all_classes()]

    # ---------------------------------------------------------
    # Selection store -> every registered view + status bar
    # ---------------------------------------------------------
    @app.callback(
        *[Output(graph_id(v), "figure") for v in view_ids],
        Output(IDs.Control.RECORD_COUNT, "children"),
        Output(IDs.Control.SELECTION_SUMMARY, "children"),
        Input(IDs.Store.SELECTION_STATE, "data"),
    )
    def update_figures_from_selection(state_data: dict[str, Any] | None):
        state = try_parse_selection_state(state_data)
        if state is None:
            state = SelectionState()

        controller = CrossFilterController.from_state(state)
        figures = [render_view(ctx.registry, v, ctx.dataset, controller) for v in view_ids]

        n_matching = len(controller.filtered_records(ctx.dataset))
        record_count = f"{n_matching:,} of {len(ctx.dataset):,} records"
        return (*figures, record_count, summarise_selection(state))
