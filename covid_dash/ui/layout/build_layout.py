from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from covid_dash.core.selection_state import SelectionState
from covid_dash.ui.ids import IDs
from covid_dash.ui.layout.build_chart_panel import build_chart_panel
from covid_dash.ui.layout.build_navbar import build_navbar
from covid_dash.ui.layout.build_status_bar import build_status_bar

if TYPE_CHECKING:
    from covid_dash.ui.config import AppConfig


def build_layout(ctx: AppConfig):
    navbar = build_navbar(ctx.global_config, ctx.dataset)
    view_classes = ctx.registry.all_classes()

    # Clickable (filter source) views side by side, the rest full width below
    sources = [cls for cls in view_classes if cls.dimension is not None]
    consumers = [cls for cls in view_classes if cls.dimension is None]

    rows = []
    if sources:
        width = max(12 // len(sources), 3)
        rows.append(
            dbc.Row(
                [
                    dbc.Col(build_chart_panel(cls.id, cls.label, height=cls.panel_height), md=width)
                    for cls in sources
                ],
                className="gx-3",
            )
        )
    for cls in consumers:
        rows.append(
            dbc.Row(
                dbc.Col(build_chart_panel(cls.id, cls.label, height=cls.panel_height)),
                className="gx-3",
            )
        )

    return dbc.Container(
        fluid=True,
        className="covid-root",
        children=[
            navbar,

            # Per-client selection, lives for the browser session only
            dcc.Store(
                id=IDs.Store.SELECTION_STATE,
                storage_type="session",
                data=SelectionState().to_dict(),
            ),

            build_status_bar(),
            *rows,
        ],
    )
