from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from covid_dash.ui.ids import IDs


def build_status_bar() -> dbc.Card:
    return dbc.Card(
        dbc.CardBody(
            html.Div(
                [
                    html.Div(id=IDs.Control.RECORD_COUNT, className="me-4"),
                    html.Div(id=IDs.Control.SELECTION_SUMMARY, className="text-muted me-auto"),
                    dbc.Button(
                        "Clear selection",
                        id=IDs.Control.CLEAR_SELECTION_BTN,
                        color="secondary",
                        size="sm",
                    ),
                ],
                className="d-flex align-items-center",
            ),
            className="p-2",
        ),
        className="mb-3",
    )
