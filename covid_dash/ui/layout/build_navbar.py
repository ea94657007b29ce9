from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from covid_dash.config.model import GlobalConfig
from covid_dash.core.dataset import Dataset


def build_navbar(global_config: GlobalConfig, dataset: Dataset) -> dbc.Navbar:
    title = getattr(global_config, "ui_title", "COVID-19 Demographics")
    subtitle = "Click a slice or bar to filter the heatmap"

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(title, className="mb-0"),
                        html.Small(subtitle, className="text-muted"),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                html.Div(
                    [
                        html.Div("Dataset", className="navbar-dataset-title"),
                        html.Strong(dataset.name),
                    ],
                    className="d-flex flex-column align-items-end",
                ),
            ],
        ),
        color="light",
        className="mb-2",
    )
