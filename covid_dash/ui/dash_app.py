from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from covid_dash.config.loader import load_global_config
from covid_dash.core.dataset_loader import from_config
from covid_dash.core.view_registry import ViewRegistry
from covid_dash.ui.layout.build_layout import build_layout
from covid_dash.ui.callbacks.callbacks_selection import register_selection_callbacks
from covid_dash.ui.callbacks.callbacks_render import register_render_callbacks

logger = logging.getLogger(__name__)


def build_view_registry() -> ViewRegistry:
    from covid_dash.views import AgeBarView, AgeRaceHeatmapView, RacePieView

    registry = ViewRegistry()
    registry.register(RacePieView)
    registry.register(AgeBarView)
    registry.register(AgeRaceHeatmapView)
    return registry


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Load the dataset once, before any callback can run.
    #    DatasetLoadError / DatasetSchemaError propagate to the caller.
    dataset = from_config(global_config)

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        dataset=dataset,
        registry=build_view_registry(),
    )
    ctx.validate()

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
    )
    app.title = global_config.ui_title
    app.layout = build_layout(ctx)

    # Register callbacks
    register_selection_callbacks(app, ctx)
    register_render_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"dataset": dataset.name, "views": [cls.id for cls in ctx.registry.all_classes()]},
    )
    return app
