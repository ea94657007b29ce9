from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Optional

import plotly.graph_objs as go

from .controller import CrossFilterController, FilteredRecords
from .dataset import Dataset, Dimension

logger = logging.getLogger(__name__)

HIGHLIGHT_COLOUR = "#1e3a5f"


class BaseView(ABC):
    """
    Abstract base class for all chart views.

    Defines the contract that every view in the app must follow
    - expose an 'id' - used internally and as the Dash graph key
    - expose a 'label' - used for UI/human-readable applications
    - implement 'compute_data' - the data the view must draw, given the current selection
    - implement 'render_figure' - used to render the figure using Plotly
    """

    id: str = None
    label: str = None

    # Filter source views: the dimension a click toggles and the clickData
    # field that carries the clicked category. None for views that only
    # consume the cross-filter.
    dimension: Optional[Dimension] = None
    click_field: Optional[str] = None

    panel_height: str = "470px"

    def __init__(self, dataset: Dataset):
        self.dataset = dataset

    @abstractmethod
    def compute_data(self, controller: CrossFilterController) -> Any:
        """
        Compute the data given the current selection
        :param controller: the {@link CrossFilterController} holding what the user has clicked
        :return: data: a dataframe with one row per mark to draw
        """
        raise NotImplementedError()

    @abstractmethod
    def render_figure(self, data: Any, controller: CrossFilterController) -> go.Figure:
        """
        Render the figure given the computed data
        :param data: the data provided by {@link compute_data()}
        :param controller: the {@link CrossFilterController}, used for highlight styling
        :return: the Plotly figure for this selection
        """
        raise NotImplementedError()

    # ------------------------------------------------------------------
    # Common helpers for all views
    # ------------------------------------------------------------------
    def timed_compute(self, controller: CrossFilterController) -> Any:
        start = time.perf_counter()
        data = self.compute_data(controller)
        logger.info(
            "compute_done",
            extra={
                "view_id": self.id,
                "dataset": self.dataset.name,
                "elapsed_ms": round((time.perf_counter() - start) * 1000, 2),
            },
        )
        return data

    def filtered_records(self, controller: CrossFilterController) -> FilteredRecords:
        """
        Return this view's records filtered by the controller's selection.

        Views that react to the cross-filter call this instead of filtering
        themselves, so filtering behaviour lives in one place.
        """
        return controller.filtered_records(self.dataset)

    @staticmethod
    def empty_figure(message: str) -> go.Figure:
        """
        Standardised 'no data' figure used by all views.
        """
        fig = go.Figure()
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
        )
        return fig
