from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from covid_dash.core.aggregation import aggregate
from covid_dash.core.base_view import BaseView, HIGHLIGHT_COLOUR
from covid_dash.core.controller import CrossFilterController
from covid_dash.core.dataset import Dimension
from covid_dash.views.helpers import percentages

BAR_COLOUR = "#42a5f5"


class AgeBarView(BaseView):
    """
    Record count per age group, largest group first.
    """

    id = "age_bar"
    label = "Age Group"
    dimension = Dimension.AGE_GROUP
    click_field = "x"

    def compute_data(self, controller: CrossFilterController) -> pd.DataFrame:
        counts = aggregate(self.dataset, lambda r: r.age_group).sorted_by_count()
        if not counts:
            return pd.DataFrame(columns=["age_group", "count", "percentage", "selected"])

        df = pd.DataFrame(counts.pairs(), columns=["age_group", "count"])
        df["percentage"] = percentages(df["count"])
        df["selected"] = [controller.is_selected(self.dimension, a) for a in df["age_group"]]
        return df

    def render_figure(self, data: pd.DataFrame, controller: CrossFilterController) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("No age-group data")

        fig = go.Figure(
            go.Bar(
                x=data["age_group"],
                y=data["count"],
                customdata=data["percentage"],
                marker_color=[HIGHLIGHT_COLOUR if sel else BAR_COLOUR for sel in data["selected"]],
                hovertemplate="%{x}: %{y} (%{customdata:.2f}%)<extra></extra>",
            )
        )
        fig.update_xaxes(
            type="category",
            tickangle=-45,
            categoryorder="array",
            categoryarray=list(data["age_group"]),
        )
        fig.update_layout(
            height=450,
            margin=dict(l=50, r=20, t=40, b=60),
            xaxis_title="Age group",
            yaxis_title="Cases",
            clickmode="event",
        )
        return fig
