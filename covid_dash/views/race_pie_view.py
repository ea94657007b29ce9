from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from covid_dash.core.aggregation import aggregate
from covid_dash.core.base_view import BaseView, HIGHLIGHT_COLOUR
from covid_dash.core.controller import CrossFilterController
from covid_dash.core.dataset import Dimension
from covid_dash.views.helpers import percentages


class RacePieView(BaseView):
    """
    Share of records per race/ethnicity. Clicking a slice toggles that race
    in the cross-filter; the pie itself always shows the full dataset.
    """

    id = "race_pie"
    label = "Race / Ethnicity"
    dimension = Dimension.RACE
    click_field = "label"

    def compute_data(self, controller: CrossFilterController) -> pd.DataFrame:
        counts = aggregate(self.dataset, lambda r: r.race_ethnicity)
        if not counts:
            return pd.DataFrame(columns=["race", "count", "percentage", "selected"])

        df = pd.DataFrame(counts.pairs(), columns=["race", "count"])
        df["percentage"] = percentages(df["count"])
        df["selected"] = [controller.is_selected(self.dimension, r) for r in df["race"]]
        return df

    def render_figure(self, data: pd.DataFrame, controller: CrossFilterController) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("No race/ethnicity data")

        palette = px.colors.qualitative.Set3
        colours = [
            HIGHLIGHT_COLOUR if sel else palette[i % len(palette)]
            for i, sel in enumerate(data["selected"])
        ]

        fig = go.Figure(
            go.Pie(
                labels=data["race"],
                values=data["count"],
                customdata=data["percentage"],
                marker=dict(colors=colours, line=dict(color="#fff", width=2)),
                pull=[0.08 if sel else 0 for sel in data["selected"]],
                sort=False,
                textinfo="none",
                hovertemplate="%{label}: %{value} (%{customdata:.2f}%)<extra></extra>",
            )
        )
        fig.update_layout(
            height=450,
            margin=dict(l=20, r=20, t=40, b=20),
            legend_title="Race / Ethnicity",
            clickmode="event",
        )
        return fig
