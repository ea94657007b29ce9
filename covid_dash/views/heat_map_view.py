from __future__ import annotations

import numpy as np
import pandas as pd
import plotly.graph_objects as go

from covid_dash.core.aggregation import aggregate
from covid_dash.core.base_view import BaseView, HIGHLIGHT_COLOUR
from covid_dash.core.controller import CrossFilterController


class AgeRaceHeatmapView(BaseView):
    """
    Count of records per (age group, race/ethnicity) cell over the
    cross-filtered subset.

    The axes always list every age group and race in the full dataset, so
    the grid keeps its shape while filters change; cells with no records
    are left blank. A cell is outlined when its row or its column is part
    of the current selection.
    """

    id = "heatmap"
    label = "Age × Race"
    panel_height = "620px"

    def compute_data(self, controller: CrossFilterController) -> pd.DataFrame:
        counts = aggregate(
            self.filtered_records(controller),
            lambda r: r.age_group,
            lambda r: r.race_ethnicity,
        )
        if not counts:
            return pd.DataFrame(columns=["age_group", "race", "count", "highlighted"])

        df = pd.DataFrame(counts.triples(), columns=["age_group", "race", "count"])
        df["highlighted"] = [
            controller.is_cell_selected(a, r) for a, r in zip(df["age_group"], df["race"])
        ]
        return df

    def render_figure(self, data: pd.DataFrame, controller: CrossFilterController) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("No records match the current selection")

        age_groups = self.dataset.age_groups()
        races = self.dataset.races()

        # Matrix: races (rows) × age groups (columns); NaN where no records
        pivot = (
            data.pivot(index="race", columns="age_group", values="count")
            .reindex(index=races, columns=age_groups)
        )
        z = pivot.to_numpy(dtype=float)
        max_count = float(np.nanmax(z)) if np.isfinite(z).any() else 0.0

        fig = go.Figure(
            go.Heatmap(
                z=z,
                x=age_groups,
                y=races,
                zmin=0,
                zmax=max_count or 1,
                colorscale="Viridis",
                colorbar=dict(title="Count"),
                hoverongaps=False,
                hovertemplate="%{x} - %{y}: %{z}<extra></extra>",
                xgap=2,
                ygap=2,
            )
        )

        # Categorical axes place category i at coordinate i
        x_pos = {a: i for i, a in enumerate(age_groups)}
        y_pos = {r: i for i, r in enumerate(races)}
        for row in data[data["highlighted"]].itertuples(index=False):
            xi = x_pos.get(row.age_group)
            yi = y_pos.get(row.race)
            if xi is None or yi is None:
                continue
            fig.add_shape(
                type="rect",
                x0=xi - 0.5,
                x1=xi + 0.5,
                y0=yi - 0.5,
                y1=yi + 0.5,
                line=dict(color=HIGHLIGHT_COLOUR, width=3),
                xref="x",
                yref="y",
            )

        fig.update_xaxes(type="category", tickangle=-45, title="Age group")
        fig.update_yaxes(type="category", title="Race / Ethnicity", autorange="reversed")
        fig.update_layout(
            height=600,
            margin=dict(l=40, r=40, b=100, t=40),
        )
        return fig
