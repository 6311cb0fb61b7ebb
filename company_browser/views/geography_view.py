from __future__ import annotations

import plotly.graph_objects as go

from company_browser.core.base_view import BaseView, ChartSeries

TOP_N_COUNTRIES = 10


class GeographyView(BaseView):
    """
    Company count per country, first TOP_N_COUNTRIES entries of the distribution.
    """

    id = "geography"
    label = "Geographic Distribution"

    def compute_data(self) -> ChartSeries:
        df = (
            self.dataset.aggregate("geography")
            .dropna(subset=["country"])
            .head(TOP_N_COUNTRIES)
        )
        return ChartSeries(
            labels=df["country"].astype(str).tolist(),
            series={"Number of Companies": df["count"].fillna(0).tolist()},
        )

    def render_figure(self, data: ChartSeries) -> go.Figure:
        if data.is_empty:
            return self.empty_figure("No geographic data")

        fig = go.Figure(
            go.Bar(
                x=data.labels,
                y=data.series["Number of Companies"],
                marker=dict(color="#3a8a5d", line=dict(color="#2c5f7c", width=1)),
                hovertemplate="Companies: %{y}<extra></extra>",
            )
        )
        fig.update_layout(
            title=self.label,
            showlegend=False,
            yaxis=dict(rangemode="tozero", dtick=5),
            margin=dict(l=40, r=20, t=50, b=40),
        )
        return fig
