from __future__ import annotations

import plotly.graph_objects as go

from company_browser.core.base_view import BaseView, ChartSeries


class PatentCategoryView(BaseView):
    """Patent count per category."""

    id = "patent_categories"
    label = "Patents by Category"

    def compute_data(self) -> ChartSeries:
        df = self.dataset.aggregate("patents_by_category").dropna(subset=["category"])
        return ChartSeries(
            labels=df["category"].astype(str).tolist(),
            series={"Number of Patents": df["count"].fillna(0).tolist()},
        )

    def render_figure(self, data: ChartSeries) -> go.Figure:
        if data.is_empty:
            return self.empty_figure("No patent data")

        fig = go.Figure(
            go.Bar(
                x=data.labels,
                y=data.series["Number of Patents"],
                marker=dict(color="#3a8a5d", line=dict(color="#2c5f7c", width=1)),
            )
        )
        fig.update_layout(
            title=self.label,
            showlegend=False,
            xaxis=dict(tickangle=-45),
            yaxis=dict(title="Number of Patents", rangemode="tozero"),
            margin=dict(l=40, r=20, t=50, b=80),
        )
        return fig
