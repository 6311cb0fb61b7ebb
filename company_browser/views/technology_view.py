from __future__ import annotations

import plotly.graph_objects as go

from company_browser.core.base_view import BaseView, ChartSeries

CATEGORY_COLOURS = [
    "#2c5f7c", "#3a8a5d", "#4a9f6e", "#5ab57f",
    "#6bc990", "#7edfa1", "#8fe5b2", "#a0efc3",
]


class TechnologyCategoryView(BaseView):
    """
    Doughnut of companies per technology category.
    """

    id = "technology_categories"
    label = "Technology Categories"

    def compute_data(self) -> ChartSeries:
        df = self.dataset.aggregate("technology_categories").dropna(subset=["name"])
        return ChartSeries(
            labels=df["name"].astype(str).tolist(),
            series={"Companies": df["value"].fillna(0).tolist()},
        )

    def render_figure(self, data: ChartSeries) -> go.Figure:
        if data.is_empty:
            return self.empty_figure("No technology data")

        fig = go.Figure(
            go.Pie(
                labels=data.labels,
                values=data.series["Companies"],
                hole=0.5,
                marker=dict(colors=CATEGORY_COLOURS, line=dict(color="#fff", width=2)),
                hovertemplate="%{label}: %{value} companies<extra></extra>",
                sort=False,
            )
        )
        fig.update_layout(
            title=self.label,
            legend=dict(orientation="v", x=1.02, y=0.5),
            margin=dict(l=20, r=20, t=50, b=20),
        )
        return fig
