from __future__ import annotations

import plotly.graph_objects as go

from company_browser.core.base_view import BaseView, ChartSeries

STAGE_BAR_COLOURS = [
    "#7edfa1", "#6bc990", "#5ab57f", "#4a9f6e",
    "#3a8a5d", "#2c5f7c", "#1e4a5f", "#0f3442",
]


class FundingStageView(BaseView):
    """Total funding per stage."""

    id = "funding_stage"
    label = "Funding by Stage"

    def compute_data(self) -> ChartSeries:
        df = self.dataset.aggregate("funding_by_stage").dropna(subset=["stage"])
        return ChartSeries(
            labels=df["stage"].astype(str).tolist(),
            series={"Total Funding ($M)": df["amount"].fillna(0).tolist()},
        )

    def render_figure(self, data: ChartSeries) -> go.Figure:
        if data.is_empty:
            return self.empty_figure("No stage funding data")

        # Colours cycle when there are more stages than colours
        colours = [STAGE_BAR_COLOURS[i % len(STAGE_BAR_COLOURS)] for i in range(len(data.labels))]
        fig = go.Figure(
            go.Bar(
                x=data.labels,
                y=data.series["Total Funding ($M)"],
                marker=dict(color=colours),
                hovertemplate="Funding: $%{y:,}M<extra></extra>",
            )
        )
        fig.update_layout(
            title=self.label,
            showlegend=False,
            yaxis=dict(title="Total Funding ($M)", rangemode="tozero"),
            margin=dict(l=40, r=20, t=50, b=40),
        )
        return fig
