from __future__ import annotations

import plotly.graph_objects as go

from company_browser.core.base_view import BaseView, ChartSeries

AMOUNT = "Funding Amount ($M)"
DEALS = "Number of Deals"


class QuarterlyFundingView(BaseView):
    """
    Funding amount and deal count per quarter, on separate y-axes.
    """

    id = "quarterly_funding"
    label = "Quarterly Funding"

    def compute_data(self) -> ChartSeries:
        df = self.dataset.aggregate("funding_quarterly").dropna(subset=["quarter"])
        return ChartSeries(
            labels=df["quarter"].astype(str).tolist(),
            series={
                AMOUNT: df["amount"].fillna(0).tolist(),
                DEALS: df["deals"].fillna(0).tolist(),
            },
        )

    def render_figure(self, data: ChartSeries) -> go.Figure:
        if data.is_empty:
            return self.empty_figure("No quarterly funding data")

        fig = go.Figure()
        fig.add_scatter(
            x=data.labels,
            y=data.series[AMOUNT],
            name=AMOUNT,
            mode="lines",
            line=dict(color="#2c5f7c", width=2, shape="spline"),
            yaxis="y",
        )
        fig.add_scatter(
            x=data.labels,
            y=data.series[DEALS],
            name=DEALS,
            mode="lines",
            line=dict(color="#3a8a5d", width=2, shape="spline"),
            yaxis="y2",
        )
        fig.update_layout(
            title=self.label,
            hovermode="x unified",
            yaxis=dict(title="Funding ($M)", side="left"),
            yaxis2=dict(title=DEALS, side="right", overlaying="y", showgrid=False),
            legend=dict(orientation="h", y=1.1),
            margin=dict(l=40, r=40, t=60, b=40),
        )
        return fig
