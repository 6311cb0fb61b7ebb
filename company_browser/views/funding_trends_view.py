from __future__ import annotations

import plotly.graph_objects as go

from company_browser.core.base_view import BaseView, ChartSeries


class FundingTrendsView(BaseView):
    id = "funding_trends"
    label = "Funding Trends"

    def compute_data(self) -> ChartSeries:
        df = self.dataset.aggregate("funding_trends").dropna(subset=["year"])
        return ChartSeries(
            labels=df["year"].astype(str).tolist(),
            series={"Total Funding ($M)": df["amount"].fillna(0).tolist()},
        )

    def render_figure(self, data: ChartSeries) -> go.Figure:
        if data.is_empty:
            return self.empty_figure("No funding trend data")

        fig = go.Figure(
            go.Scatter(
                x=data.labels,
                y=data.series["Total Funding ($M)"],
                name="Total Funding ($M)",
                mode="lines+markers",
                line=dict(color="#2c5f7c", width=3, shape="spline"),
                fill="tozeroy",
                fillcolor="rgba(44, 95, 124, 0.1)",
                marker=dict(size=10, color="#2c5f7c", line=dict(color="#fff", width=2)),
                hovertemplate="Funding: $%{y:,}M<extra></extra>",
            )
        )
        fig.update_layout(
            title=self.label,
            showlegend=True,
            xaxis_title="Year",
            yaxis=dict(title="Funding Amount ($M)", rangemode="tozero"),
            margin=dict(l=40, r=20, t=50, b=40),
        )
        return fig
