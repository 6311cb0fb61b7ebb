from __future__ import annotations

import plotly.graph_objects as go

from company_browser.core.base_view import BaseView, ChartSeries


class GithubReposView(BaseView):
    id = "github_repos"
    label = "Top GitHub Repositories"

    def compute_data(self) -> ChartSeries:
        df = self.dataset.aggregate("github_top_repos").dropna(subset=["name"])
        return ChartSeries(
            labels=df["name"].astype(str).tolist(),
            series={
                "Stars": df["stars"].fillna(0).tolist(),
                "Forks": df["forks"].fillna(0).tolist(),
            },
        )

    def render_figure(self, data: ChartSeries) -> go.Figure:
        if data.is_empty:
            return self.empty_figure("No repository data")

        fig = go.Figure()
        for name, colour in (("Stars", "#2c5f7c"), ("Forks", "#3a8a5d")):
            fig.add_bar(
                y=data.labels,
                x=data.series[name],
                name=name,
                orientation="h",
                marker_color=colour,
            )
        fig.update_layout(
            title=self.label,
            barmode="group",
            xaxis=dict(rangemode="tozero"),
            yaxis=dict(autorange="reversed"),
            margin=dict(l=120, r=20, t=50, b=40),
        )
        return fig
