from __future__ import annotations

import numpy as np
import pandas as pd
import plotly.graph_objects as go

from company_browser.core.base_view import BaseView

MAX_COMPANIES = 30
DEFAULT_YEAR = 2020
YEAR_RANGE = (2010, 2024)

# Legend order follows this mapping; stages outside it are not plotted
STAGE_COLOURS = {
    "Seed": "#7edfa1",
    "Series A": "#6bc990",
    "Series B": "#5ab57f",
    "Series C": "#4a9f6e",
    "Series D": "#3a8a5d",
    "Series E": "#2c5f7c",
    "Series F": "#1e4a5f",
    "Series G": "#0f3442",
    "Public": "#f39c12",
    "Acquired": "#e74c3c",
    "Corporate": "#3498db",
}


class FundingBubbleView(BaseView):
    """
    Funding vs. year of last round for the first MAX_COMPANIES companies.

    Bubble radius is sqrt(funding * 10) / 3, coloured by stage.
    """

    id = "funding_bubble"
    label = "Funding Landscape"

    def compute_data(self) -> pd.DataFrame:
        companies = [
            c for c in self.dataset.companies[:MAX_COMPANIES] if c.stage in STAGE_COLOURS
        ]
        if not companies:
            return pd.DataFrame()

        df = pd.DataFrame(
            {
                "company": [c.name for c in companies],
                "stage": [c.stage for c in companies],
                "year": [c.last_round_year or c.founded or DEFAULT_YEAR for c in companies],
                "funding": [c.funding_or_zero for c in companies],
                "employees": [c.employees for c in companies],
            }
        )
        df["radius"] = np.sqrt(df["funding"] * 10) / 3
        return df

    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("No companies to plot")

        fig = go.Figure()
        for stage, colour in STAGE_COLOURS.items():
            stage_df = data[data["stage"] == stage]
            if stage_df.empty:
                continue
            employees = stage_df["employees"].map(lambda e: "N/A" if pd.isna(e) else f"{int(e):,}")
            fig.add_scatter(
                x=stage_df["year"],
                y=stage_df["funding"],
                name=stage,
                mode="markers",
                marker=dict(
                    size=stage_df["radius"] * 2,
                    sizemode="diameter",
                    color=colour,
                    opacity=0.6,
                    line=dict(color=colour, width=2),
                ),
                customdata=np.stack([stage_df["company"], employees], axis=-1),
                hovertemplate=(
                    "%{customdata[0]}<br>"
                    "Funding: $%{y}M<br>"
                    "Year: %{x}<br>"
                    "Employees: %{customdata[1]}<extra></extra>"
                ),
            )

        fig.update_layout(
            title=self.label,
            xaxis=dict(title="Year", range=list(YEAR_RANGE)),
            yaxis=dict(title="Funding ($M)", rangemode="tozero"),
            legend=dict(orientation="h", y=1.12, font=dict(size=10)),
            margin=dict(l=40, r=20, t=70, b=40),
        )
        return fig
