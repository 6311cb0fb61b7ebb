from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from company_browser.core.dataset import Dataset, overview_metrics


def build_metrics_panel(dataset: Dataset) -> html.Section:
    cards = [
        dbc.Col(
            dbc.Card(
                dbc.CardBody(
                    [
                        html.Div(metric.value, className="metric-value"),
                        html.Div(metric.label, className="metric-label text-muted"),
                    ]
                ),
                className="cb-metric-card",
            ),
            md=3,
            sm=6,
            className="mb-3",
        )
        for metric in overview_metrics(dataset)
    ]
    return html.Section(dbc.Row(cards, className="gx-3"), id="overview", className="section mt-3")
