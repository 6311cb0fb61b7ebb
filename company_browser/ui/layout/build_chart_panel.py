from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from company_browser.core.view_registry import ViewRegistry
from company_browser.ui.ids import chart_graph_id


def build_chart_panel(registry: ViewRegistry) -> html.Section:
    """
    One card per registered chart view, two per row. Figures are filled in by
    the render callbacks once the page loads.
    """
    cols = [
        dbc.Col(
            dbc.Card(
                [
                    dbc.CardHeader(html.Strong(view_cls.label), className="p-2"),
                    dbc.CardBody(
                        dcc.Loading(
                            type="default",
                            children=dcc.Graph(
                                id=chart_graph_id(view_cls.id),
                                style={"height": "420px"},
                                config={"responsive": True, "displaylogo": False},
                            ),
                        ),
                    ),
                ],
                className="cb-chart-card",
            ),
            md=6,
            className="mb-3",
        )
        for view_cls in registry.all_classes()
    ]
    return html.Section(dbc.Row(cols, className="gx-3"), id="charts", className="section")
