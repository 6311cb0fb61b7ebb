from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc, html

from company_browser.ui.ids import IDs
from company_browser.ui.layout.build_chart_panel import build_chart_panel
from company_browser.ui.layout.build_company_table_panel import build_company_table_panel
from company_browser.ui.layout.build_filter_panel import build_filter_panel
from company_browser.ui.layout.build_metrics_panel import build_metrics_panel
from company_browser.ui.layout.build_navbar import build_navbar

if TYPE_CHECKING:
    from company_browser.ui.config import AppConfig


def build_layout(ctx: AppConfig):
    return dbc.Container(
        fluid=True,
        className="cb-root",
        children=[
            build_navbar(ctx.global_config),

            # App-level stores
            dcc.Location(id=IDs.Control.URL),
            dcc.Store(id=IDs.Store.QUERY_STATE, storage_type="memory"),
            dcc.Store(id=IDs.Store.SCROLL_SIGNAL, storage_type="memory"),

            build_metrics_panel(ctx.dataset),
            build_chart_panel(ctx.registry),
            html.Section(
                [
                    build_filter_panel(ctx.dataset),
                    build_company_table_panel(),
                ],
                id=IDs.Control.COMPANIES_SECTION,
                className="section mb-4",
            ),
        ],
    )
