from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from company_browser.ui.ids import IDs


def _nav_button(label: str, component_id: str) -> dbc.Button:
    return dbc.Button(
        label,
        id=component_id,
        color="light",
        size="sm",
        disabled=True,
        className="page-btn",
    )


def build_company_table_panel() -> dbc.Card:
    """Results counter, table container and pagination controls; all filled by callbacks."""
    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong("Companies"),
                        html.Span(id=IDs.Control.RESULTS_COUNTER, className="ms-auto text-muted"),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                [
                    html.Div(id=IDs.Control.COMPANY_TABLE),
                    html.Div(
                        [
                            _nav_button("«", IDs.Control.FIRST_PAGE_BTN),
                            _nav_button("‹", IDs.Control.PREV_PAGE_BTN),
                            html.Div(id=IDs.Control.PAGE_NUMBERS, className="page-numbers d-flex"),
                            _nav_button("›", IDs.Control.NEXT_PAGE_BTN),
                            _nav_button("»", IDs.Control.LAST_PAGE_BTN),
                        ],
                        className="pagination-bar d-flex justify-content-center align-items-center gap-1 mt-2",
                    ),
                ]
            ),
        ],
        className="cb-table-card",
    )
