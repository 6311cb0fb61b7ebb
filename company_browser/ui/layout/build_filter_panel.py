from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc

from company_browser.core.dataset import Dataset
from company_browser.core.query_state import ALL, DEFAULT_SORT_KEY
from company_browser.ui.helpers import SORT_OPTIONS, get_filter_dropdown_options
from company_browser.ui.ids import IDs


def _select(component_id: str, options: list, value: str, label: str) -> dbc.Col:
    return dbc.Col(
        [
            dbc.Label(label, html_for=component_id, className="form-label"),
            dcc.Dropdown(
                id=component_id,
                options=options,
                value=value,
                clearable=False,
                className="mb-2",
            ),
        ],
        md=2,
    )


def build_filter_panel(dataset: Dataset) -> dbc.Card:
    category_options, stage_options, country_options = get_filter_dropdown_options(dataset)

    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                dbc.Row(
                    [
                        dbc.Col(
                            [
                                dbc.Label("Search", html_for=IDs.Control.SEARCH_INPUT, className="form-label"),
                                dbc.Input(
                                    id=IDs.Control.SEARCH_INPUT,
                                    type="search",
                                    value="",
                                    debounce=0.3,
                                    placeholder="Search by name, technology, or location...",
                                    className="mb-2",
                                ),
                            ],
                            md=3,
                        ),
                        _select(IDs.Control.CATEGORY_SELECT, category_options, ALL, "Category"),
                        _select(IDs.Control.STAGE_SELECT, stage_options, ALL, "Stage"),
                        _select(IDs.Control.COUNTRY_SELECT, country_options, ALL, "Country"),
                        _select(IDs.Control.SORT_SELECT, SORT_OPTIONS, DEFAULT_SORT_KEY, "Sort by"),
                        dbc.Col(
                            dbc.Button(
                                "Reset",
                                id=IDs.Control.RESET_BTN,
                                color="secondary",
                                outline=True,
                                className="mt-4 w-100",
                            ),
                            md=1,
                        ),
                    ],
                    className="g-2 align-items-start",
                )
            ),
        ],
        className="cb-filter-card mb-3",
    )
