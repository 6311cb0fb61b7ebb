from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output

from company_browser.core.query_state import QueryState
from company_browser.ui.ids import IDs

if TYPE_CHECKING:
    from company_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def default_control_values() -> tuple:
    """(search, category, stage, country, sort) as a fresh QueryState has them."""
    defaults = QueryState()
    return (
        defaults.search_term,
        defaults.category,
        defaults.stage,
        defaults.country,
        defaults.sort_key,
    )


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Reset button: put every control back to its default
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SEARCH_INPUT, "value"),
        Output(IDs.Control.CATEGORY_SELECT, "value"),
        Output(IDs.Control.STAGE_SELECT, "value"),
        Output(IDs.Control.COUNTRY_SELECT, "value"),
        Output(IDs.Control.SORT_SELECT, "value"),
        Input(IDs.Control.RESET_BTN, "n_clicks"),
        prevent_initial_call=True,
    )
    def reset_filter_controls(_n_clicks):
        logger.debug("Resetting filter controls")
        return default_control_values()
