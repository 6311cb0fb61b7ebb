from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any, Dict, Optional

import dash
from dash import ALL, Input, Output, State, exceptions

from company_browser.core.query_state import QueryState
from company_browser.core.view_coordinator import ViewCoordinator
from company_browser.ui.ids import IDs
from company_browser.ui.sinks import DashRenderSink

if TYPE_CHECKING:
    from company_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

# Filter control id -> QueryState field
FILTER_CONTROLS = {
    IDs.Control.SEARCH_INPUT: "search_term",
    IDs.Control.CATEGORY_SELECT: "category",
    IDs.Control.STAGE_SELECT: "stage",
    IDs.Control.COUNTRY_SELECT: "country",
    IDs.Control.SORT_SELECT: "sort_key",
}

NAV_BUTTONS = (
    IDs.Control.FIRST_PAGE_BTN,
    IDs.Control.PREV_PAGE_BTN,
    IDs.Control.NEXT_PAGE_BTN,
    IDs.Control.LAST_PAGE_BTN,
)


def _parse_state(data: object) -> QueryState:
    if not isinstance(data, dict) or not data:
        return QueryState()
    try:
        return QueryState.from_dict(data)
    except Exception:
        logger.exception("Invalid query-state: %r", data)
        return QueryState()


def build_coordinator(ctx: AppConfig, state: QueryState, sink: DashRenderSink) -> ViewCoordinator:
    return ViewCoordinator(
        ctx.dataset,
        table_sink=sink,
        counter_sink=sink,
        pagination_sink=sink,
        scroll_sink=sink,
        state=state,
        page_size=ctx.global_config.page_size,
        max_visible_pages=ctx.global_config.max_visible_pages,
    )


def apply_query_action(
    ctx: AppConfig,
    triggered_id: Any,
    triggered_value: Any,
    filter_values: Dict[str, Any],
    state_data: object,
) -> Optional[tuple[ViewCoordinator, DashRenderSink]]:
    """
    Pure helper: map one UI event onto a coordinator operation.

    :param triggered_id: the id of the component that fired (None on first load)
    :param triggered_value: the triggering property value (n_clicks for buttons)
    :param filter_values: QueryState field -> current control value
    :param state_data: the query-state store contents
    :return: the coordinator and the filled sink, or None when navigation was rejected
    """
    sink = DashRenderSink()
    coordinator = build_coordinator(ctx, _parse_state(state_data), sink)

    if isinstance(triggered_id, dict) and triggered_id.get("type") == IDs.Pattern.PAGE_NUMBER:
        # Freshly rendered page buttons fire with n_clicks == 0
        if not triggered_value:
            return None
        moved = coordinator.navigate(page=int(triggered_id["index"]))
    elif triggered_id == IDs.Control.FIRST_PAGE_BTN:
        moved = coordinator.navigate(page=1)
    elif triggered_id == IDs.Control.PREV_PAGE_BTN:
        moved = coordinator.navigate(delta=-1)
    elif triggered_id == IDs.Control.NEXT_PAGE_BTN:
        moved = coordinator.navigate(delta=1)
    elif triggered_id == IDs.Control.LAST_PAGE_BTN:
        moved = coordinator.navigate(page=coordinator.total_pages)
    elif triggered_id == IDs.Control.RESET_BTN:
        coordinator.reset_filters()
        moved = True
    else:
        # First load or any filter/sort control
        coordinator.update_filters(**filter_values)
        moved = True

    if not moved:
        return None
    return coordinator, sink


def register_company_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Filters / sort / pagination -> QueryState + table outputs
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.QUERY_STATE, "data"),
        Output(IDs.Control.COMPANY_TABLE, "children"),
        Output(IDs.Control.RESULTS_COUNTER, "children"),
        Output(IDs.Control.PAGE_NUMBERS, "children"),
        Output(IDs.Control.FIRST_PAGE_BTN, "disabled"),
        Output(IDs.Control.PREV_PAGE_BTN, "disabled"),
        Output(IDs.Control.NEXT_PAGE_BTN, "disabled"),
        Output(IDs.Control.LAST_PAGE_BTN, "disabled"),
        Output(IDs.Store.SCROLL_SIGNAL, "data"),
        Input(IDs.Control.SEARCH_INPUT, "value"),
        Input(IDs.Control.CATEGORY_SELECT, "value"),
        Input(IDs.Control.STAGE_SELECT, "value"),
        Input(IDs.Control.COUNTRY_SELECT, "value"),
        Input(IDs.Control.SORT_SELECT, "value"),
        Input(IDs.Control.RESET_BTN, "n_clicks"),
        Input(IDs.Control.FIRST_PAGE_BTN, "n_clicks"),
        Input(IDs.Control.PREV_PAGE_BTN, "n_clicks"),
        Input(IDs.Control.NEXT_PAGE_BTN, "n_clicks"),
        Input(IDs.Control.LAST_PAGE_BTN, "n_clicks"),
        Input({"type": IDs.Pattern.PAGE_NUMBER, "index": ALL}, "n_clicks"),
        State(IDs.Store.QUERY_STATE, "data"),
    )
    def update_company_view(
        search_term, category, stage, country, sort_key,
        _reset, _first, _prev, _next, _last, _page_numbers,
        state_data,
    ):
        triggered = dash.callback_context.triggered
        triggered_value = triggered[0]["value"] if triggered else None
        filter_values = {
            "search_term": search_term,
            "category": category,
            "stage": stage,
            "country": country,
            "sort_key": sort_key,
        }

        result = apply_query_action(
            ctx,
            dash.callback_context.triggered_id,
            triggered_value,
            filter_values,
            state_data,
        )
        if result is None:
            raise exceptions.PreventUpdate

        coordinator, sink = result
        first, prev, nxt, last = sink.button_states()
        scroll = time.time() if sink.scroll_requested else dash.no_update

        return (
            coordinator.state.to_dict(),
            sink.table,
            sink.counter,
            sink.page_numbers,
            first,
            prev,
            nxt,
            last,
            scroll,
        )

    # ---------------------------------------------------------
    # Bring the results into view after a page change
    # ---------------------------------------------------------
    app.clientside_callback(
        """
        function(signal) {
            if (signal) {
                const el = document.getElementById("%s");
                if (el) { el.scrollIntoView({behavior: "smooth", block: "start"}); }
            }
            return window.dash_clientside.no_update;
        }
        """ % IDs.Control.COMPANIES_SECTION,
        Output(IDs.Control.COMPANIES_SECTION, "title"),
        Input(IDs.Store.SCROLL_SIGNAL, "data"),
        prevent_initial_call=True,
    )
