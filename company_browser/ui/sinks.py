from __future__ import annotations

from typing import Any, List, Optional, Sequence

import dash_bootstrap_components as dbc
from dash import html

from company_browser.core.pagination import PaginationControls
from company_browser.core.records import CompanyRecord
from company_browser.core.sinks import CounterSink, PaginationSink, ScrollSink, TableSink
from company_browser.ui.helpers import company_row
from company_browser.ui.ids import page_number_id

TABLE_COLUMNS = ["Company", "Funding", "Stage", "Category", "Location", "Founded", "Status"]


def empty_state() -> html.Div:
    return html.Div(
        [
            html.H3("No companies found"),
            html.P("Try adjusting your filters or search terms"),
        ],
        className="empty-state",
    )


def company_table(records: Sequence[CompanyRecord]) -> dbc.Table:
    body = []
    for record in records:
        row = company_row(record)
        body.append(
            html.Tr(
                [
                    html.Td(
                        [
                            html.Div(row["name"], className="company-name"),
                            html.Div(row["tech"], className="company-tech"),
                        ]
                    ),
                    html.Td(row["funding"], className="company-funding"),
                    html.Td(html.Span(row["stage"], className=f"company-stage {row['stage_class']}".strip())),
                    html.Td(row["category"]),
                    html.Td(row["location"], className="company-location"),
                    html.Td(row["founded"]),
                    html.Td(html.Span(row["status"], className=f"company-status {row['status_class']}")),
                ]
            )
        )

    return dbc.Table(
        [
            html.Thead(html.Tr([html.Th(c) for c in TABLE_COLUMNS])),
            html.Tbody(body),
        ],
        hover=True,
        responsive=True,
        className="company-table",
    )


def page_button(page: int, current: int) -> html.Div:
    return html.Div(
        str(page),
        id=page_number_id(page),
        n_clicks=0,
        className="page-number" + (" active" if page == current else ""),
    )


def ellipsis() -> html.Div:
    return html.Div("...", className="page-number ellipsis")


def page_number_children(controls: PaginationControls) -> List[Any]:
    children: List[Any] = []
    if controls.show_first:
        children.append(page_button(1, controls.current_page))
        if controls.show_leading_ellipsis:
            children.append(ellipsis())

    children.extend(page_button(p, controls.current_page) for p in controls.visible_page_numbers)

    if controls.show_last:
        if controls.show_trailing_ellipsis:
            children.append(ellipsis())
        children.append(page_button(controls.last_page_number, controls.current_page))
    return children


class DashRenderSink(TableSink, CounterSink, PaginationSink, ScrollSink):
    """
    Collects what the coordinator pushes as Dash components, ready to be
    returned from a callback.
    """

    def __init__(self) -> None:
        self.table: Any = None
        self.counter: str = ""
        self.page_numbers: List[Any] = []
        self.controls: Optional[PaginationControls] = None
        self.scroll_requested = False

    # TableSink
    def render_rows(self, records: Sequence[CompanyRecord]) -> None:
        self.table = company_table(records)

    def render_empty(self) -> None:
        self.table = empty_state()

    # CounterSink
    def render_counter(self, start: int, end: int, total: int) -> None:
        self.counter = f"Showing {start}-{end} of {total} companies"

    def render_no_results(self, message: str) -> None:
        self.counter = message

    # PaginationSink
    def render_pagination(self, controls: PaginationControls) -> None:
        self.controls = controls
        self.page_numbers = page_number_children(controls)

    # ScrollSink
    def scroll_to_results(self) -> None:
        self.scroll_requested = True

    def button_states(self) -> tuple[bool, bool, bool, bool]:
        """disabled flags for (first, prev, next, last)."""
        if self.controls is None:
            return True, True, True, True
        no_prev = not self.controls.has_prev
        no_next = not self.controls.has_next
        return no_prev, no_prev, no_next, no_next
