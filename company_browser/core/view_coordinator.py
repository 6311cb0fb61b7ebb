from __future__ import annotations

import logging
from typing import Any, List, Optional

from .dataset import Dataset
from .filtering import filter_companies
from .pagination import (
    MAX_VISIBLE_PAGES,
    PAGE_SIZE,
    Page,
    counter_message,
    is_valid_page,
    paginate,
    pagination_controls,
    total_pages,
)
from .query_state import QueryState
from .records import CompanyRecord
from .sinks import CounterSink, PaginationSink, ScrollSink, TableSink
from .sorting import sort_companies

logger = logging.getLogger(__name__)


class ViewCoordinator:
    """
    Owns the QueryState and keeps the table, counter and pagination sinks in sync with it.

    Pipeline: Dataset.companies -> filter -> sort -> paginate -> sinks

    Design Notes:
    - The filtered+sorted sequence is rebuilt on every filter/sort change and
      only reused by navigation, which does not change it
    - Navigation outside [1, total_pages] is ignored: no state change, no sink call
    - Every public operation leaves the state renderable; nothing here raises for user input
    """

    def __init__(
        self,
        dataset: Dataset,
        table_sink: TableSink,
        counter_sink: CounterSink,
        pagination_sink: PaginationSink,
        scroll_sink: Optional[ScrollSink] = None,
        state: Optional[QueryState] = None,
        page_size: int = PAGE_SIZE,
        max_visible_pages: int = MAX_VISIBLE_PAGES,
    ) -> None:
        self.dataset = dataset
        self.table_sink = table_sink
        self.counter_sink = counter_sink
        self.pagination_sink = pagination_sink
        self.scroll_sink = scroll_sink
        self.page_size = page_size
        self.max_visible_pages = max_visible_pages

        self._state = state.copy() if state is not None else QueryState()
        self._ordered: List[CompanyRecord] = self._compute_ordered()
        self._last_page: Optional[Page[CompanyRecord]] = None

        # A restored page may be non-positive or no longer exist for this dataset
        n_pages = self.total_pages
        if not is_valid_page(self._state.current_page, n_pages):
            self._state.current_page = 1

    # -------------------------------------------------------------------------
    # Read-only accessors
    # -------------------------------------------------------------------------
    @property
    def state(self) -> QueryState:
        return self._state.copy()

    @property
    def current_page(self) -> int:
        return self._state.current_page

    @property
    def result_count(self) -> int:
        return len(self._ordered)

    @property
    def total_pages(self) -> int:
        return total_pages(len(self._ordered), self.page_size)

    @property
    def last_page(self) -> Optional[Page[CompanyRecord]]:
        return self._last_page

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------
    def refresh(self) -> Page[CompanyRecord]:
        """Push the current state to the sinks without changing it."""
        return self._render_page()

    def update_filters(self, **changes: Any) -> Page[CompanyRecord]:
        """
        Merge filter/sort changes into the state, go back to page 1 and re-render.

        :param changes: any of search_term, category, stage, country, sort_key
        :raises TypeError: for a field that is not a filter/sort field
        """
        self._state = self._state.with_filters(**changes)
        self._ordered = self._compute_ordered()
        logger.info(
            "filters_updated",
            extra={
                "query_state": self._state.to_dict(),
                "n_results": len(self._ordered),
            },
        )
        return self._render_page()

    def reset_filters(self) -> Page[CompanyRecord]:
        self._state = QueryState()
        self._ordered = self._compute_ordered()
        logger.info("filters_reset", extra={"n_results": len(self._ordered)})
        return self._render_page()

    def navigate(self, page: Optional[int] = None, delta: Optional[int] = None) -> bool:
        """
        Move to an absolute 'page' or by a relative 'delta'.

        :return: True if the page changed and the sinks were updated, False if the
                 target was not an int in [1, total_pages] and the request was ignored
        """
        if (page is None) == (delta is None):
            raise ValueError("navigate() takes exactly one of 'page' or 'delta'")

        target = page if page is not None else self._state.current_page + delta
        n_pages = self.total_pages
        is_int = isinstance(target, int) and not isinstance(target, bool)
        if not is_int or not is_valid_page(target, n_pages):
            logger.debug(
                "navigation_rejected",
                extra={"target": target, "total_pages": n_pages},
            )
            return False

        self._state.current_page = target
        self._render_page()
        if self.scroll_sink is not None:
            self.scroll_sink.scroll_to_results()
        return True

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------
    def _compute_ordered(self) -> List[CompanyRecord]:
        filtered = filter_companies(self.dataset.companies, self._state)
        return sort_companies(filtered, self._state.sort_key)

    def _render_page(self) -> Page[CompanyRecord]:
        page = paginate(self._ordered, self._state.current_page, self.page_size)
        self._last_page = page

        if page.is_empty:
            self.table_sink.render_empty()
            self.counter_sink.render_no_results(counter_message(page))
        else:
            self.table_sink.render_rows(page.items)
            self.counter_sink.render_counter(page.start_index, page.end_index, page.total_items)

        self.pagination_sink.render_pagination(
            pagination_controls(page, self.max_visible_pages)
        )
        return page
