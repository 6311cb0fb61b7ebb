from __future__ import annotations

__all__ = ["IDs", "page_number_id", "chart_graph_id"]


class IDs:
    class Store:
        QUERY_STATE = "query-state"
        SCROLL_SIGNAL = "scroll-signal"

    class Control:
        URL = "url"

        # Filters
        SEARCH_INPUT = "company-search"
        CATEGORY_SELECT = "category-filter"
        STAGE_SELECT = "stage-filter"
        COUNTRY_SELECT = "country-filter"
        SORT_SELECT = "sort-by"
        RESET_BTN = "reset-filters"

        # Results
        COMPANIES_SECTION = "companies"
        RESULTS_COUNTER = "results-counter"
        COMPANY_TABLE = "company-table"

        # Pagination
        FIRST_PAGE_BTN = "first-page"
        PREV_PAGE_BTN = "prev-page"
        NEXT_PAGE_BTN = "next-page"
        LAST_PAGE_BTN = "last-page"
        PAGE_NUMBERS = "page-numbers"

    class Pattern:
        # pattern-matching "type" strings
        PAGE_NUMBER = "page-number"
        CHART_GRAPH = "chart-graph"


def page_number_id(page: int) -> dict:
    return {"type": IDs.Pattern.PAGE_NUMBER, "index": page}


def chart_graph_id(view_id: str) -> dict:
    return {"type": IDs.Pattern.CHART_GRAPH, "index": view_id}
