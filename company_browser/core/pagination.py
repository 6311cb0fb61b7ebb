from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, List, Sequence, TypeVar

PAGE_SIZE = 20
MAX_VISIBLE_PAGES = 7

T = TypeVar("T")


def total_pages(n_items: int, page_size: int = PAGE_SIZE) -> int:
    """ceil(n_items / page_size); 0 for an empty sequence."""
    if n_items <= 0:
        return 0
    return math.ceil(n_items / page_size)


def is_valid_page(page: int, n_pages: int) -> bool:
    return 1 <= page <= n_pages


@dataclass(frozen=True)
class Page(Generic[T]):
    """
    One page of an ordered sequence plus the metadata the controls need.

    start_index / end_index are 1-based and inclusive, ready for a
    "Showing X-Y of Z" message. Both are 0 for an empty page.
    """

    items: List[T]
    page: int
    page_size: int
    total_items: int
    total_pages: int

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def start_index(self) -> int:
        if self.is_empty:
            return 0
        return (self.page - 1) * self.page_size + 1

    @property
    def end_index(self) -> int:
        if self.is_empty:
            return 0
        return self.start_index + len(self.items) - 1


def paginate(items: Sequence[T], page: int, page_size: int = PAGE_SIZE) -> Page[T]:
    """
    Slice [(page-1)*page_size, min(page*page_size, len(items))).

    Out-of-range pages yield an empty slice; range enforcement belongs to the
    caller (see ViewCoordinator.navigate).
    """
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")
    n = len(items)
    start = max(0, (page - 1) * page_size)
    end = min(page * page_size, n)
    return Page(
        items=list(items[start:end]) if start < end else [],
        page=page,
        page_size=page_size,
        total_items=n,
        total_pages=total_pages(n, page_size),
    )


def counter_message(page: Page) -> str:
    if page.total_items == 0:
        return "No companies found"
    return f"Showing {page.start_index}-{page.end_index} of {page.total_items} companies"


@dataclass(frozen=True)
class PaginationControls:
    """
    Everything the pagination widget renders.

    Fields:

    - visible_page_numbers: the centred window of page buttons
    - show_first / show_last: render a shortcut button to page 1 / the last page
    - show_leading_ellipsis / show_trailing_ellipsis: a gap exists between the shortcut and the window
    """

    current_page: int
    total_pages: int
    has_prev: bool
    has_next: bool
    visible_page_numbers: List[int] = field(default_factory=list)
    show_first: bool = False
    show_leading_ellipsis: bool = False
    show_last: bool = False
    show_trailing_ellipsis: bool = False

    @property
    def last_page_number(self) -> int:
        return self.total_pages


def page_window(current: int, n_pages: int, max_visible: int = MAX_VISIBLE_PAGES) -> List[int]:
    """
    Up to 'max_visible' consecutive page numbers centred on 'current',
    shifted to stay inside [1, n_pages].
    """
    if n_pages <= 0:
        return []
    start = max(1, current - max_visible // 2)
    end = min(n_pages, start + max_visible - 1)
    if end - start < max_visible - 1:
        start = max(1, end - max_visible + 1)
    return list(range(start, end + 1))


def pagination_controls(page: Page, max_visible: int = MAX_VISIBLE_PAGES) -> PaginationControls:
    n_pages = page.total_pages
    controls = dict(
        current_page=page.page,
        total_pages=n_pages,
        has_prev=page.has_prev,
        has_next=page.has_next,
    )
    # A single page needs no number buttons
    if n_pages <= 1:
        return PaginationControls(**controls)

    window = page_window(page.page, n_pages, max_visible)
    first, last = window[0], window[-1]
    return PaginationControls(
        visible_page_numbers=window,
        show_first=first > 1,
        show_leading_ellipsis=first > 2,
        show_last=last < n_pages,
        show_trailing_ellipsis=last < n_pages - 1,
        **controls,
    )
