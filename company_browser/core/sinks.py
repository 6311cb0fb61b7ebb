from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from .pagination import PaginationControls
from .records import CompanyRecord


class TableSink(ABC):
    """Renders the current page of company records."""

    @abstractmethod
    def render_rows(self, records: Sequence[CompanyRecord]) -> None:
        raise NotImplementedError()

    @abstractmethod
    def render_empty(self) -> None:
        """Called instead of render_rows when the result is empty."""
        raise NotImplementedError()


class CounterSink(ABC):
    """Renders the "Showing X-Y of Z" line."""

    @abstractmethod
    def render_counter(self, start: int, end: int, total: int) -> None:
        raise NotImplementedError()

    @abstractmethod
    def render_no_results(self, message: str) -> None:
        raise NotImplementedError()


class PaginationSink(ABC):
    @abstractmethod
    def render_pagination(self, controls: PaginationControls) -> None:
        raise NotImplementedError()


class ScrollSink(ABC):
    @abstractmethod
    def scroll_to_results(self) -> None:
        """Bring the results region into view after a page change."""
        raise NotImplementedError()
