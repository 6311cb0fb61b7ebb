from __future__ import annotations

from typing import Iterable, List, Optional

from .query_state import QueryState, is_active
from .records import CompanyRecord


def _contains(haystack: Optional[str], needle: str) -> bool:
    return haystack is not None and needle in haystack.casefold()


def matches_search(record: CompanyRecord, search_term: str) -> bool:
    """
    Case-insensitive substring match over name, each tech tag, location and country.

    An empty term matches every record. Absent fields are skipped.
    """
    if not search_term:
        return True
    needle = search_term.casefold()
    return (
        _contains(record.name, needle)
        or any(_contains(t, needle) for t in record.tech)
        or _contains(record.location, needle)
        or _contains(record.country, needle)
    )


def _matches_exact(value: Optional[str], wanted: Optional[str]) -> bool:
    return not is_active(wanted) or value == wanted


def matches_state(record: CompanyRecord, state: QueryState) -> bool:
    return (
        matches_search(record, state.search_term)
        and _matches_exact(record.category, state.category)
        and _matches_exact(record.stage, state.stage)
        and _matches_exact(record.country, state.country)
    )


def filter_companies(records: Iterable[CompanyRecord], state: QueryState) -> List[CompanyRecord]:
    """
    Return the records satisfying every active predicate in 'state', in input order.
    """
    return [r for r in records if matches_state(r, state)]
