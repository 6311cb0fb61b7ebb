from __future__ import annotations

import logging
import unicodedata
from typing import Any, Callable, Dict, Iterable, List, Tuple

from .query_state import (
    SORT_FOUNDED_ASC,
    SORT_FOUNDED_DESC,
    SORT_FUNDING_ASC,
    SORT_FUNDING_DESC,
    SORT_NAME_ASC,
    SORT_NAME_DESC,
)
from .records import CompanyRecord

logger = logging.getLogger(__name__)


def name_sort_key(name: str) -> Tuple[str, str, str]:
    """
    Collation key approximating a locale-aware comparison.

    Primary: accents stripped, case folded ("Émile" sorts with "emile").
    Ties are then broken case-insensitively and finally on the raw string,
    so the order is total.
    """
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), name.casefold(), name


# sort key -> (record key function, descending)
_SORTS: Dict[str, Tuple[Callable[[CompanyRecord], Any], bool]] = {
    SORT_FUNDING_DESC: (lambda r: r.funding_or_zero, True),
    SORT_FUNDING_ASC: (lambda r: r.funding_or_zero, False),
    SORT_NAME_ASC: (lambda r: name_sort_key(r.name), False),
    SORT_NAME_DESC: (lambda r: name_sort_key(r.name), True),
    SORT_FOUNDED_DESC: (lambda r: r.founded_or_zero, True),
    SORT_FOUNDED_ASC: (lambda r: r.founded_or_zero, False),
}


def sort_companies(records: Iterable[CompanyRecord], sort_key: str) -> List[CompanyRecord]:
    """
    Return a new list ordered by 'sort_key'.

    sorted() is stable for reverse=True as well, so records with equal keys
    keep their input order for every sort key. An unknown key returns the
    input order unchanged.
    """
    items = list(records)
    entry = _SORTS.get(sort_key)
    if entry is None:
        logger.debug("Unknown sort key, keeping input order", extra={"sort_key": sort_key})
        return items
    key, descending = entry
    return sorted(items, key=key, reverse=descending)
