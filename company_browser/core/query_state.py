from __future__ import annotations

from dataclasses import dataclass, asdict, replace
from typing import Any, Dict, Optional

ALL = "all"

SORT_FUNDING_DESC = "funding-desc"
SORT_FUNDING_ASC = "funding-asc"
SORT_NAME_ASC = "name-asc"
SORT_NAME_DESC = "name-desc"
SORT_FOUNDED_DESC = "founded-desc"
SORT_FOUNDED_ASC = "founded-asc"

SORT_KEYS = (
    SORT_FUNDING_DESC,
    SORT_FUNDING_ASC,
    SORT_NAME_ASC,
    SORT_NAME_DESC,
    SORT_FOUNDED_DESC,
    SORT_FOUNDED_ASC,
)
DEFAULT_SORT_KEY = SORT_FUNDING_DESC

# Fields a filter/sort update may touch. current_page is owned by navigation.
FILTER_FIELDS = ("search_term", "category", "stage", "country", "sort_key")


def is_active(value: Optional[str]) -> bool:
    """A filter value constrains the result unless it is unset or the 'all' sentinel."""
    return value is not None and value != "" and value != ALL


@dataclass
class QueryState:
    """
    Represents the current user selection on the company table.

    Fields:

    - search_term: Free-text search, matched case-insensitively.
    - category / stage / country: Exact-match filters; "all" means no constraint.
    - sort_key: One of SORT_KEYS. Unknown keys leave the order unchanged.
    - current_page: 1-based page of the sorted result.
    """

    search_term: str = ""
    category: Optional[str] = ALL
    stage: Optional[str] = ALL
    country: Optional[str] = ALL
    sort_key: str = DEFAULT_SORT_KEY
    current_page: int = 1

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> QueryState:
        page = data.get("current_page", 1)
        try:
            page = int(page)
        except (TypeError, ValueError):
            page = 1

        return cls(
            search_term=data.get("search_term") or "",
            category=data.get("category", ALL),
            stage=data.get("stage", ALL),
            country=data.get("country", ALL),
            sort_key=data.get("sort_key") or DEFAULT_SORT_KEY,
            current_page=max(1, page),
        )

    def with_filters(self, **changes: Any) -> QueryState:
        """
        Return a copy with filter/sort fields replaced and the page reset to 1.

        Raises:
            TypeError: if a change names a field that is not a filter/sort field
        """
        unknown = set(changes) - set(FILTER_FIELDS)
        if unknown:
            raise TypeError(f"Unknown query fields: {sorted(unknown)}")
        if "search_term" in changes and changes["search_term"] is None:
            changes["search_term"] = ""
        if "sort_key" in changes and not changes["sort_key"]:
            changes["sort_key"] = DEFAULT_SORT_KEY
        return replace(self, current_page=1, **changes)

    def copy(self) -> QueryState:
        return replace(self)
