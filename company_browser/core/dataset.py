from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

import pandas as pd

from .records import CompanyRecord


# Aggregate name -> (path in the source document, expected columns)
AGGREGATES: Dict[str, Tuple[Tuple[str, str], Tuple[str, ...]]] = {
    "technology_categories": (("technologies", "categories"), ("name", "value")),
    "geography": (("geography", "distribution"), ("country", "count")),
    "funding_trends": (("funding", "trends"), ("year", "amount")),
    "funding_by_stage": (("funding", "byStage"), ("stage", "amount")),
    "funding_quarterly": (("funding", "quarterly"), ("quarter", "amount", "deals")),
    "github_top_repos": (("github", "topRepos"), ("name", "stars", "forks")),
    "patents_by_category": (("patents", "byCategory"), ("category", "count")),
}


@dataclass(frozen=True)
class MetricCard:
    label: str
    value: str


def _freeze_rows(rows: Any) -> Tuple[Mapping[str, Any], ...]:
    if not isinstance(rows, (list, tuple)):
        return ()
    return tuple(MappingProxyType(dict(r)) for r in rows if isinstance(r, Mapping))


def _section(raw: Mapping[str, Any], path: Tuple[str, str]) -> Any:
    outer = raw.get(path[0])
    if not isinstance(outer, Mapping):
        return None
    return outer.get(path[1])


class Dataset:
    """
    Immutable in-memory dashboard dataset.

    Includes:
    - the company records (input to the query engine)
    - the overview scalars shown as metric cards
    - precomputed aggregate series used by the chart views

    Nothing here is mutated after construction. Aggregates are handed out as
    fresh DataFrames so callers can reshape them freely.
    """

    def __init__(
        self,
        companies: Sequence[CompanyRecord] = (),
        overview: Optional[Mapping[str, Any]] = None,
        aggregates: Optional[Mapping[str, Sequence[Mapping[str, Any]]]] = None,
        name: str = "companies",
    ) -> None:
        self.name = name
        self._companies: Tuple[CompanyRecord, ...] = tuple(companies)
        self._overview: Mapping[str, Any] = MappingProxyType(dict(overview or {}))
        aggregates = aggregates or {}
        self._aggregates: Dict[str, Tuple[Mapping[str, Any], ...]] = {
            key: _freeze_rows(aggregates.get(key)) for key in AGGREGATES
        }

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------
    @classmethod
    def empty(cls, name: str = "companies") -> Dataset:
        """Dataset used when the data source fails: no records, no series."""
        return cls(name=name)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any], name: str = "companies") -> Dataset:
        """
        Build a Dataset from the source document.

        Missing sections become empty series; company objects without a name are skipped.
        """
        companies: List[CompanyRecord] = []
        for entry in raw.get("companies") or []:
            if not isinstance(entry, Mapping):
                continue
            record = CompanyRecord.from_dict(entry)
            if record is not None:
                companies.append(record)

        overview = raw.get("overview")
        aggregates = {key: _section(raw, path) for key, (path, _cols) in AGGREGATES.items()}

        return cls(
            companies=companies,
            overview=overview if isinstance(overview, Mapping) else None,
            aggregates=aggregates,
            name=name,
        )

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------
    @property
    def companies(self) -> Tuple[CompanyRecord, ...]:
        return self._companies

    @property
    def overview(self) -> Mapping[str, Any]:
        return self._overview

    @property
    def is_empty(self) -> bool:
        return not self._companies and not any(self._aggregates.values())

    def aggregate(self, key: str) -> pd.DataFrame:
        """
        Return the aggregate series 'key' as a DataFrame with its expected columns.

        Raises:
            KeyError: if 'key' is not a known aggregate
        """
        if key not in AGGREGATES:
            raise KeyError(f"Unknown aggregate '{key}'")
        columns = list(AGGREGATES[key][1])
        rows = [dict(r) for r in self._aggregates[key]]
        df = pd.DataFrame(rows)
        for col in columns:
            if col not in df.columns:
                df[col] = pd.Series(dtype=object)
        return df[columns]

    def _distinct(self, attr: str) -> List[str]:
        return sorted({getattr(c, attr) for c in self._companies if getattr(c, attr)})

    def categories(self) -> List[str]:
        return self._distinct("category")

    def stages(self) -> List[str]:
        return self._distinct("stage")

    def countries(self) -> List[str]:
        return self._distinct("country")


def _display(value: Any, prefix: str = "") -> str:
    if value is None or value == "":
        return "N/A"
    return f"{prefix}{value}"


def overview_metrics(dataset: Dataset) -> List[MetricCard]:
    """Headline numbers for the metric cards at the top of the dashboard."""
    overview = dataset.overview
    total = overview.get("totalCompanies")
    if total is None:
        total = len(dataset.companies)

    return [
        MetricCard("Companies", _display(total)),
        MetricCard("Market Size", _display(overview.get("marketSize"), prefix="$")),
        MetricCard("GitHub Repos", _display(overview.get("githubRepos"))),
        MetricCard("Total Funding", _display(overview.get("totalFunding"), prefix="$")),
    ]
