from __future__ import annotations

import re
from typing import Dict, List, Optional, Sequence

from company_browser.core.dataset import Dataset
from company_browser.core.query_state import (
    ALL,
    SORT_FOUNDED_ASC,
    SORT_FOUNDED_DESC,
    SORT_FUNDING_ASC,
    SORT_FUNDING_DESC,
    SORT_NAME_ASC,
    SORT_NAME_DESC,
)
from company_browser.core.records import DEFAULT_STATUS, CompanyRecord

PLACEHOLDER = "N/A"
TECH_PREVIEW = 2

SORT_OPTIONS = [
    {"label": "Funding (High to Low)", "value": SORT_FUNDING_DESC},
    {"label": "Funding (Low to High)", "value": SORT_FUNDING_ASC},
    {"label": "Name (A-Z)", "value": SORT_NAME_ASC},
    {"label": "Name (Z-A)", "value": SORT_NAME_DESC},
    {"label": "Newest First", "value": SORT_FOUNDED_DESC},
    {"label": "Oldest First", "value": SORT_FOUNDED_ASC},
]


def filter_options(values: Sequence[str], all_label: str) -> List[dict]:
    """'All ...' sentinel first, then one option per distinct value."""
    return [{"label": all_label, "value": ALL}] + [{"label": v, "value": v} for v in values]


def get_filter_dropdown_options(dataset: Dataset):
    return (
        filter_options(dataset.categories(), "All Categories"),
        filter_options(dataset.stages(), "All Stages"),
        filter_options(dataset.countries(), "All Countries"),
    )


def stage_class(stage: Optional[str]) -> str:
    if not stage:
        return ""
    return "stage-" + re.sub(r"[^a-z0-9]", "-", stage.lower())


def status_class(status: Optional[str]) -> str:
    if not status:
        return "status-active"
    return "status-" + status.lower()


def format_funding(funding: Optional[float]) -> str:
    # Zero funding shows the placeholder, matching the published dashboard
    if not funding:
        return PLACEHOLDER
    if float(funding).is_integer():
        funding = int(funding)
    return f"${funding}M"


def company_row(record: CompanyRecord) -> Dict[str, str]:
    """
    Display values for one table row. Every missing field gets a placeholder here,
    so the table never has to know which fields are optional.
    """
    return {
        "name": record.name,
        "tech": ", ".join(record.tech[:TECH_PREVIEW]) or PLACEHOLDER,
        "funding": format_funding(record.funding),
        "stage": record.stage or PLACEHOLDER,
        "stage_class": stage_class(record.stage),
        "category": record.category or PLACEHOLDER,
        "location": record.location or record.country or PLACEHOLDER,
        "founded": str(record.founded) if record.founded else PLACEHOLDER,
        "status": record.status or DEFAULT_STATUS,
        "status_class": status_class(record.status),
    }
