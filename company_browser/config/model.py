from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from company_browser.core.pagination import MAX_VISIBLE_PAGES, PAGE_SIZE


@dataclass
class GlobalConfig:
    """
    Parsed global.json.

    - ui_title / subtitle: navbar text
    - data_path: the dashboard JSON document, already resolved against the config root
    - page_size: rows per table page
    - max_visible_pages: width of the page-number window (odd, at least 5)
    """

    ui_title: str
    subtitle: str
    data_path: Path
    page_size: int = PAGE_SIZE
    max_visible_pages: int = MAX_VISIBLE_PAGES
