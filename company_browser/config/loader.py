from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from company_browser.config.model import GlobalConfig
from company_browser.core.exceptions import ConfigError
from company_browser.core.pagination import MAX_VISIBLE_PAGES, PAGE_SIZE

logger = logging.getLogger(__name__)

DATA_PATH_ENV = "COMPANY_BROWSER_DATA_PATH"
DEFAULT_DATA_PATH = "../data/companies.json"


def _positive_int(raw: Dict[str, Any], key: str, default: int) -> int:
    value = raw.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigError(f"global.json: '{key}' must be a positive integer, got {value!r}")
    return value


def _window_size(value: int) -> int:
    # The window is centred on the current page, so it needs an odd width
    value = max(5, value)
    return value if value % 2 == 1 else value + 1


def _resolve_data_path(root: Path, raw_global: Dict[str, Any]) -> Path:
    """
    Resolution order:
        1) COMPANY_BROWSER_DATA_PATH env var
        2) 'data_path' in global.json
        3) DEFAULT_DATA_PATH

    Absolute paths are used as-is; relative paths are resolved against the config root.
    """
    data_path_raw = os.environ.get(DATA_PATH_ENV) or raw_global.get("data_path") or DEFAULT_DATA_PATH
    data_path = Path(data_path_raw)
    if data_path.is_absolute():
        return data_path
    return (root / data_path).resolve()


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from a directory.

    Expected structure:

        root/
            global.json

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if global.json is not a JSON object or holds invalid values.
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    with global_path.open() as f:
        try:
            raw_global = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    if not isinstance(raw_global, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    return GlobalConfig(
        ui_title=raw_global.get("ui_title", "Company Browser"),
        subtitle=raw_global.get("subtitle", "Interactive Company Explorer"),
        data_path=_resolve_data_path(root, raw_global),
        page_size=_positive_int(raw_global, "page_size", PAGE_SIZE),
        max_visible_pages=_window_size(
            _positive_int(raw_global, "max_visible_pages", MAX_VISIBLE_PAGES)
        ),
    )
