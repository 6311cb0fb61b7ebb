from __future__ import annotations

import logging
import os
from typing import Optional, Union

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "COMPANY_BROWSER_LOG_FORMAT"
LOG_LEVEL_ENV = "COMPANY_BROWSER_LOG_LEVEL"

JSON_FIELDS = "%(asctime)s %(levelname)s %(name)s %(message)s"
PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _build_formatter(mode: str) -> logging.Formatter:
    if mode == "plain":
        return logging.Formatter(PLAIN_FORMAT)
    # Anything else, including typos, gets structured output
    return jsonlogger.JsonFormatter(JSON_FIELDS)


def configure_logging(
        level: Union[int, str, None] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Install a single stderr handler on the root logger.

    Format: force_format ("json" / "plain"), else COMPANY_BROWSER_LOG_FORMAT, else json.
    Level: the level argument, else COMPANY_BROWSER_LOG_LEVEL, else INFO.

    Structured fields passed via extra={...} become JSON keys in json mode.
    """
    mode = (force_format or os.getenv(LOG_FORMAT_ENV, "json")).lower()
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "INFO").upper()

    handler = logging.StreamHandler()
    handler.setFormatter(_build_formatter(mode))

    root = logging.getLogger()
    root.setLevel(level)
    # Calling twice (tests, reloader) must not duplicate output
    root.handlers.clear()
    root.addHandler(handler)
