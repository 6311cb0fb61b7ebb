from __future__ import annotations

import json
import logging
from pathlib import Path

from company_browser.core.dataset import Dataset
from company_browser.core.exceptions import DatasetLoadError

logger = logging.getLogger(__name__)


def load_dataset(path: Path | str) -> Dataset:
    """
    Read the dashboard JSON document at 'path' and build a Dataset.

    :raises DatasetLoadError: if the file is missing, unreadable, not JSON, or not a JSON object
    """
    path = Path(path)

    if not path.is_file():
        raise DatasetLoadError(f"Data file not found at {path}.")

    try:
        with path.open(encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise DatasetLoadError(f"Could not read data file {path}: {e}") from e

    if not isinstance(raw, dict):
        raise DatasetLoadError(
            f"Data file {path} must contain a JSON object, got {type(raw).__name__}"
        )

    dataset = Dataset.from_dict(raw, name=path.stem)
    logger.info(
        "Dataset loaded",
        extra={
            "path": str(path),
            "n_companies": len(dataset.companies),
        },
    )
    return dataset


def load_dataset_or_empty(path: Path | str) -> Dataset:
    """
    Main entrypoint used by the app.

    The dashboard must stay usable when the data source fails, so any
    DatasetLoadError is logged and an empty Dataset is returned instead.
    """
    try:
        return load_dataset(path)
    except DatasetLoadError as e:
        logger.error(
            "Falling back to an empty dataset",
            extra={"path": str(path), "error": str(e)},
        )
        return Dataset.empty()
