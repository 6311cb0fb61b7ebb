from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List

import plotly.graph_objs as go

from .dataset import Dataset

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChartSeries:
    """
    Prepared chart input: one label per point and one or more named series.

    Every series has the same length as 'labels'.
    """

    labels: List[str]
    series: Dict[str, List[float]] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.labels


class BaseView(ABC):
    """
    Abstract base class for all chart views.

    Defines the contract that every chart on the dashboard must follow
    - expose an 'id' - used internally
    - expose a 'label' - used for UI/human-readable applications
    - implement 'compute_data' - derive the chart input from the Dataset aggregates
    - implement 'render_figure' - used to render the figure using Plotly

    Charts always reflect the full dataset, never the filtered company table.
    """

    id: str = None
    label: str = None

    def __init__(self, dataset: Dataset):
        self.dataset = dataset

    @abstractmethod
    def compute_data(self) -> Any:
        """
        Compute the chart input from the dataset
        :return: data: a ChartSeries or DataFrame, empty when there is nothing to plot
        """
        raise NotImplementedError()

    @abstractmethod
    def render_figure(self, data: Any) -> go.Figure:
        """
        Render the figure given the computed data
        :param data: the data provided by {@link compute_data()}
        :return: the Plotly figure
        """
        raise NotImplementedError()

    # ------------------------------------------------------------------
    # Common helpers for all views
    # ------------------------------------------------------------------
    def timed_compute(self) -> Any:
        """
        compute_data() with its duration logged, so slow views show up in the logs.
        """
        start = time.perf_counter()
        data = self.compute_data()
        logger.info(
            "view_compute",
            extra={
                "view_id": self.id,
                "dataset": self.dataset.name,
                "duration_ms": round((time.perf_counter() - start) * 1000, 2),
            },
        )
        return data

    def figure(self) -> go.Figure:
        return self.render_figure(self.timed_compute())

    @staticmethod
    def empty_figure(message: str) -> go.Figure:
        """
        Standardised 'no data' figure used by all views.
        """
        fig = go.Figure()
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
        )
        return fig
