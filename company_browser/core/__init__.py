"""
Core domain layer: dataset, query state, the filter/sort/paginate engine,
the view coordinator, and the chart view base class and registry
"""

from .dataset import Dataset
from .query_state import QueryState
from .records import CompanyRecord
from .view_coordinator import ViewCoordinator
from .base_view import BaseView, ChartSeries
from .view_registry import ViewRegistry

__all__ = [
    "Dataset",
    "QueryState",
    "CompanyRecord",
    "ViewCoordinator",
    "BaseView",
    "ChartSeries",
    "ViewRegistry",
]
