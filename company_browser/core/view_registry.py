from __future__ import annotations

from typing import Dict, List, Type

from .base_view import BaseView
from .dataset import Dataset


class ViewRegistry:
    """
    Ordered collection of chart view classes.

    The chart panel lays out one card per registered class, in registration
    order, and the render callback instantiates them by id. Only BaseView
    subclasses are accepted and ids must be unique.
    """

    def __init__(self) -> None:
        self._by_id: Dict[str, Type[BaseView]] = {}

    def __contains__(self, view_id: str) -> bool:
        return view_id in self._by_id

    def __len__(self) -> int:
        return len(self._by_id)

    def register(self, view_cls: Type[BaseView]) -> None:
        """
        :raises TypeError: view_cls is not a BaseView subclass
        :raises ValueError: a view with the same id is already registered
        """
        if not (isinstance(view_cls, type) and issubclass(view_cls, BaseView)):
            raise TypeError(f"{view_cls!r} is not a BaseView subclass")
        if not view_cls.id:
            raise ValueError(f"{view_cls.__name__} has no id")
        if view_cls.id in self._by_id:
            raise ValueError(f"Chart view '{view_cls.id}' registered twice")
        self._by_id[view_cls.id] = view_cls

    def create(self, view_id: str, dataset: Dataset) -> BaseView:
        """
        Build the view 'view_id' over 'dataset'.

        :raises KeyError: unknown view id
        """
        if view_id not in self._by_id:
            raise KeyError(f"Chart view '{view_id}' not found")
        return self._by_id[view_id](dataset)

    def all_classes(self) -> List[Type[BaseView]]:
        return list(self._by_id.values())
