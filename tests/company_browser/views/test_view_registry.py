from __future__ import annotations

import pytest

from company_browser.core.base_view import BaseView
from company_browser.core.dataset import Dataset
from company_browser.core.view_registry import ViewRegistry
from company_browser.ui.dash_app import build_view_registry
from company_browser.views import GeographyView


class _DummyView(BaseView):
    id = "dummy"
    label = "Dummy"

    def compute_data(self):
        return None

    def render_figure(self, data):
        return self.empty_figure("nothing")


def test_register_and_create():
    registry = ViewRegistry()
    registry.register(_DummyView)

    view = registry.create("dummy", Dataset.empty())

    assert isinstance(view, _DummyView)
    assert registry.all_classes() == [_DummyView]


def test_register_rejects_non_views_and_duplicates():
    registry = ViewRegistry()
    registry.register(_DummyView)

    with pytest.raises(TypeError):
        registry.register(object)
    with pytest.raises(ValueError):
        registry.register(_DummyView)


def test_create_unknown_view_raises_key_error():
    with pytest.raises(KeyError):
        ViewRegistry().create("missing", Dataset.empty())


def test_app_registry_has_all_chart_views_in_order():
    ids = [cls.id for cls in build_view_registry().all_classes()]

    assert len(ids) == 8
    assert len(set(ids)) == 8
    assert ids[0] == "technology_categories"
    assert GeographyView.id in ids


def test_registry_membership_and_size():
    registry = ViewRegistry()
    registry.register(_DummyView)

    assert "dummy" in registry
    assert "missing" not in registry
    assert len(registry) == 1
