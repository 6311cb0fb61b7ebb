from __future__ import annotations

import pytest

from company_browser.core.dataset import Dataset
from company_browser.core.query_state import QueryState
from company_browser.core.records import CompanyRecord
from company_browser.core.sinks import CounterSink, PaginationSink, ScrollSink, TableSink
from company_browser.core.view_coordinator import ViewCoordinator


class RecordingSink(TableSink, CounterSink, PaginationSink, ScrollSink):
    def __init__(self):
        self.calls = []

    def render_rows(self, records):
        self.calls.append(("rows", [r.name for r in records]))

    def render_empty(self):
        self.calls.append(("empty",))

    def render_counter(self, start, end, total):
        self.calls.append(("counter", start, end, total))

    def render_no_results(self, message):
        self.calls.append(("no_results", message))

    def render_pagination(self, controls):
        self.calls.append(("pagination", controls))

    def scroll_to_results(self):
        self.calls.append(("scroll",))

    def last(self, kind):
        return [c for c in self.calls if c[0] == kind][-1]


def _make_dataset(n=45):
    companies = [
        CompanyRecord(
            name=f"Company {i:02d}",
            category="Robotics" if i % 2 else "Biologicals",
            country="USA",
            funding=float(i),
        )
        for i in range(n)
    ]
    return Dataset(companies=companies)


def _make_coordinator(dataset=None, state=None):
    sink = RecordingSink()
    coord = ViewCoordinator(
        dataset if dataset is not None else _make_dataset(),
        table_sink=sink,
        counter_sink=sink,
        pagination_sink=sink,
        scroll_sink=sink,
        state=state,
    )
    return coord, sink


def test_first_render_with_name_sort():
    coord, sink = _make_coordinator()

    page = coord.update_filters(sort_key="name-asc")

    assert page.page == 1
    assert len(page.items) == 20
    assert sink.last("counter") == ("counter", 1, 20, 45)
    assert sink.last("rows")[1][0] == "Company 00"
    controls = sink.last("pagination")[1]
    assert controls.visible_page_numbers == [1, 2, 3]
    assert controls.has_next
    assert not controls.has_prev


def test_no_results_renders_empty_state():
    coord, sink = _make_coordinator()

    page = coord.update_filters(search_term="does-not-exist")

    assert page.is_empty
    assert coord.result_count == 0
    assert coord.total_pages == 0
    assert ("empty",) in sink.calls
    assert sink.last("no_results") == ("no_results", "No companies found")
    controls = sink.last("pagination")[1]
    assert controls.visible_page_numbers == []
    assert not controls.has_prev and not controls.has_next
    assert not any(c[0] == "rows" for c in sink.calls)


def test_navigate_past_last_page_is_ignored():
    coord, sink = _make_coordinator()
    assert coord.navigate(page=3)
    sink.calls.clear()

    assert coord.navigate(delta=1) is False
    assert coord.current_page == 3
    assert sink.calls == []


def test_navigate_before_first_page_is_ignored():
    coord, sink = _make_coordinator()
    coord.refresh()
    sink.calls.clear()

    assert coord.navigate(delta=-1) is False
    assert coord.navigate(page=0) is False
    assert sink.calls == []


def test_navigate_renders_then_scrolls():
    coord, sink = _make_coordinator()

    assert coord.navigate(delta=1)

    assert coord.current_page == 2
    kinds = [c[0] for c in sink.calls]
    assert kinds == ["rows", "counter", "pagination", "scroll"]
    assert sink.last("counter") == ("counter", 21, 40, 45)


def test_navigate_requires_exactly_one_argument():
    coord, _ = _make_coordinator()
    with pytest.raises(ValueError):
        coord.navigate()
    with pytest.raises(ValueError):
        coord.navigate(page=1, delta=1)


def test_update_filters_resets_page():
    coord, sink = _make_coordinator()
    coord.navigate(page=3)

    coord.update_filters(category="Robotics")

    assert coord.current_page == 1
    assert coord.result_count == 22
    assert sink.last("counter") == ("counter", 1, 20, 22)


def test_default_sort_is_funding_desc():
    coord, sink = _make_coordinator()

    coord.refresh()

    assert sink.last("rows")[1][:2] == ["Company 44", "Company 43"]


def test_reset_filters_restores_defaults():
    coord, _ = _make_coordinator()
    coord.update_filters(search_term="Company 1", category="Robotics", sort_key="name-desc")
    coord.navigate(page=1)

    coord.reset_filters()

    assert coord.state == QueryState()
    assert coord.result_count == 45


def test_state_is_copied_in_and_out():
    initial = QueryState(category="Robotics")
    coord, _ = _make_coordinator(state=initial)

    coord.update_filters(category="Biologicals")
    coord.state.category = "tampered"

    assert initial.category == "Robotics"
    assert coord.state.category == "Biologicals"


def test_restored_page_outside_range_starts_at_first_page():
    coord, sink = _make_coordinator(state=QueryState(current_page=9))

    coord.refresh()

    assert coord.current_page == 1
    assert sink.last("counter") == ("counter", 1, 20, 45)


def test_restored_page_inside_range_is_kept():
    coord, sink = _make_coordinator(state=QueryState(current_page=2))

    coord.refresh()

    assert coord.current_page == 2
    assert sink.last("counter") == ("counter", 21, 40, 45)


def test_unknown_filter_field_raises():
    coord, _ = _make_coordinator()
    with pytest.raises(TypeError):
        coord.update_filters(current_page=2)


def test_empty_dataset_renders_without_error():
    coord, sink = _make_coordinator(dataset=Dataset.empty())

    page = coord.refresh()

    assert page.is_empty
    assert sink.last("no_results") == ("no_results", "No companies found")


@pytest.mark.parametrize("restored", [0, -2])
def test_restored_non_positive_page_starts_at_first_page(restored):
    state = QueryState()
    state.current_page = restored
    coord, sink = _make_coordinator(state=state)

    page = coord.refresh()

    assert coord.current_page == 1
    assert not page.is_empty
    assert sink.last("counter") == ("counter", 1, 20, 45)
    assert not any(c[0] in ("empty", "no_results") for c in sink.calls)


@pytest.mark.parametrize("target", [2.5, 2.0, "2", True])
def test_navigate_to_non_int_page_is_ignored(target):
    coord, sink = _make_coordinator()
    coord.refresh()
    sink.calls.clear()

    assert coord.navigate(page=target) is False
    assert coord.current_page == 1
    assert sink.calls == []
