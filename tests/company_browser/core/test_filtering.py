from __future__ import annotations

from company_browser.core.filtering import filter_companies, matches_search
from company_browser.core.query_state import QueryState
from company_browser.core.records import CompanyRecord


def _make_records():
    return [
        CompanyRecord(
            name="FieldBot",
            category="Robotics",
            stage="Seed",
            country="USA",
            location="Austin, TX",
            tech=("Computer Vision",),
        ),
        CompanyRecord(
            name="SoilSense",
            category="Farm Management",
            stage="Series A",
            country="India",
            location="Pune",
            tech=("Precision Agriculture", "IoT"),
        ),
        CompanyRecord(
            name="AgriLoop",
            category="Robotics",
            stage="Series A",
            country="USA",
        ),
        CompanyRecord(name="Bare Minimum"),
    ]


def test_empty_state_keeps_everything_in_order():
    records = _make_records()
    assert filter_companies(records, QueryState()) == records


def test_search_matches_name_and_tech_case_insensitively():
    records = _make_records()

    result = filter_companies(records, QueryState(search_term="agri"))

    # "AgriLoop" by name, "SoilSense" by its "Precision Agriculture" tag
    assert [r.name for r in result] == ["SoilSense", "AgriLoop"]


def test_search_matches_location_and_country():
    records = _make_records()

    assert [r.name for r in filter_companies(records, QueryState(search_term="austin"))] == ["FieldBot"]
    assert [r.name for r in filter_companies(records, QueryState(search_term="INDIA"))] == ["SoilSense"]


def test_search_skips_absent_fields():
    rec = CompanyRecord(name="Bare Minimum")
    assert matches_search(rec, "bare")
    assert not matches_search(rec, "usa")
    assert matches_search(rec, "")


def test_exact_filters_combine():
    records = _make_records()
    state = QueryState(category="Robotics", stage="Series A", country="USA")

    assert [r.name for r in filter_companies(records, state)] == ["AgriLoop"]


def test_exact_filters_exclude_records_missing_the_field():
    records = _make_records()
    result = filter_companies(records, QueryState(stage="Seed"))

    assert [r.name for r in result] == ["FieldBot"]


def test_filter_output_is_sound_and_complete():
    records = _make_records()
    state = QueryState(category="Robotics")

    result = filter_companies(records, state)

    assert all(r.category == "Robotics" for r in result)
    assert [r for r in records if r.category == "Robotics"] == result


def test_filtering_is_idempotent():
    records = _make_records()
    state = QueryState(search_term="a", country="USA")

    once = filter_companies(records, state)
    assert filter_companies(once, state) == once


def test_no_matches_gives_empty_list():
    assert filter_companies(_make_records(), QueryState(search_term="zzz")) == []
