from __future__ import annotations

from company_browser.core.dataset import Dataset, overview_metrics


def _raw_doc():
    return {
        "overview": {
            "totalCompanies": 3,
            "marketSize": "4.2B",
            "githubRepos": 17,
            "totalFunding": "1.1B",
        },
        "companies": [
            {"name": "A", "category": "Robotics", "stage": "Seed", "country": "USA"},
            {"name": "B", "category": "Biologicals", "stage": "Series A", "country": "India"},
            {"category": "no name, skipped"},
            "not an object",
            {"name": "C", "category": "Robotics", "country": "USA"},
        ],
        "technologies": {"categories": [{"name": "Robotics", "value": 2}]},
        "funding": {
            "quarterly": [{"quarter": "Q1 2024", "amount": 10, "deals": 2}],
        },
    }


def test_from_dict_builds_records_and_skips_invalid():
    ds = Dataset.from_dict(_raw_doc())

    assert [c.name for c in ds.companies] == ["A", "B", "C"]
    assert not ds.is_empty


def test_distinct_filter_values_are_sorted_and_skip_missing():
    ds = Dataset.from_dict(_raw_doc())

    assert ds.categories() == ["Biologicals", "Robotics"]
    assert ds.stages() == ["Seed", "Series A"]
    assert ds.countries() == ["India", "USA"]


def test_aggregate_returns_expected_columns_even_when_missing():
    ds = Dataset.from_dict(_raw_doc())

    tech = ds.aggregate("technology_categories")
    assert list(tech.columns) == ["name", "value"]
    assert tech["value"].tolist() == [2]

    quarterly = ds.aggregate("funding_quarterly")
    assert list(quarterly.columns) == ["quarter", "amount", "deals"]

    # section absent in the source document
    repos = ds.aggregate("github_top_repos")
    assert list(repos.columns) == ["name", "stars", "forks"]
    assert repos.empty


def test_aggregate_copies_are_independent():
    ds = Dataset.from_dict(_raw_doc())

    df = ds.aggregate("technology_categories")
    df.loc[0, "value"] = 999

    assert ds.aggregate("technology_categories")["value"].tolist() == [2]


def test_unknown_aggregate_raises_key_error():
    ds = Dataset.empty()
    try:
        ds.aggregate("nope")
    except KeyError:
        pass
    else:
        raise AssertionError("expected KeyError")


def test_empty_dataset():
    ds = Dataset.empty()

    assert ds.is_empty
    assert ds.companies == ()
    assert ds.categories() == []
    assert ds.aggregate("geography").empty


def test_overview_metrics_formats_values():
    cards = overview_metrics(Dataset.from_dict(_raw_doc()))

    assert [(c.label, c.value) for c in cards] == [
        ("Companies", "3"),
        ("Market Size", "$4.2B"),
        ("GitHub Repos", "17"),
        ("Total Funding", "$1.1B"),
    ]


def test_overview_metrics_fall_back_for_missing_overview():
    doc = _raw_doc()
    del doc["overview"]
    cards = overview_metrics(Dataset.from_dict(doc))

    values = {c.label: c.value for c in cards}
    assert values["Companies"] == "3"
    assert values["Market Size"] == "N/A"
    assert values["Total Funding"] == "N/A"
