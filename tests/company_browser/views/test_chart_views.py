from __future__ import annotations

import plotly.graph_objects as go
import pytest

from company_browser.core.base_view import ChartSeries
from company_browser.core.dataset import Dataset
from company_browser.views import (
    FundingBubbleView,
    FundingStageView,
    FundingTrendsView,
    GeographyView,
    GithubReposView,
    PatentCategoryView,
    QuarterlyFundingView,
    TechnologyCategoryView,
)

ALL_VIEWS = [
    TechnologyCategoryView,
    GeographyView,
    FundingBubbleView,
    FundingTrendsView,
    FundingStageView,
    QuarterlyFundingView,
    GithubReposView,
    PatentCategoryView,
]


def _make_dataset():
    raw = {
        "companies": [
            {"name": "A", "stage": "Seed", "funding": 4, "founded": 2019, "employees": 12},
            {"name": "B", "stage": "Series B", "funding": 90, "lastRoundYear": 2023},
            {"name": "C", "stage": "Grant"},
            {"name": "D", "stage": "Public"},
        ],
        "technologies": {"categories": [{"name": "Robotics", "value": 5}, {"name": "IoT", "value": 3}]},
        "geography": {
            "distribution": [{"country": f"C{i}", "count": i} for i in range(12)]
        },
        "funding": {
            "trends": [{"year": 2022, "amount": 100}, {"year": 2023, "amount": 140}],
            "byStage": [{"stage": "Seed", "amount": 20}],
            "quarterly": [
                {"quarter": "Q1 2024", "amount": 30, "deals": 4},
                {"quarter": "Q2 2024", "amount": 25},
            ],
        },
        "github": {"topRepos": [{"name": "farmOS", "stars": 900, "forks": 300}]},
        "patents": {"byCategory": [{"category": "Sensors", "count": 7}]},
    }
    return Dataset.from_dict(raw, name="test")


@pytest.mark.parametrize("view_cls", ALL_VIEWS)
def test_every_view_renders_a_figure(view_cls):
    view = view_cls(_make_dataset())

    fig = view.figure()

    assert isinstance(fig, go.Figure)
    assert len(fig.data) >= 1


@pytest.mark.parametrize("view_cls", ALL_VIEWS)
def test_every_view_handles_an_empty_dataset(view_cls):
    view = view_cls(Dataset.empty())

    fig = view.render_figure(view.compute_data())

    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 0
    assert fig.layout.title.text


def test_geography_keeps_first_ten_countries():
    data = GeographyView(_make_dataset()).compute_data()

    assert isinstance(data, ChartSeries)
    assert data.labels == [f"C{i}" for i in range(10)]
    assert data.series["Number of Companies"] == list(range(10))


def test_quarterly_fills_missing_deals_with_zero():
    data = QuarterlyFundingView(_make_dataset()).compute_data()

    assert data.labels == ["Q1 2024", "Q2 2024"]
    assert data.series["Number of Deals"] == [4, 0]


def test_technology_series():
    data = TechnologyCategoryView(_make_dataset()).compute_data()

    assert data.labels == ["Robotics", "IoT"]
    assert data.series["Companies"] == [5, 3]


def test_bubble_plots_known_stages_only():
    df = FundingBubbleView(_make_dataset()).compute_data()

    assert df["company"].tolist() == ["A", "B", "D"]
    # last round year wins, then founded, then the default year
    assert df["year"].tolist() == [2019, 2023, 2020]
    assert df.loc[df["company"] == "D", "funding"].item() == 0
    assert df.loc[df["company"] == "A", "radius"].item() == pytest.approx((40 ** 0.5) / 3)


def test_bubble_groups_traces_by_stage():
    view = FundingBubbleView(_make_dataset())

    fig = view.figure()

    assert [t.name for t in fig.data] == ["Seed", "Series B", "Public"]


def test_geography_skips_rows_without_country():
    ds = Dataset.from_dict(
        {
            "geography": {
                "distribution": [
                    {"country": "USA", "count": 4},
                    {"country": None, "count": 9},
                    {"count": 2},
                    {"country": "India", "count": 1},
                ]
            }
        }
    )

    data = GeographyView(ds).compute_data()

    assert data.labels == ["USA", "India"]
    assert data.series["Number of Companies"] == [4, 1]
