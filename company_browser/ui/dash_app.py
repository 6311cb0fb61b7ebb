from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from company_browser.config.loader import load_global_config
from company_browser.core.dataset_loader import load_dataset_or_empty
from company_browser.core.view_registry import ViewRegistry
from company_browser.ui.layout.build_layout import build_layout
from company_browser.ui.callbacks.callbacks_companies import register_company_callbacks
from company_browser.ui.callbacks.callbacks_filters import register_filter_callbacks
from company_browser.ui.callbacks.callbacks_render import register_render_callbacks

logger = logging.getLogger(__name__)


def build_view_registry() -> ViewRegistry:
    from company_browser.views import (
        TechnologyCategoryView,
        GeographyView,
        FundingBubbleView,
        FundingTrendsView,
        FundingStageView,
        QuarterlyFundingView,
        GithubReposView,
        PatentCategoryView,
    )

    registry = ViewRegistry()
    registry.register(TechnologyCategoryView)
    registry.register(GeographyView)
    registry.register(FundingBubbleView)
    registry.register(FundingTrendsView)
    registry.register(FundingStageView)
    registry.register(QuarterlyFundingView)
    registry.register(GithubReposView)
    registry.register(PatentCategoryView)
    return registry


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Load the dataset once; a failed load leaves an empty but usable dashboard
    dataset = load_dataset_or_empty(global_config.data_path)
    if dataset.is_empty:
        logger.warning(
            "Dashboard starting with an empty dataset",
            extra={"data_path": str(global_config.data_path)},
        )

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        dataset=dataset,
        registry=build_view_registry(),
    )
    ctx.validate()

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )
    app.title = global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_company_callbacks(app, ctx)
    register_filter_callbacks(app, ctx)
    register_render_callbacks(app, ctx)

    return app
