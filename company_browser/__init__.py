"""
Top-level package for the company browser dashboard.

This package exposes the core architecture (query engine, chart views, UI adapters).
Most code should import from submodules such as:
    company_browser.core
    company_browser.views
    company_browser.ui
"""

__all__: list[str] = []
