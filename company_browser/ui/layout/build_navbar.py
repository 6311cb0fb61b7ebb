from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from company_browser.config.model import GlobalConfig

SECTIONS = [
    ("Overview", "#overview"),
    ("Charts", "#charts"),
    ("Companies", "#companies"),
]


def build_navbar(global_config: GlobalConfig) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(global_config.ui_title, className="mb-0"),
                        html.Small(
                            global_config.subtitle,
                            className="text-muted",
                            id="navbar-subtitle",
                        ),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                # Plain anchors: the browser handles in-page scrolling
                dbc.Nav(
                    [
                        dbc.NavItem(dbc.NavLink(label, href=href, external_link=True, className="nav-link"))
                        for label, href in SECTIONS
                    ],
                    className="ms-auto",
                ),
            ],
        ),
        dark=False,
        sticky="top",
        className="shadow-sm cb-navbar",
    )
