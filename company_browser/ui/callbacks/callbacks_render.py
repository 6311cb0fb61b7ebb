from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import dash
import plotly.graph_objs as go
from dash import ALL, Input, Output

from company_browser.ui.ids import IDs

if TYPE_CHECKING:
    from company_browser.core.view_registry import ViewRegistry
    from company_browser.core.dataset import Dataset
    from company_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Helper: Empty/Error Figures
# -----------------------------------------------------------------------------
def _message_figure(title: str, details: Optional[str] = None) -> go.Figure:
    fig = go.Figure()
    text = title if details is None else f"{title}<br><br>{details}"
    fig.add_annotation(
        text=text,
        showarrow=False,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
    return fig


def _error_figure(details: str) -> go.Figure:
    return _message_figure("Something went wrong while rendering this chart.", details)


def render_chart(registry: ViewRegistry, view_id: str, dataset: Dataset) -> go.Figure:
    """
    Build the figure for one chart view. Never raises: failures become an error figure.
    """
    try:
        view = registry.create(view_id, dataset)
    except KeyError:
        logger.error("Unknown chart view", extra={"view_id": view_id})
        return _error_figure(f"Unknown chart '{view_id}'.")

    try:
        data = view.timed_compute()
        if data is None:
            return _message_figure(
                "No data returned by this chart.",
                "The dataset does not contain this series.",
            )
        return view.render_figure(data)
    except Exception:
        logger.exception(
            "Error rendering chart",
            extra={"view_id": view_id, "dataset": dataset.name},
        )
        return _error_figure(
            "The app hit an unexpected error. "
            "If this keeps happening, grab the logs and open an issue."
        )


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Chart grid: page load -> one figure per registered view
    # ---------------------------------------------------------
    @app.callback(
        Output({"type": IDs.Pattern.CHART_GRAPH, "index": ALL}, "figure"),
        Input(IDs.Control.URL, "pathname"),
    )
    def render_charts(_pathname):
        view_ids = [o["id"]["index"] for o in dash.callback_context.outputs_list]
        logger.info("render_charts", extra={"view_ids": view_ids})
        return [render_chart(ctx.registry, view_id, ctx.dataset) for view_id in view_ids]
