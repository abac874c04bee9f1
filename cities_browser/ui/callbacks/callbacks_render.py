from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
import plotly.graph_objs as go
from dash import Input, Output

from cities_browser.core.exceptions import EmptySelectionError
from cities_browser.core.filter_state import SelectionState
from cities_browser.ui.helpers import legend_component
from cities_browser.ui.ids import IDs
from cities_browser.validation.errors import ValidationError
from cities_browser.validation.selection_validation import validate_selection
from cities_browser.views.map_view import MapView

if TYPE_CHECKING:
    from cities_browser.ui.config import AppConfig

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
    return _message_figure("Something went wrong while rendering the map.", details)


def make_map_view(ctx: AppConfig) -> MapView:
    cfg = ctx.global_config
    return MapView(
        ctx.dataset,
        palette=cfg.palette,
        bin_count=cfg.bin_count,
        zoom=cfg.map_zoom,
    )


def render_outputs(ctx: AppConfig, sel_data: dict[str, Any] | None):
    """
    SelectionState dict -> (figure, legend, table rows, status text).

    An empty selection is a normal outcome: empty map, empty table.
    """
    if not sel_data:
        return (
            _message_figure("Nothing selected.", "Choose a category and measure to see cities."),
            legend_component([]),
            [],
            "",
        )

    try:
        state = SelectionState.from_dict(sel_data)
    except (TypeError, ValueError):
        logger.exception("Invalid selection state in render callback: %r", sel_data)
        return _error_figure("Internal error: invalid selection state."), legend_component([]), [], ""

    try:
        validate_selection(ctx.dataset, state)
    except ValidationError as e:
        return (
            _message_figure("This selection is not available.", "<br>".join(i.message for i in e.issues)),
            legend_component([]),
            [],
            "",
        )

    view = make_map_view(ctx)
    result = view.run(state)
    legend = legend_component(result.legend)
    fig = view.render_figure(view.data_from_result(result), state)

    try:
        result.raise_if_empty()
    except EmptySelectionError:
        return fig, legend, [], "0 cities in the selected range."

    status = f"{len(result.table_rows)} cities · {len(result.map_points)} on map"
    if result.n_skipped:
        status += f" · {result.n_skipped} without a usable location"
    return fig, legend, result.table_rows, status


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # SelectionState -> map, legend, table, status
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.MAP_GRAPH, "figure"),
        Output(IDs.Control.MAP_LEGEND, "children"),
        Output(IDs.Control.CITY_TABLE, "data"),
        Output(IDs.Control.STATUS_BAR, "children"),
        Input(IDs.Store.SELECTION_STATE, "data"),
    )
    def update_map_and_table(sel_data: dict[str, Any] | None):
        try:
            return render_outputs(ctx, sel_data)
        except Exception:
            logger.exception(
                "Error in update_map_and_table",
                extra={"selection_state": sel_data},
            )
            return (
                _error_figure(
                    "The app hit an unexpected error. "
                    "If this keeps happening, grab the logs and open an issue."
                ),
                legend_component([]),
                [],
                "",
            )
