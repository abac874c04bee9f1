from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State

from cities_browser.core.selection import measures_for, range_for
from cities_browser.ui.helpers import dropdown_options, slider_props
from cities_browser.ui.ids import IDs

if TYPE_CHECKING:
    from cities_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def measure_choices(ctx: AppConfig, category_id: str | None, type_id: str | None, current: str | None):
    """
    Measure dropdown options for a category/type, plus the value to show:
    the current measure if still available, else the first one.
    """
    measures = measures_for(ctx.dataset, category_id, type_id)
    if not measures:
        return [], None
    value = current if current in measures else measures[0]
    return dropdown_options(measures), value


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Category/type -> available measures
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.MEASURE_SELECT, "options"),
        Output(IDs.Control.MEASURE_SELECT, "value"),
        Input(IDs.Control.CATEGORY_SELECT, "value"),
        Input(IDs.Control.TYPE_SELECT, "value"),
        State(IDs.Control.MEASURE_SELECT, "value"),
        prevent_initial_call=True,
    )
    def update_measure_options(category_id, type_id, current_measure):
        return measure_choices(ctx, category_id, type_id, current_measure)

    # ---------------------------------------------------------
    # Measure -> slider bounds (always reset to the full range)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.RANGE_SLIDER, "min"),
        Output(IDs.Control.RANGE_SLIDER, "max"),
        Output(IDs.Control.RANGE_SLIDER, "value"),
        Output(IDs.Control.RANGE_SLIDER, "marks"),
        Input(IDs.Control.MEASURE_SELECT, "value"),
        Input(IDs.Control.CATEGORY_SELECT, "value"),
        Input(IDs.Control.TYPE_SELECT, "value"),
        prevent_initial_call=True,
    )
    def update_slider(measure, category_id, type_id):
        bounds = range_for(ctx.dataset, category_id, type_id, measure)
        if bounds is None:
            logger.info(
                "No values for selection",
                extra={"category_id": category_id, "data_value_type_id": type_id, "measure": measure},
            )
        return slider_props(bounds)
