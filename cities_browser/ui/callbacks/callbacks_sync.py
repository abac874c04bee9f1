from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
from dash import Input, Output, State

from cities_browser.core.filter_state import SelectionState
from cities_browser.core.selection import update_selection
from cities_browser.ui.ids import IDs

if TYPE_CHECKING:
    from cities_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def build_selection_dict(
    ctx: AppConfig,
    category_id: str | None,
    type_id: str | None,
    measure: str | None,
    slider_value: list[float] | None,
    previous: dict[str, Any] | None,
) -> dict[str, Any]:
    """
    Pure helper: raw control values + previous store contents -> next store contents.

    The slider value is only honoured when category, type and measure are
    unchanged; otherwise the range snaps back to the full observed range.
    """
    try:
        prev_state = SelectionState.from_dict(previous)
    except (TypeError, ValueError):
        logger.warning("Discarding malformed selection state: %r", previous)
        prev_state = SelectionState()

    state = update_selection(
        ctx.dataset,
        prev_state,
        category_id=category_id,
        type_id=type_id,
        measure=measure,
        value_range=slider_value,
    )
    return state.to_dict()


def register_sync_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # UI -> SelectionState (canonical)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.SELECTION_STATE, "data"),
        Input(IDs.Control.CATEGORY_SELECT, "value"),
        Input(IDs.Control.TYPE_SELECT, "value"),
        Input(IDs.Control.MEASURE_SELECT, "value"),
        Input(IDs.Control.RANGE_SLIDER, "value"),
        State(IDs.Store.SELECTION_STATE, "data"),
        prevent_initial_call=True,
    )
    def sync_selection_state(category_id, type_id, measure, slider_value, previous):
        return build_selection_dict(ctx, category_id, type_id, measure, slider_value, previous)
