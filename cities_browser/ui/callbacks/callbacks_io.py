from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

import dash
import pandas as pd
from dash import Input, Output, State, dcc, exceptions

from cities_browser.core.filter_state import SelectionState
from cities_browser.ui.callbacks.callbacks_render import make_map_view
from cities_browser.ui.ids import IDs

if TYPE_CHECKING:
    from cities_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def export_filename(state: SelectionState) -> str:
    slug = re.sub(r"[^A-Za-z0-9]+", "_", state.measure or "selection").strip("_").lower()
    return f"{slug or 'selection'}_{state.data_value_type_id or 'all'}.csv"


def table_frame(ctx: AppConfig, state: SelectionState) -> pd.DataFrame:
    result = make_map_view(ctx).run(state)
    return pd.DataFrame(result.table_rows, columns=["city", "state", "value"])


def register_io_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Export Logic
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DOWNLOAD_DATA, "data"),
        Input(IDs.Control.DOWNLOAD_DATA_BTN, "n_clicks"),
        State(IDs.Store.SELECTION_STATE, "data"),
        prevent_initial_call=True,
    )
    def download_current_data(n_clicks, sel_data):
        if not n_clicks or not sel_data:
            raise exceptions.PreventUpdate

        state = SelectionState.from_dict(sel_data)
        frame = table_frame(ctx, state)
        logger.info("table_export", extra={"measure": state.measure, "n_rows": len(frame)})
        return dcc.send_data_frame(frame.to_csv, export_filename(state), index=False)
