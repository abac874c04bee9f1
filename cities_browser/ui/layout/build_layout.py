from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc, html

from cities_browser.core.filter_state import SelectionState
from cities_browser.ui.ids import IDs
from cities_browser.ui.layout.build_filter_panel import build_filter_panel
from cities_browser.ui.layout.build_map_panel import build_map_panel
from cities_browser.ui.layout.build_navbar import build_navbar
from cities_browser.ui.layout.build_table_panel import build_table_panel

if TYPE_CHECKING:
    from cities_browser.ui.config import AppConfig


def build_layout(ctx: AppConfig, initial: SelectionState):
    return dbc.Container(
        fluid=True,
        className="cb-root",
        children=[
            build_navbar(ctx.global_config),

            dcc.Store(id=IDs.Store.SELECTION_STATE, data=initial.to_dict()),

            dbc.Row(
                [
                    dbc.Col(build_filter_panel(ctx.dataset, initial), md=3),
                    dbc.Col(
                        [
                            build_map_panel(),
                            build_table_panel(),
                            html.Div(id=IDs.Control.STATUS_BAR, className="cb-status-bar text-muted small mt-2"),
                        ],
                        md=9,
                    ),
                ],
                className="mt-3",
            ),
        ],
    )
