from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from cities_browser.ui.ids import IDs


def build_map_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong("Map"),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                dbc.Row(
                    [
                        dbc.Col(
                            dcc.Loading(
                                id="map-graph-loading",
                                type="default",
                                children=dcc.Graph(
                                    id=IDs.Control.MAP_GRAPH,
                                    style={"height": "560px"},
                                    config={"responsive": True},
                                ),
                            ),
                            md=10,
                        ),
                        dbc.Col(
                            [
                                html.Div("Legend", className="fw-semibold mb-2"),
                                html.Div(id=IDs.Control.MAP_LEGEND),
                            ],
                            md=2,
                        ),
                    ]
                ),
                className="cb-main-body",
            ),
        ],
        className="cb-maincard mb-3",
    )
