from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from cities_browser.ui.helpers import city_table
from cities_browser.ui.ids import IDs


def build_table_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(html.Strong("Cities"), className="p-2"),
            dbc.CardBody(
                [
                    city_table(IDs.Control.CITY_TABLE, rows=[]),
                    html.Div(
                        [
                            dbc.Button(
                                "Download table (CSV)",
                                id=IDs.Control.DOWNLOAD_DATA_BTN,
                                color="secondary",
                                size="sm",
                                className="mt-2 ms-auto me-2",
                            ),
                            dcc.Download(id=IDs.Control.DOWNLOAD_DATA),
                        ],
                        className="d-flex justify-content-end align-items-center",
                    ),
                ]
            ),
        ],
        className="cb-maincard",
    )
