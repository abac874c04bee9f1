from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from cities_browser.core.dataset import Dataset
from cities_browser.core.filter_state import SelectionState
from cities_browser.core.selection import measures_for
from cities_browser.ui.helpers import (
    dataset_summary,
    dropdown_options,
    get_filter_dropdown_options,
    slider_props,
)
from cities_browser.ui.ids import IDs


def build_filter_panel(dataset: Dataset, initial: SelectionState) -> dbc.Card:
    category_options, type_options = get_filter_dropdown_options(dataset)
    measure_options = dropdown_options(
        measures_for(dataset, initial.category_id, initial.data_value_type_id)
    )
    slider_min, slider_max, slider_value, marks = slider_props(initial.value_range)
    name, meta = dataset_summary(dataset)

    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.Div([
                        html.H5(
                            name,
                            id=IDs.Control.SIDEBAR_DATASET_NAME,
                            className="card-title"
                        ),
                        html.P(
                            meta,
                            id=IDs.Control.SIDEBAR_DATASET_META,
                            className="card-subtitle text-muted mb-3"
                        ),
                        html.Hr(),
                    ]),
                    html.Div(
                        [
                            html.Label("Category", className="form-label"),
                            dcc.Dropdown(
                                id=IDs.Control.CATEGORY_SELECT,
                                options=category_options,
                                value=initial.category_id,
                                clearable=False,
                                placeholder="Select category",
                                className="mb-3",
                            ),
                        ],
                    ),
                    html.Div(
                        [
                            html.Label("Data value type", className="form-label"),
                            dcc.Dropdown(
                                id=IDs.Control.TYPE_SELECT,
                                options=type_options,
                                value=initial.data_value_type_id,
                                clearable=False,
                                placeholder="Select value type",
                                className="mb-3",
                            ),
                        ],
                    ),
                    html.Div(
                        [
                            html.Label("Measure", className="form-label"),
                            dcc.Dropdown(
                                id=IDs.Control.MEASURE_SELECT,
                                options=measure_options,
                                value=initial.measure,
                                clearable=False,
                                placeholder="Select measure",
                                className="mb-3",
                                optionHeight=55,
                            ),
                        ],
                    ),
                    html.Div(
                        [
                            html.Label("Value range", className="form-label"),
                            dcc.RangeSlider(
                                id=IDs.Control.RANGE_SLIDER,
                                min=slider_min,
                                max=slider_max,
                                value=slider_value,
                                marks=marks,
                                step=0.1,
                                allowCross=False,
                                tooltip={"placement": "bottom", "always_visible": False},
                            ),
                            html.Small(
                                "Cities exactly at either end of the range are left off the map.",
                                className="text-muted",
                            ),
                        ],
                        className="mb-2",
                    ),
                ]
            ),
        ],
        className="cb-sidebar",
    )
