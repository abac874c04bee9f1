from __future__ import annotations

import logging
import math
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from dash import dash_table, html

from cities_browser.core.dataset import Dataset
from cities_browser.validation.dataset_validation import validate_dataset
from cities_browser.validation.errors import ValidationError

FONT_FAMILY = 'system-ui, -apple-system, BlinkMacSystemFont, "SF Pro Text", "Segoe UI", sans-serif'

# Readable names for the DataValueTypeID codes used by the 500 Cities release
VALUE_TYPE_LABELS: Dict[str, str] = {
    "CrdPrv": "Crude prevalence",
    "AgeAdjPrv": "Age-adjusted prevalence",
}


def dropdown_options(values: Iterable[str], labels: Optional[Dict[str, str]] = None) -> List[dict]:
    labels = labels or {}
    return [{"label": labels.get(v, v), "value": v} for v in values]


def get_filter_dropdown_options(dataset: Dataset) -> Tuple[List[dict], List[dict]]:
    category_options = dropdown_options(dataset.categories())
    type_options = dropdown_options(dataset.value_types(), VALUE_TYPE_LABELS)
    return category_options, type_options


def slider_props(bounds: Optional[Sequence[float]], n_marks: int = 5) -> Tuple[float, float, List[float], dict]:
    """
    (min, max, value, marks) for the range slider.
    With no bounds the slider collapses to [0, 0].

    The ends sit on whole numbers strictly outside the observed values, so the
    records at either extreme can still be brought inside the exclusive bounds.
    """
    if not bounds:
        return 0, 0, [0, 0], {}

    lo, hi = float(bounds[0]), float(bounds[1])
    lo_f, hi_f = math.ceil(lo) - 1, math.floor(hi) + 1

    step = (hi_f - lo_f) / (n_marks - 1)
    marks = {}
    for i in range(n_marks):
        pos = round(lo_f + i * step, 1)
        marks[pos] = f"{pos:g}"
    return lo_f, hi_f, [lo, hi], marks


def dataset_summary(ds: Optional[Dataset]) -> Tuple[str, str]:
    if ds is None:
        return "No dataset", "0 records · 0 cities"
    return ds.name, f"{ds.n_records} records · {ds.n_cities} cities"


def legend_component(legend: List[dict]) -> html.Div:
    if not legend:
        return html.Div("No legend: nothing selected.", className="text-muted small")

    items = [
        html.Div(
            [
                html.Span(
                    className="cb-legend-swatch",
                    style={
                        "display": "inline-block",
                        "width": "14px",
                        "height": "14px",
                        "marginRight": "6px",
                        "backgroundColor": entry["color"],
                        "border": "1px solid #d1d5db",
                    },
                ),
                html.Span(entry["label"], className="small"),
            ],
            className="d-flex align-items-center mb-1",
        )
        for entry in legend
    ]
    return html.Div(items, className="cb-legend")


def city_table(table_id: str, rows: List[dict], page_size: int = 15) -> dash_table.DataTable:
    """
    Styled, natively sortable Dash DataTable for the {city, state, value} rows.
    """
    return dash_table.DataTable(
        id=table_id,
        data=rows,
        columns=[
            {"name": "City", "id": "city"},
            {"name": "State", "id": "state"},
            {"name": "Value", "id": "value", "type": "numeric"},
        ],
        style_table={
            "overflowX": "auto",
        },
        style_as_list_view=True,
        style_cell={
            "fontFamily": FONT_FAMILY,
            "fontSize": "12px",
            "padding": "6px 8px",
            "border": "none",
            "textAlign": "left",
            "minWidth": "80px",
            "maxWidth": "260px",
            "whiteSpace": "nowrap",
            "textOverflow": "ellipsis",
        },
        style_header={
            "fontFamily": FONT_FAMILY,
            "fontSize": "12px",
            "fontWeight": "600",
            "backgroundColor": "#f3f4f6",
            "borderBottom": "1px solid #e5e7eb",
        },
        style_data={
            "borderBottom": "1px solid #e5e7eb",
        },
        page_size=page_size,
        sort_action="native",
        filter_action="none",
    )


def warn_on_invalid_dataset(ds: Dataset, logger: logging.Logger) -> None:
    """
    Validate the dataset and log a warning if it is not deployment-ready.

    Warn-only: the app still runs, but problems show up in the logs right
    after load.
    """
    try:
        validate_dataset(ds)
    except ValidationError as e:
        logger.warning(
            "Dataset %r validation failed: %s",
            ds.name,
            "; ".join(f"{issue.code}: {issue.message}" for issue in e.issues),
        )
