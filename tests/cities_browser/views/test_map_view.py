import pandas as pd
import plotly.graph_objs as go

from cities_browser.core.dataset import Columns, Dataset
from cities_browser.core.filter_state import SelectionState
from cities_browser.views.map_view import POINT_COLUMNS, MapView


def _make_dataset():
    """
    Tiny table with:
    - 3 cities under category A / measure BINGE
    - 1 of them without a usable location
    """
    rows = [
        ("Kansas City", "MO", 12.5, "(39.1, -94.5)"),
        ("Seattle", "WA", 45.0, "(47.6, -122.3)"),
        ("Nowhere", "ZZ", 80.0, "unknown"),
    ]
    frame = pd.DataFrame(
        [
            {
                Columns.CITY: city,
                Columns.STATE: state,
                Columns.GEOLOCATION: geo,
                Columns.YEAR: "2016",
                Columns.MEASURE: "BINGE",
                Columns.VALUE: value,
                Columns.POPULATION: 1000,
                Columns.GEO_LEVEL: "City",
                Columns.SHORT_QUESTION: "Binge Drinking",
                Columns.CATEGORY: "A",
                Columns.VALUE_TYPE: "CrdPrv",
            }
            for city, state, value, geo in rows
        ]
    )
    return Dataset(name="TestDataset", frame=frame)


def _state(lo=10.0, hi=90.0) -> SelectionState:
    return SelectionState("A", "CrdPrv", "BINGE", (lo, hi))


def test_map_view_compute_data_basic():
    view = MapView(dataset=_make_dataset())

    data = view.compute_data(_state())

    assert isinstance(data, pd.DataFrame)
    assert list(data.columns) == POINT_COLUMNS
    assert list(data["label"]) == ["Kansas City MO", "Seattle WA"]


def test_map_view_render_figure():
    view = MapView(dataset=_make_dataset(), palette=["#0000ff", "#ff0000"], bin_count=2, zoom=4.5)
    state = _state()

    fig = view.render_figure(view.compute_data(state), state)

    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 1
    assert fig.data[0].type == "scattermap"
    assert list(fig.data[0].lat) == [39.1, 47.6]
    assert list(fig.data[0].marker.color) == ["#0000ff", "#0000ff"]
    assert fig.layout.map.zoom == 4.5
    assert fig.layout.title.text == "BINGE"


def test_map_view_render_figure_empty():
    view = MapView(dataset=_make_dataset())
    state = _state(lo=100.0, hi=200.0)

    data = view.compute_data(state)
    fig = view.render_figure(data, state)

    assert data.empty
    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 0
