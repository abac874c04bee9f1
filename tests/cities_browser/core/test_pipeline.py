import pandas as pd
import pytest

from cities_browser.core.dataset import Columns, Dataset
from cities_browser.core.exceptions import EmptySelectionError
from cities_browser.core.filter_state import SelectionState
from cities_browser.core.pipeline import run_pipeline


def _record(city, category, measure, value, geo="(39.1, -94.5)"):
    return {
        Columns.CITY: city,
        Columns.STATE: "MO",
        Columns.GEOLOCATION: geo,
        Columns.YEAR: "2016",
        Columns.MEASURE: measure,
        Columns.VALUE: value,
        Columns.POPULATION: 1000,
        Columns.GEO_LEVEL: "City",
        Columns.SHORT_QUESTION: "Binge Drinking",
        Columns.CATEGORY: category,
        Columns.VALUE_TYPE: "CrdPrv",
    }


def _make_dataset():
    frame = pd.DataFrame(
        [
            _record("Alpha", "A", "BINGE", 12.5),
            _record("Beta", "A", "BINGE", 45.0),
            _record("Gamma", "A", "BINGE", 80.0),
            _record("Delta", "B", "DIABETES", 9.0),
        ]
    )
    return Dataset(name="TestDataset", frame=frame)


def test_end_to_end_category_measure_range():
    ds = _make_dataset()
    state = SelectionState("A", "CrdPrv", "BINGE", (10.0, 90.0))

    result = run_pipeline(ds, state)

    assert len(result.map_points) == 3
    assert [r["value"] for r in result.table_rows] == [80.0, 45.0, 12.5]
    assert [r["city"] for r in result.table_rows] == ["Gamma", "Beta", "Alpha"]
    assert len(result.legend) == 6
    assert result.n_skipped == 0
    result.raise_if_empty()


def test_full_range_drops_records_at_the_extremes():
    ds = _make_dataset()
    state = SelectionState("A", "CrdPrv", "BINGE", (12.5, 80.0))

    result = run_pipeline(ds, state)

    assert [r["value"] for r in result.table_rows] == [45.0]
    assert len(result.measure_subset) == 3


def test_colors_follow_measure_range_not_slider():
    ds = _make_dataset()

    wide = run_pipeline(ds, SelectionState("A", "CrdPrv", "BINGE", (10.0, 90.0)))
    narrow = run_pipeline(ds, SelectionState("A", "CrdPrv", "BINGE", (40.0, 50.0)))

    wide_beta = next(p for p in wide.map_points if p.label.startswith("Beta"))
    assert narrow.map_points[0].color == wide_beta.color


def test_empty_selection_is_reported_not_crashing():
    ds = _make_dataset()
    state = SelectionState("A", "CrdPrv", "BINGE", (81.0, 90.0))

    result = run_pipeline(ds, state)

    assert result.is_empty
    assert result.map_points == []
    assert result.table_rows == []
    with pytest.raises(EmptySelectionError):
        result.raise_if_empty()


def test_unknown_measure_yields_empty_result_without_legend():
    ds = _make_dataset()
    state = SelectionState("A", "CrdPrv", "NOPE", None)

    result = run_pipeline(ds, state)

    assert result.is_empty
    assert result.legend == []
    assert result.binner is None


def test_record_with_bad_location_stays_in_table():
    frame = _make_dataset().frame.copy()
    frame.loc[1, Columns.GEOLOCATION] = "not a location"
    ds = Dataset(name="Broken", frame=frame)

    result = run_pipeline(ds, SelectionState("A", "CrdPrv", "BINGE", (10.0, 90.0)))

    assert len(result.table_rows) == 3
    assert len(result.map_points) == 2
    assert result.n_skipped == 1
