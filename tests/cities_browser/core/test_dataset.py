import pandas as pd

from cities_browser.core.dataset import Columns, Dataset


def _make_frame() -> pd.DataFrame:
    return pd.DataFrame(
        {
            Columns.CITY: ["Alpha", "Beta", "Alpha"],
            Columns.STATE: ["MO", "MO", "KS"],
            Columns.MEASURE: ["BINGE", "BINGE", "SMOKING"],
            Columns.VALUE: [12.5, 45.0, 20.0],
            Columns.CATEGORY: ["A", "A", "A"],
            Columns.VALUE_TYPE: ["CrdPrv", "CrdPrv", "AgeAdjPrv"],
        }
    )


def test_counts_and_valid_sets():
    ds = Dataset(name="d", frame=_make_frame())

    assert ds.n_records == 3
    assert ds.n_cities == 3
    assert ds.categories() == ["A"]
    assert ds.value_types() == ["AgeAdjPrv", "CrdPrv"]
    assert ds.valid_sets().measures == frozenset({"BINGE", "SMOKING"})


def test_source_frame_changes_do_not_reach_dataset():
    frame = _make_frame()
    ds = Dataset(name="d", frame=frame)

    frame.loc[0, Columns.VALUE] = 99.0
    frame.drop(columns=[Columns.MEASURE], inplace=True)

    assert ds.frame[Columns.VALUE].iloc[0] == 12.5
    assert Columns.MEASURE in ds.frame.columns


def test_frame_column_changes_do_not_reach_dataset():
    ds = Dataset(name="d", frame=_make_frame())

    returned = ds.frame
    returned["extra"] = 1
    returned.drop(columns=[Columns.CITY], inplace=True)

    assert "extra" not in ds.frame.columns
    assert Columns.CITY in ds.frame.columns
