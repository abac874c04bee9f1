import pandas as pd
import pytest

from cities_browser.core.dataset import Columns, Dataset
from cities_browser.core.filter_state import SelectionState
from cities_browser.validation.dataset_validation import validate_dataset
from cities_browser.validation.errors import ValidationError
from cities_browser.validation.selection_validation import validate_selection


def _make_dataset(geo="(39.1, -94.5)", value=12.5):
    frame = pd.DataFrame(
        [
            {
                Columns.CITY: "Kansas City",
                Columns.STATE: "MO",
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
        ]
    )
    return Dataset(name="TestDataset", frame=frame)


def test_valid_selection_passes():
    validate_selection(_make_dataset(), SelectionState("A", "CrdPrv", "BINGE", (0.0, 20.0)))


def test_unknown_ids_are_all_reported():
    with pytest.raises(ValidationError) as exc:
        validate_selection(_make_dataset(), SelectionState("Z", "Nope", "BINGE", (0.0, 20.0)))

    codes = [i.code for i in exc.value.issues]
    assert codes == ["SELECTION_CATEGORY", "SELECTION_TYPE"]


def test_measure_outside_category():
    with pytest.raises(ValidationError) as exc:
        validate_selection(_make_dataset(), SelectionState("A", "CrdPrv", "SMOKING", None))

    assert exc.value.issues[0].code == "SELECTION_MEASURE"


def test_inverted_range():
    with pytest.raises(ValidationError) as exc:
        validate_selection(_make_dataset(), SelectionState("A", "CrdPrv", "BINGE", (20.0, 0.0)))

    assert exc.value.issues[0].code == "SELECTION_RANGE"


def test_validate_dataset_ok():
    validate_dataset(_make_dataset())


def test_validate_dataset_flags_bad_locations_and_missing_values():
    with pytest.raises(ValidationError) as exc:
        validate_dataset(_make_dataset(geo="???", value=None))

    codes = {i.code for i in exc.value.issues}
    assert codes == {"DATASET_NO_VALUES", "DATASET_GEOLOCATION"}
