from __future__ import annotations

from cities_browser.core.coordinates import extract_lat_lng
from cities_browser.core.dataset import Columns, Dataset
from cities_browser.core.exceptions import CoordinateParseError
from cities_browser.validation.errors import ValidationError, ValidationIssue


def _count_bad_locations(dataset: Dataset) -> int:
    bad = 0
    for raw in dataset.frame[Columns.GEOLOCATION].unique():
        try:
            extract_lat_lng(raw)
        except CoordinateParseError:
            bad += 1
    return bad


def validate_dataset(ds: Dataset) -> None:
    issues: list[ValidationIssue] = []

    if ds.n_records == 0:
        raise ValidationError([ValidationIssue("DATASET_EMPTY", "Dataset has no records.")])

    n_values = int(ds.frame[Columns.VALUE].notna().sum())
    if n_values == 0:
        issues.append(ValidationIssue("DATASET_NO_VALUES", "Every Data_Value is empty."))

    valid = ds.valid_sets()
    if not valid.categories:
        issues.append(ValidationIssue("DATASET_CATEGORIES", "No CategoryID values present."))
    if not valid.value_types:
        issues.append(ValidationIssue("DATASET_VALUE_TYPES", "No DataValueTypeID values present."))

    n_bad = _count_bad_locations(ds)
    if n_bad:
        issues.append(
            ValidationIssue(
                "DATASET_GEOLOCATION",
                f"{n_bad} distinct GeoLocation value(s) cannot be parsed; those cities stay off the map.",
            )
        )

    if issues:
        raise ValidationError(issues)
