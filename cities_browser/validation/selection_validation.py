from __future__ import annotations

from cities_browser.core.dataset import Dataset
from cities_browser.core.filter_state import SelectionState
from cities_browser.core.selection import measures_for
from cities_browser.validation.errors import ValidationError, ValidationIssue


def validate_selection(dataset: Dataset, state: SelectionState) -> None:
    """
    Check a SelectionState against the dataset before it drives a render.
    Collects every problem rather than stopping at the first.
    """
    issues: list[ValidationIssue] = []
    valid = dataset.valid_sets()

    if state.category_id not in valid.categories:
        issues.append(ValidationIssue("SELECTION_CATEGORY", f"Unknown category '{state.category_id}'."))

    if state.data_value_type_id not in valid.value_types:
        issues.append(
            ValidationIssue("SELECTION_TYPE", f"Unknown data value type '{state.data_value_type_id}'.")
        )

    if not issues and state.measure not in measures_for(
        dataset, state.category_id, state.data_value_type_id
    ):
        issues.append(
            ValidationIssue(
                "SELECTION_MEASURE",
                f"Measure '{state.measure}' is not available for category '{state.category_id}'.",
            )
        )

    if state.value_range is not None:
        lo, hi = state.value_range
        if lo > hi:
            issues.append(ValidationIssue("SELECTION_RANGE", f"Range minimum {lo} exceeds maximum {hi}."))

    if issues:
        raise ValidationError(issues)
