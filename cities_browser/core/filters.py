"""
Staged filtering of the health table.

Each stage is a pure function from a frame to a new frame. Row order is always
preserved (boolean masks only) and the input is never modified.

    dataset --stage1(category, type)--> subset
            --stage2(measure)---------> subset
            --stage3(lo, hi)----------> subset
"""

from __future__ import annotations

from typing import Optional, Set, Tuple

import pandas as pd

from cities_browser.core.dataset import Columns, Dataset


def _frame(data: Dataset | pd.DataFrame) -> pd.DataFrame:
    return data.frame if isinstance(data, Dataset) else data


def filter_stage1(
    dataset: Dataset | pd.DataFrame,
    category_id: Optional[str],
    type_id: Optional[str],
) -> pd.DataFrame:
    """
    Keep records with a non-null value matching both the category and the
    data-value type.
    """
    frame = _frame(dataset)
    mask = (
        frame[Columns.VALUE].notna()
        & (frame[Columns.CATEGORY] == category_id)
        & (frame[Columns.VALUE_TYPE] == type_id)
    )
    return frame[mask]


def available_measures(subset: pd.DataFrame) -> Set[str]:
    """Distinct measure names present in the subset."""
    return set(subset[Columns.MEASURE].dropna().unique())


def filter_stage2(subset: pd.DataFrame, measure: Optional[str]) -> pd.DataFrame:
    """Keep records whose measure equals `measure` exactly (case-sensitive)."""
    return subset[subset[Columns.MEASURE] == measure]


def filter_stage3(subset: pd.DataFrame, min_value: float, max_value: float) -> pd.DataFrame:
    """
    Keep records strictly inside (min_value, max_value).

    Bounds are exclusive: a record sitting exactly on a slider extreme is dropped.
    """
    values = subset[Columns.VALUE]
    return subset[(values > min_value) & (values < max_value)]


def value_bounds(subset: pd.DataFrame) -> Optional[Tuple[float, float]]:
    """
    (min, max) of the non-null values in the subset, or None when there are none.
    Used to reset the range slider whenever the measure-filtered subset changes.
    """
    values = subset[Columns.VALUE].dropna()
    if values.empty:
        return None
    return float(values.min()), float(values.max())
