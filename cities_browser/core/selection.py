from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from cities_browser.core.dataset import Dataset
from cities_browser.core.filter_state import SelectionState
from cities_browser.core.filters import (
    available_measures,
    filter_stage1,
    filter_stage2,
    value_bounds,
)

logger = logging.getLogger(__name__)


def measures_for(dataset: Dataset, category_id: Optional[str], type_id: Optional[str]) -> List[str]:
    """Sorted measures available for a category/type pair (dropdown options)."""
    if category_id is None or type_id is None:
        return []
    return sorted(available_measures(filter_stage1(dataset, category_id, type_id)))


def range_for(
    dataset: Dataset,
    category_id: Optional[str],
    type_id: Optional[str],
    measure: Optional[str],
) -> Optional[Tuple[float, float]]:
    """Full observed value range of the measure-filtered subset."""
    if category_id is None or type_id is None or measure is None:
        return None
    subset = filter_stage2(filter_stage1(dataset, category_id, type_id), measure)
    return value_bounds(subset)


def _pick(value: Optional[str], valid: Sequence[str]) -> Optional[str]:
    if value in valid:
        return value
    return valid[0] if valid else None


def update_selection(
    dataset: Dataset,
    previous: Optional[SelectionState],
    category_id: Optional[str],
    type_id: Optional[str],
    measure: Optional[str],
    value_range: Optional[Sequence[float]] = None,
) -> SelectionState:
    """
    Build the next SelectionState from raw control values.

    - category / type fall back to the first known id when unknown
    - measure falls back to the first measure available for the category/type
    - value_range is recomputed from the measure-filtered subset whenever the
      category, type or measure differs from `previous`; otherwise the given
      range is kept (ordered low -> high)
    """
    previous = previous or SelectionState()

    category_id = _pick(category_id, dataset.categories())
    type_id = _pick(type_id, dataset.value_types())
    measure = _pick(measure, measures_for(dataset, category_id, type_id))

    selection_changed = (
        category_id != previous.category_id
        or type_id != previous.data_value_type_id
        or measure != previous.measure
    )

    if selection_changed or value_range is None or len(value_range) != 2:
        new_range = range_for(dataset, category_id, type_id, measure)
    else:
        lo, hi = sorted(float(v) for v in value_range)
        new_range = (lo, hi)

    if selection_changed:
        logger.debug(
            "selection_reset",
            extra={
                "category_id": category_id,
                "data_value_type_id": type_id,
                "measure": measure,
                "value_range": new_range,
            },
        )

    return SelectionState(
        category_id=category_id,
        data_value_type_id=type_id,
        measure=measure,
        value_range=new_range,
    )
