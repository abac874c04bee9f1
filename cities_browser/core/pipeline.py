from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import pandas as pd

from cities_browser.core.colors import DEFAULT_BIN_COUNT, DEFAULT_PALETTE, ColorBinner, build_binner
from cities_browser.core.dataset import Columns, Dataset
from cities_browser.core.exceptions import EmptySelectionError
from cities_browser.core.filter_state import SelectionState
from cities_browser.core.filters import filter_stage1, filter_stage2, filter_stage3
from cities_browser.core.presentation import MapPoint, to_legend, to_map_points, to_table_rows

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """
    Everything the map/table renderers need for one SelectionState.

    - measure_subset: stage-2 output (category + type + measure), full range
    - subset: stage-3 output (additionally bounded by the slider)
    """
    state: SelectionState
    measure_subset: pd.DataFrame
    subset: pd.DataFrame
    binner: Optional[ColorBinner] = None
    map_points: List[MapPoint] = field(default_factory=list)
    table_rows: List[Dict[str, object]] = field(default_factory=list)
    legend: List[Dict[str, object]] = field(default_factory=list)
    n_skipped: int = 0

    @property
    def is_empty(self) -> bool:
        return self.subset.empty

    def raise_if_empty(self) -> None:
        if self.is_empty:
            raise EmptySelectionError(
                f"No records for category={self.state.category_id!r}, "
                f"type={self.state.data_value_type_id!r}, measure={self.state.measure!r}, "
                f"range={self.state.value_range!r}"
            )


def run_pipeline(
    dataset: Dataset,
    state: SelectionState,
    palette: Sequence[str] = DEFAULT_PALETTE,
    bin_count: int = DEFAULT_BIN_COUNT,
) -> PipelineResult:
    """
    Run every stage for `state` in one synchronous pass.

    The color binner is built from the measure-filtered values so colors stay
    put while the slider narrows the range.
    """
    stage1 = filter_stage1(dataset, state.category_id, state.data_value_type_id)
    measure_subset = filter_stage2(stage1, state.measure)

    if state.value_range is not None:
        lo, hi = state.value_range
        subset = filter_stage3(measure_subset, lo, hi)
    else:
        subset = measure_subset

    result = PipelineResult(state=state, measure_subset=measure_subset, subset=subset)

    if measure_subset.empty:
        return result

    binner = build_binner(palette, measure_subset[Columns.VALUE], bin_count)
    points, skipped = to_map_points(subset, binner)

    result.binner = binner
    result.map_points = points
    result.table_rows = to_table_rows(subset)
    result.legend = to_legend(binner)
    result.n_skipped = skipped

    logger.info(
        "pipeline_run",
        extra={
            "category_id": state.category_id,
            "data_value_type_id": state.data_value_type_id,
            "measure": state.measure,
            "n_measure_records": len(measure_subset),
            "n_records": len(subset),
            "n_map_points": len(points),
        },
    )
    return result
