from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass
class SelectionState:
    """
    Represents the current user selection.

    Fields:

    - category_id: CategoryID chosen in the first dropdown (e.g. "UNHBEH")
    - data_value_type_id: DataValueTypeID (e.g. "CrdPrv" / "AgeAdjPrv")
    - measure: Measure name, constrained to those present under category_id
    - value_range: (min, max) slider bounds; None until a measure is chosen

    The state is owned by the input layer; the pipeline only reads it.
    """

    category_id: Optional[str] = None
    data_value_type_id: Optional[str] = None
    measure: Optional[str] = None
    value_range: Optional[Tuple[float, float]] = None

    @property
    def is_complete(self) -> bool:
        return (
            self.category_id is not None
            and self.data_value_type_id is not None
            and self.measure is not None
            and self.value_range is not None
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        if self.value_range is not None:
            data["value_range"] = [float(v) for v in self.value_range]
        return data

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> SelectionState:
        data = data or {}
        raw_range = data.get("value_range")
        value_range = None
        if raw_range is not None:
            lo, hi = raw_range
            value_range = (float(lo), float(hi))

        return cls(
            category_id=data.get("category_id"),
            data_value_type_id=data.get("data_value_type_id"),
            measure=data.get("measure"),
            value_range=value_range,
        )
