from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Callable, Dict, List, Optional, Tuple

import pandas as pd

from cities_browser.core.colors import ColorBinner
from cities_browser.core.coordinates import extract_lat_lng
from cities_browser.core.dataset import Columns
from cities_browser.core.exceptions import CoordinateParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MapPoint:
    lat: float
    lng: float
    label: str
    color: str
    value: float
    hover: str = ""

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


def _label(row: pd.Series) -> str:
    return f"{row[Columns.CITY]} {row[Columns.STATE]}"


def _hover(row: pd.Series) -> str:
    parts = [f"<b>{_label(row)}</b>"]
    question = row.get(Columns.SHORT_QUESTION)
    if isinstance(question, str) and question:
        parts.append(f"{question}: {row[Columns.VALUE]}")
    else:
        parts.append(f"Value: {row[Columns.VALUE]}")
    year = row.get(Columns.YEAR)
    if isinstance(year, str) and year:
        parts.append(f"Year: {year}")
    population = row.get(Columns.POPULATION)
    if population is not None and not pd.isna(population):
        parts.append(f"Population: {int(population):,}")
    return "<br>".join(parts)


def to_map_points(
    subset: pd.DataFrame,
    color_for: Callable[[float], str] | ColorBinner,
) -> Tuple[List[MapPoint], int]:
    """
    One MapPoint per record whose GeoLocation parses.

    Records with an unparsable location are skipped (they still belong in the
    table); the number skipped is returned alongside the points.
    """
    points: List[MapPoint] = []
    skipped = 0

    for _, row in subset.iterrows():
        try:
            lat, lng = extract_lat_lng(row[Columns.GEOLOCATION])
        except CoordinateParseError as e:
            skipped += 1
            logger.debug("Skipping record without usable location: %s", e)
            continue

        value = float(row[Columns.VALUE])
        points.append(
            MapPoint(
                lat=lat,
                lng=lng,
                label=_label(row),
                color=color_for(value),
                value=value,
                hover=_hover(row),
            )
        )

    if skipped:
        logger.warning(
            "Records skipped on map due to bad GeoLocation",
            extra={"n_skipped": skipped, "n_records": len(subset)},
        )

    return points, skipped


def to_table_rows(subset: pd.DataFrame) -> List[Dict[str, object]]:
    """
    {city, state, value} rows sorted by value descending.
    Ties keep their original record order.
    """
    rows = [
        {
            "city": row[Columns.CITY],
            "state": row[Columns.STATE],
            "value": float(row[Columns.VALUE]),
        }
        for _, row in subset.iterrows()
    ]
    # sorted() is stable, including with reverse=True
    return sorted(rows, key=lambda r: r["value"], reverse=True)


def to_legend(binner: Optional[ColorBinner], precision: int = 1) -> List[Dict[str, object]]:
    """Legend contract for the map: one {label, lower, upper, color} per bin."""
    if binner is None:
        return []
    return [
        {"label": entry.label(precision), **entry.to_dict()}
        for entry in binner.legend()
    ]
