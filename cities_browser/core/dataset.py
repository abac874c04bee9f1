from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import pandas as pd


class Columns:
    """
    Column names of the 500 Cities CSV as published by the CDC.
    """
    CITY = "CityName"
    STATE = "StateAbbr"
    GEOLOCATION = "GeoLocation"
    YEAR = "Year"
    MEASURE = "Measure"
    VALUE = "Data_Value"
    POPULATION = "PopulationCount"
    GEO_LEVEL = "GeographicLevel"
    SHORT_QUESTION = "Short_Question_Text"
    CATEGORY = "CategoryID"
    VALUE_TYPE = "DataValueTypeID"

    REQUIRED = (
        CITY,
        STATE,
        GEOLOCATION,
        YEAR,
        MEASURE,
        VALUE,
        POPULATION,
        GEO_LEVEL,
        SHORT_QUESTION,
        CATEGORY,
        VALUE_TYPE,
    )

    STRINGS = (
        CITY,
        STATE,
        GEOLOCATION,
        YEAR,
        MEASURE,
        GEO_LEVEL,
        SHORT_QUESTION,
        CATEGORY,
        VALUE_TYPE,
    )

    NUMERIC = (VALUE, POPULATION)


@dataclass(frozen=True)
class ValidSets:
    """
    Cached valid values for UI validation / sanitisation.
    Computing .unique() on the full table is not free, so we do it once per Dataset.
    """
    categories: frozenset[str]
    value_types: frozenset[str]
    measures: frozenset[str]


class Dataset:
    """
    In-memory view of the loaded health table.

    The Dataset owns a private copy of the frame. Callers get a shallow copy,
    so adding or dropping columns never reaches the loaded records.
    """

    def __init__(
        self,
        name: str,
        frame: pd.DataFrame,
        file_path: Optional[Path] = None,
    ) -> None:
        self.name = name
        self._frame = frame.copy()
        self.file_path = file_path
        self._valid_sets: Optional[ValidSets] = None

    @property
    def frame(self) -> pd.DataFrame:
        """The loaded records."""
        return self._frame.copy(deep=False)

    @property
    def n_records(self) -> int:
        return len(self._frame)

    @property
    def n_cities(self) -> int:
        if self._frame.empty:
            return 0
        pairs = self._frame[[Columns.CITY, Columns.STATE]].drop_duplicates()
        return len(pairs)

    def valid_sets(self) -> ValidSets:
        """
        Return cached distinct ids for dropdown sanitisation.
        """
        if self._valid_sets is not None:
            return self._valid_sets

        frame = self._frame
        self._valid_sets = ValidSets(
            categories=frozenset(frame[Columns.CATEGORY].dropna().unique()),
            value_types=frozenset(frame[Columns.VALUE_TYPE].dropna().unique()),
            measures=frozenset(frame[Columns.MEASURE].dropna().unique()),
        )
        return self._valid_sets

    def categories(self) -> List[str]:
        return sorted(self.valid_sets().categories)

    def value_types(self) -> List[str]:
        return sorted(self.valid_sets().value_types)

    def __repr__(self) -> str:
        return f"Dataset(name={self.name!r}, n_records={self.n_records})"
