from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import IO, Optional, Union

import numpy as np
import pandas as pd

from cities_browser.core.dataset import Columns, Dataset
from cities_browser.core.exceptions import LoadError

logger = logging.getLogger(__name__)

Source = Union[str, Path, IO[str]]


def resolve_data_path(path: Path, config_root: Optional[Path] = None) -> Path:
    """
    Resolve a configured data file path.

    Absolute paths are used as-is. Relative paths are resolved against
    CITIES_BROWSER_DATA_ROOT when set, otherwise against the config root.
    """
    if path.is_absolute():
        return path

    data_root = os.environ.get("CITIES_BROWSER_DATA_ROOT")
    if data_root:
        resolved = Path(data_root) / path

        # Fallback for redundant 'data/' prefix
        if not resolved.is_file() and path.parts and path.parts[0] == "data":
            alt_path = Path(data_root) / Path(*path.parts[1:])
            if alt_path.is_file():
                resolved = alt_path
        return resolved

    if config_root is not None:
        return config_root / path
    return path


def _normalise_frame(frame: pd.DataFrame) -> pd.DataFrame:
    frame = frame.loc[:, list(Columns.REQUIRED)].copy()

    for col in Columns.STRINGS:
        # keep NaN as missing rather than the string "nan"
        frame[col] = frame[col].where(frame[col].isna(), frame[col].astype(str).str.strip())

    for col in Columns.NUMERIC:
        frame[col] = pd.to_numeric(frame[col], errors="coerce")
        # "inf" parses as a float; treat it like any other unusable value
        frame[col] = frame[col].replace([np.inf, -np.inf], np.nan)

    return frame.reset_index(drop=True)


def load_dataset(source: Source, name: Optional[str] = None) -> Dataset:
    """
    Read the whole CSV in one pass and wrap it in a Dataset.

    :param source: path to the CSV, or an open text buffer
    :param name: display name, defaults to the file stem
    :return: the loaded Dataset
    :raises LoadError: if the source cannot be read or lacks a required column
    """
    file_path: Optional[Path] = None
    if isinstance(source, (str, Path)):
        file_path = Path(source)
        if not file_path.is_file():
            raise LoadError(f"Data file not found at {file_path}.")

    display_name = name or (file_path.stem if file_path is not None else "dataset")

    try:
        raw = pd.read_csv(
            file_path if file_path is not None else source,
            dtype=str,
        )
    except pd.errors.EmptyDataError as e:
        raise LoadError(f"Data source '{display_name}' is empty.") from e
    except (pd.errors.ParserError, UnicodeDecodeError, OSError) as e:
        raise LoadError(f"Could not read data source '{display_name}': {e}") from e

    missing = [col for col in Columns.REQUIRED if col not in raw.columns]
    if missing:
        msg = f"Data source '{display_name}' is missing required columns: {', '.join(missing)}"
        logger.error(msg, extra={"dataset": display_name, "missing_columns": missing})
        raise LoadError(msg)

    frame = _normalise_frame(raw)

    logger.info(
        "Dataset loaded",
        extra={
            "dataset": display_name,
            "path": str(file_path) if file_path is not None else None,
            "n_records": len(frame),
            "n_null_values": int(frame[Columns.VALUE].isna().sum()),
        },
    )

    return Dataset(name=display_name, frame=frame, file_path=file_path)
