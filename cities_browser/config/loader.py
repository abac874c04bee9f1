from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Tuple

from cities_browser.config.model import GlobalConfig
from cities_browser.core.dataset import Dataset
from cities_browser.core.dataset_loader import load_dataset, resolve_data_path
from cities_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from a directory.

    Expected structure:

        root/
            global.json
            data/
                500_Cities.csv

    global.json must name the CSV under 'data_file'. Optional keys:

    - ui_title / subtitle: navbar text
    - bin_count: number of map color bins, defaults to 6
    - palette: list of colors, defaults to plotly's YlOrRd
    - default_category / default_type: initial dropdown selection
    - map_zoom: initial map zoom

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises ConfigError: if global.json is missing, unreadable or lacks data_file.
    """
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise ConfigError(f"File not found at {global_path}")

    try:
        with global_path.open() as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    if not isinstance(raw, dict) or not raw.get("data_file"):
        raise ConfigError(f"{global_path} must be an object with a 'data_file' entry")

    try:
        config = GlobalConfig.from_raw(raw, config_root=root)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid value in {global_path}: {e}") from e

    if config.bin_count < 1:
        raise ConfigError(f"bin_count must be at least 1, got {config.bin_count}")
    if len(config.palette) < config.bin_count:
        raise ConfigError(
            f"palette has {len(config.palette)} colors, fewer than bin_count={config.bin_count}"
        )

    return config


def load_app_data(root: Path) -> Tuple[GlobalConfig, Dataset]:
    """
    Load the global configuration and the dataset it points to.

    Main entrypoint used by the UI. Load errors propagate: the app has no
    valid state without a dataset.

    :raises ConfigError: on a bad global.json
    :raises LoadError: if the CSV cannot be loaded
    """
    global_config = load_global_config(root)
    data_path = resolve_data_path(global_config.data_file, config_root=root)
    dataset = load_dataset(data_path)

    logger.info(
        "Dataset loaded from config root",
        extra={
            "config_root": str(root),
            "dataset": dataset.name,
            "n_records": dataset.n_records,
            "n_cities": dataset.n_cities,
        },
    )
    return global_config, dataset
