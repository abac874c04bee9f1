import json
from pathlib import Path

import pytest

from cities_browser.config.loader import load_app_data, load_global_config
from cities_browser.core.colors import DEFAULT_PALETTE
from cities_browser.core.exceptions import ConfigError, LoadError

HEADER = (
    "Year,StateAbbr,CityName,GeographicLevel,Measure,Data_Value,PopulationCount,"
    "GeoLocation,CategoryID,DataValueTypeID,Short_Question_Text"
)
ROW = '2016,MO,Kansas City,City,Binge drinking,18.2,459787,"(39.1, -94.5)",UNHBEH,CrdPrv,Binge Drinking'


def _make_config_root(tmp_path: Path, raw: dict) -> Path:
    # root/
    #   global.json
    #   data/
    #     cities.csv
    config_root = tmp_path / "config"
    data_dir = config_root / "data"
    data_dir.mkdir(parents=True)
    (data_dir / "cities.csv").write_text(HEADER + "\n" + ROW + "\n")
    (config_root / "global.json").write_text(json.dumps(raw))
    return config_root


def test_load_global_config_defaults(tmp_path):
    root = _make_config_root(tmp_path, {"data_file": "data/cities.csv"})

    cfg = load_global_config(root)

    assert cfg.data_file == Path("data/cities.csv")
    assert cfg.ui_title == "500 Cities Health Explorer"
    assert cfg.bin_count == 6
    assert cfg.palette == list(DEFAULT_PALETTE)
    assert cfg.default_category is None
    assert cfg.config_root == root


def test_load_global_config_overrides(tmp_path):
    root = _make_config_root(
        tmp_path,
        {
            "data_file": "data/cities.csv",
            "ui_title": "Health",
            "bin_count": 3,
            "palette": ["#fff", "#aaa", "#000"],
            "default_category": "UNHBEH",
            "default_type": "CrdPrv",
            "map_zoom": 4,
        },
    )

    cfg = load_global_config(root)

    assert cfg.ui_title == "Health"
    assert cfg.bin_count == 3
    assert cfg.palette == ["#fff", "#aaa", "#000"]
    assert cfg.default_type == "CrdPrv"
    assert cfg.map_zoom == 4.0


def test_missing_global_json(tmp_path):
    with pytest.raises(ConfigError):
        load_global_config(tmp_path)


def test_missing_data_file_key(tmp_path):
    root = _make_config_root(tmp_path, {"ui_title": "x"})

    with pytest.raises(ConfigError):
        load_global_config(root)


def test_palette_shorter_than_bins(tmp_path):
    root = _make_config_root(tmp_path, {"data_file": "data/cities.csv", "bin_count": 4, "palette": ["a"]})

    with pytest.raises(ConfigError):
        load_global_config(root)


def test_load_app_data_resolves_relative_to_config_root(tmp_path, monkeypatch):
    monkeypatch.delenv("CITIES_BROWSER_DATA_ROOT", raising=False)
    root = _make_config_root(tmp_path, {"data_file": "data/cities.csv"})

    cfg, ds = load_app_data(root)

    assert ds.name == "cities"
    assert ds.n_records == 1


def test_load_app_data_missing_csv(tmp_path, monkeypatch):
    monkeypatch.delenv("CITIES_BROWSER_DATA_ROOT", raising=False)
    root = _make_config_root(tmp_path, {"data_file": "data/other.csv"})

    with pytest.raises(LoadError):
        load_app_data(root)
