from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from cities_browser.core.colors import DEFAULT_BIN_COUNT, DEFAULT_PALETTE


@dataclass
class GlobalConfig:
    """
    Parsed global.json.

    - data_file: CSV path, relative paths resolved by the dataset loader
    - palette / bin_count: map color binning
    - default_category / default_type: initial dropdown values
    """
    data_file: Path
    ui_title: str = "500 Cities Health Explorer"
    subtitle: str = "City-level chronic disease measures"
    bin_count: int = DEFAULT_BIN_COUNT
    palette: List[str] = field(default_factory=lambda: list(DEFAULT_PALETTE))
    default_category: Optional[str] = None
    default_type: Optional[str] = None
    map_zoom: float = 3.0
    config_root: Optional[Path] = None

    @classmethod
    def from_raw(cls, raw: Dict[str, Any], config_root: Optional[Path] = None) -> GlobalConfig:
        palette = raw.get("palette") or list(DEFAULT_PALETTE)
        return cls(
            data_file=Path(raw["data_file"]),
            ui_title=raw.get("ui_title", "500 Cities Health Explorer"),
            subtitle=raw.get("subtitle", "City-level chronic disease measures"),
            bin_count=int(raw.get("bin_count", DEFAULT_BIN_COUNT)),
            palette=list(palette),
            default_category=raw.get("default_category"),
            default_type=raw.get("default_type"),
            map_zoom=float(raw.get("map_zoom", 3.0)),
            config_root=config_root,
        )
