from dataclasses import dataclass
from pathlib import Path

from cities_browser.config.model import GlobalConfig
from cities_browser.core.dataset import Dataset


@dataclass
class AppConfig:
    config_root: Path
    global_config: GlobalConfig
    dataset: Dataset

    def validate(self) -> None:
        """Ensure the app has what it needs before it starts."""
        if self.dataset is None:
            raise RuntimeError("AppConfig.dataset must be loaded.")
        if len(self.global_config.palette) < self.global_config.bin_count:
            raise RuntimeError("AppConfig.global_config.palette is shorter than bin_count.")
