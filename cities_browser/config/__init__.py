from .loader import load_app_data, load_global_config
from .model import GlobalConfig

__all__ = ["GlobalConfig", "load_app_data", "load_global_config"]
