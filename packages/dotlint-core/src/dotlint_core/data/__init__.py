from .dotter import GLOBAL_CONFIG, PLATFORM_CONFIGS, load_dotter_config, referenced_sources
from .loader import load_toml_typed

__all__ = [
    "GLOBAL_CONFIG",
    "PLATFORM_CONFIGS",
    "load_dotter_config",
    "load_toml_typed",
    "referenced_sources",
]
