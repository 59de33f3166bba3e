from .base import BaseRule
from .dot001_config_exists import DotterConfigExistsRule
from .dot002_config_refs_tracked import DotterFilesTrackedRule
from .dot003_broken_symlinks import NoBrokenSymlinksRule
from .dot004_toml_valid import TomlFilesValidRule
from .dot005_json_valid import JsonFilesValidRule

__all__ = [
    "BaseRule",
    "DotterConfigExistsRule",
    "DotterFilesTrackedRule",
    "JsonFilesValidRule",
    "NoBrokenSymlinksRule",
    "TomlFilesValidRule",
]
