"""Configuration model, defaults and persistence."""

from .defaults import default_config_dict, get_default_config
from .schema import StatusLineConfig
from .tree import MISSING, deep_merge, get_value, known_paths, set_value, validate_config

__all__ = [
    "MISSING",
    "StatusLineConfig",
    "deep_merge",
    "default_config_dict",
    "get_default_config",
    "get_value",
    "known_paths",
    "set_value",
    "validate_config",
]
