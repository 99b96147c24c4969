"""Configuration file loading, saving, import and export."""

import json
import os
import sys

from pathlib import Path
from typing import Any, Union

import yaml

from pydantic import ValidationError

from ..utils.debug import debug_log
from .defaults import default_config_dict, get_default_config
from .schema import StatusLineConfig
from .tree import deep_merge, validate_config

YAML_SUFFIXES = (".yaml", ".yml")


class ConfigImportError(ValueError):
    """Raised when an external configuration file cannot be adopted."""


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.getenv("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(config_home) / "cc-statusline"


def get_config_path() -> Path:
    """Get the full configuration file path."""
    return get_config_dir() / "config.json"


def _read_tree(path: Path) -> dict[str, Any]:
    """Read a JSON or YAML document that must contain an object.

    Raises:
        OSError: If the file cannot be read
        ValueError: If the content is not a JSON/YAML object
    """
    with open(path, encoding="utf-8") as f:
        if path.suffix.lower() in YAML_SUFFIXES:
            data = yaml.safe_load(f)
        else:
            data = json.load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"expected an object at the top level of {path}")
    return data


def build_config(user_data: dict[str, Any]) -> StatusLineConfig:
    """Merge partial user data over the defaults and validate the result.

    Raises:
        ConfigImportError: If the merged tree is structurally invalid
        ValidationError: If a field violates the schema
    """
    merged = deep_merge(default_config_dict(), user_data)
    if not validate_config(merged):
        raise ConfigImportError("Invalid config structure")
    return StatusLineConfig.model_validate(merged)


def load_config_file(path: Union[str, Path, None] = None) -> StatusLineConfig:
    """Load and validate a config file without any fallback.

    Raises:
        OSError, ValueError, ValidationError, yaml.YAMLError
    """
    config_path = Path(path) if path else get_config_path()
    return build_config(_read_tree(config_path))


def load_config() -> StatusLineConfig:
    """Load the user configuration merged over the defaults.

    A missing file means defaults. An unreadable or invalid file is reported
    on stderr and the defaults are used instead.
    """
    config_path = get_config_path()

    if not config_path.exists():
        return get_default_config()

    try:
        return load_config_file(config_path)
    except (OSError, ValueError, ValidationError, yaml.YAMLError) as e:
        debug_log(f"Config load failed: {e}")
        print(
            f"Warning: Failed to load config from {config_path}: {e}",
            file=sys.stderr,
        )
        print("Using default configuration.", file=sys.stderr)
        return get_default_config()


def _write_tree(path: Path, data: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        if path.suffix.lower() in YAML_SUFFIXES:
            yaml.safe_dump(
                data, f, default_flow_style=False, sort_keys=False, allow_unicode=True
            )
        else:
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.write("\n")


def save_config(config: StatusLineConfig) -> None:
    """Save configuration to the JSON config file."""
    _write_tree(get_config_path(), config.to_dict())


def import_config(path: Union[str, Path]) -> StatusLineConfig:
    """Read a JSON or YAML config file, merge it over defaults and validate it.

    Args:
        path: File to import

    Returns:
        The validated configuration

    Raises:
        ConfigImportError: If the file is unreadable or the result is invalid
    """
    try:
        return build_config(_read_tree(Path(path)))
    except ConfigImportError:
        raise
    except (OSError, ValueError, ValidationError, yaml.YAMLError) as e:
        raise ConfigImportError(f"Failed to import config: {e}") from e


def export_config(config: StatusLineConfig, path: Union[str, Path]) -> None:
    """Write the configuration to ``path`` as YAML or JSON by file suffix."""
    _write_tree(Path(path), config.to_dict())
