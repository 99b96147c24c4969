"""CLI commands for reading and changing the configuration."""

import json
import math
import sys

from typing import Any, Optional

from pydantic import ValidationError

from ..config.defaults import get_default_config
from ..config.loader import (
    ConfigImportError,
    build_config,
    export_config,
    get_config_path,
    import_config,
    load_config,
    save_config,
)
from ..config.tree import MISSING, get_value, known_paths, set_value

SECTION_TITLES = {
    "": "Display",
    "git": "Git",
    "session": "Session",
    "context": "Context",
    "limits": "Limits",
}


def parse_cli_value(value: str) -> Any:
    """Convert a command-line string into a JSON value.

    "true"/"false" become booleans, "null" becomes None, numeric strings
    become int or float; anything else stays a string.
    """
    if value in ("true", "false"):
        return value == "true"
    if value == "null":
        return None

    try:
        return int(value)
    except ValueError:
        pass

    try:
        number = float(value)
    except ValueError:
        return value
    return number if math.isfinite(number) else value


def _format_error(error: Exception) -> str:
    if isinstance(error, ValidationError):
        return "; ".join(
            f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in error.errors()
        )
    return str(error)


def cmd_get(key: Optional[str] = None) -> int:
    """Print one value, or the whole configuration, as JSON.

    Returns:
        Exit code (0 for success, 1 for unknown key)
    """
    config = load_config()

    if not key:
        print(json.dumps(config.to_dict(), indent=2, ensure_ascii=False))
        return 0

    value = get_value(config, key)
    if value is MISSING:
        print(f"✗ Unknown key: {key}", file=sys.stderr)
        return 1

    print(json.dumps(value, indent=2, ensure_ascii=False))
    return 0


def cmd_set(key: str, raw_value: str) -> int:
    """Set a single dot-path and save the configuration.

    Returns:
        Exit code (0 for success, 1 for unknown key or invalid value)
    """
    if key not in known_paths():
        print(f"✗ Unknown key: {key}", file=sys.stderr)
        print("  Run 'cc-statusline config list' to see available keys", file=sys.stderr)
        return 1

    value = parse_cli_value(raw_value)
    tree = set_value(load_config(), key, value)

    try:
        config = build_config(tree)
    except (ConfigImportError, ValidationError) as e:
        print(f"✗ Invalid value for {key}: {_format_error(e)}", file=sys.stderr)
        return 1

    save_config(config)
    print(f"Set {key} = {raw_value}")
    return 0


def cmd_list() -> int:
    """Print every setting grouped by section.

    Returns:
        Exit code (always 0)
    """
    config = load_config()

    print("\n=== Statusline Configuration ===")
    print(f"({get_config_path()})")

    current_section = None
    for path in known_paths(config):
        section, _, name = path.rpartition(".")
        if section != current_section:
            current_section = section
            print(f"\n{SECTION_TITLES.get(section, section)}:")
        print(f"  {name}: {json.dumps(get_value(config, path), ensure_ascii=False)}")

    print("")
    return 0


def cmd_reset(key: Optional[str] = None) -> int:
    """Reset one key, or everything, to the default.

    Returns:
        Exit code (0 for success, 1 for unknown key)
    """
    defaults = get_default_config()

    if not key:
        save_config(defaults)
        print("Reset all settings to defaults")
        return 0

    default_value = get_value(defaults, key)
    if default_value is MISSING:
        print(f"✗ Unknown key: {key}", file=sys.stderr)
        return 1

    config = build_config(set_value(load_config(), key, default_value))
    save_config(config)
    print(f"Reset {key} to default: {json.dumps(default_value, ensure_ascii=False)}")
    return 0


def cmd_import(file_path: str) -> int:
    """Import a JSON or YAML config file and save it as the active configuration.

    Returns:
        Exit code (0 for success, 1 if the file is invalid)
    """
    try:
        config = import_config(file_path)
    except ConfigImportError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    save_config(config)
    print(f"Config imported from {file_path}")
    return 0


def cmd_export(file_path: str) -> int:
    """Write the active configuration to a file.

    Returns:
        Exit code (0 for success, 1 if the file cannot be written)
    """
    try:
        export_config(load_config(), file_path)
    except OSError as e:
        print(f"✗ Failed to export: {e}", file=sys.stderr)
        return 1

    print(f"Config exported to {file_path}")
    return 0
