"""Dict-level operations on the configuration tree.

The persisted configuration is a JSON object. These helpers work on that
plain representation (camelCase keys) so that callers can address any leaf
by a dot-path such as ``"git.showBranch"`` without per-field accessor code.
"""

import copy

from collections.abc import Mapping
from typing import Any, Union

from pydantic import BaseModel

from .defaults import DEFAULT_CONFIG
from .schema import PATH_DISPLAY_MODES, SEPARATORS, StatusLineConfig

__all__ = [
    "MISSING",
    "deep_merge",
    "get_value",
    "known_paths",
    "set_value",
    "validate_config",
]

ConfigTree = Union[Mapping[str, Any], StatusLineConfig]


class _Missing:
    """Marker for an absent key, distinct from a stored ``None``."""

    _instance = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"

    def __copy__(self) -> "_Missing":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "_Missing":
        return self


MISSING: Any = _Missing()

_SECTIONS = ("git", "session", "context", "limits")


def _as_tree(config: ConfigTree) -> Mapping[str, Any]:
    if isinstance(config, BaseModel):
        return config.model_dump(mode="json", by_alias=True)
    return config


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``override`` over ``base`` without mutating either.

    Mappings present on both sides are merged recursively. Any other override
    value (lists, scalars, ``None``) replaces the base value wholesale, except
    ``MISSING`` which keeps the base value.

    Args:
        base: Tree providing defaults
        override: Partial tree whose values win

    Returns:
        A new tree sharing no nested dicts with either input
    """
    result: dict[str, Any] = {key: copy.deepcopy(value) for key, value in base.items()}

    for key, override_value in override.items():
        if override_value is MISSING:
            continue

        base_value = result.get(key)
        if isinstance(override_value, Mapping) and isinstance(base_value, Mapping):
            result[key] = deep_merge(base_value, override_value)
        else:
            result[key] = copy.deepcopy(override_value)

    return result


def validate_config(candidate: Any) -> bool:
    """Structural check of a configuration tree.

    Only the top level is checked strictly; nested sections just need to be
    mappings so that newer keys inside them do not break older readers.
    """
    if not isinstance(candidate, Mapping):
        return False

    if not isinstance(candidate.get("oneLine"), bool):
        return False
    if not isinstance(candidate.get("showSonnetModel"), bool):
        return False

    if candidate.get("pathDisplayMode") not in PATH_DISPLAY_MODES:
        return False
    if candidate.get("separator") not in SEPARATORS:
        return False

    return all(isinstance(candidate.get(section), Mapping) for section in _SECTIONS)


def get_value(config: ConfigTree, path: str) -> Any:
    """Resolve a dot-path, returning ``MISSING`` if any segment is absent."""
    value: Any = _as_tree(config)
    for key in path.split("."):
        if isinstance(value, Mapping) and key in value:
            value = value[key]
        else:
            return MISSING
    return value


def set_value(config: ConfigTree, path: str, value: Any) -> dict[str, Any]:
    """Return a deep copy of ``config`` with the leaf at ``path`` replaced.

    Missing intermediate segments are created as empty dicts.
    """
    keys = path.split(".")
    new_config: dict[str, Any] = copy.deepcopy(dict(_as_tree(config)))

    current = new_config
    for key in keys[:-1]:
        if not isinstance(current.get(key), dict):
            current[key] = {}
        current = current[key]

    current[keys[-1]] = copy.deepcopy(value)
    return new_config


def known_paths(config: ConfigTree = DEFAULT_CONFIG) -> list[str]:
    """List every leaf dot-path of a configuration tree, in schema order."""

    def walk(node: Mapping[str, Any], prefix: str) -> list[str]:
        paths = []
        for key, value in node.items():
            path = f"{prefix}{key}"
            if isinstance(value, Mapping):
                paths.extend(walk(value, f"{path}."))
            else:
                paths.append(path)
        return paths

    return walk(_as_tree(config), "")
