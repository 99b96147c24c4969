"""Default configuration for cc-statusline."""

from typing import Any

from .schema import StatusLineConfig

DEFAULT_CONFIG = StatusLineConfig()


def get_default_config() -> StatusLineConfig:
    """Return the default status line configuration.

    The model is frozen, so the shared instance is safe to hand out.
    """
    return DEFAULT_CONFIG


def default_config_dict() -> dict[str, Any]:
    """Return a fresh plain-dict copy of the defaults with camelCase keys."""
    return DEFAULT_CONFIG.to_dict()
