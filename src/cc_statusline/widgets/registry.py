"""Lookup table from layout names to widget instances."""

from typing import Callable, Optional

from .base import Widget

_WIDGETS: dict[str, Widget] = {}


def register_widget(
    widget_type: str,
    display_name: str = "",
    default_color: str = "none",
    description: str = "",
) -> Callable[[type[Widget]], type[Widget]]:
    """Class decorator that attaches metadata and registers one instance.

    Usage:
        @register_widget("directory", default_color="light_gray")
        class DirectoryWidget(Widget):
            def render(self, context):
                ...

    Args:
        widget_type: Name used in the line layouts (e.g. "usage-five-hour")
        display_name: Human-readable name (defaults to the title-cased type)
        default_color: Color wrapped around the output by the renderer;
            "none" if the widget styles its own fragments
        description: What the block shows

    Raises:
        ValueError: If ``widget_type`` is already taken
    """

    def decorator(cls: type[Widget]) -> type[Widget]:
        if widget_type in _WIDGETS:
            raise ValueError(f"Widget type already registered: {widget_type}")

        cls.display_name = display_name or widget_type.replace("-", " ").title()
        cls.default_color = default_color
        cls.description = description

        _WIDGETS[widget_type] = cls()
        return cls

    return decorator


def get_widget(widget_type: str) -> Optional[Widget]:
    """Registered instance for ``widget_type``, or None."""
    return _WIDGETS.get(widget_type)


def get_all_widgets() -> dict[str, Widget]:
    """Copy of the registry, in registration order."""
    return dict(_WIDGETS)
