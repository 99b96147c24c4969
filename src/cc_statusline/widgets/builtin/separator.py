"""Separator widget for visual division."""

from typing import Optional

from ...types import RenderContext
from ..base import Widget
from ..registry import register_widget


@register_widget(
    "separator",
    display_name="Separator",
    default_color="gray",
    description="Configured separator glyph between blocks",
)
class SeparatorWidget(Widget):
    """Visual separator between widgets."""

    def render(self, context: RenderContext) -> Optional[str]:
        return f" {context.config.separator} "
