"""Model name widget."""

from typing import Optional

from ...types import RenderContext
from ..base import Widget
from ..registry import register_widget

DEFAULT_MODEL_FAMILY = "sonnet"


@register_widget(
    "model",
    display_name="Model",
    default_color="light_gray",
    description="Model name, hidden for the default model unless configured",
)
class ModelWidget(Widget):
    """Display Claude model name."""

    def render(self, context: RenderContext) -> Optional[str]:
        """Render model display name."""
        model = context.data.get("model") or {}
        display_name: Optional[str] = model.get("display_name") or model.get("id")

        if not display_name:
            return None

        is_default = DEFAULT_MODEL_FAMILY in display_name.lower()
        if is_default and not context.config.show_sonnet_model:
            return None

        return display_name
