"""Context usage widget."""

from typing import Optional

from ...types import RenderContext
from ...utils.formatting import format_session
from ..base import Widget
from ..registry import register_widget


@register_widget(
    "context",
    display_name="Context",
    description="Context window tokens and percentage used",
)
class ContextWidget(Widget):
    """Display context token usage."""

    def render(self, context: RenderContext) -> Optional[str]:
        usage = context.context_usage
        if usage is None:
            return None

        config = context.config
        return (
            format_session(
                usage.tokens,
                usage.max_tokens,
                usage.percentage,
                config.session,
                config.use_icon_labels,
            )
            or None
        )
