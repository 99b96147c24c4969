"""Directory widget."""

from typing import Optional

from ...types import RenderContext
from ...utils.formatting import format_path
from ..base import Widget
from ..registry import register_widget


@register_widget(
    "directory",
    display_name="Directory",
    default_color="light_gray",
    description="Working directory (full, last two segments, or basename)",
)
class DirectoryWidget(Widget):
    """Display current working directory."""

    def render(self, context: RenderContext) -> Optional[str]:
        workspace = context.data.get("workspace") or {}
        current_dir: Optional[str] = (
            workspace.get("current_dir") or context.data.get("cwd")
        )

        if not current_dir:
            return None

        return format_path(current_dir, context.config.path_display_mode)
