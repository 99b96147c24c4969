"""Git branch widget."""

from typing import Optional

from ...types import RenderContext
from ...utils.formatting import format_branch
from ...utils.git import get_git_status
from ..base import Widget
from ..registry import register_widget


def _get_or_fetch_git_status(context: RenderContext) -> None:
    """Get git status from context or fetch it."""
    if context.git_status is not None:
        return

    workspace = context.data.get("workspace") or {}
    cwd = workspace.get("current_dir") or context.data.get("cwd")

    if cwd:
        context.git_status = get_git_status(cwd)


@register_widget(
    "git-branch",
    display_name="Git Branch",
    default_color="light_gray",
    description="Branch name with dirty, line and file change indicators",
)
class GitBranchWidget(Widget):
    """Display current git branch and working tree changes."""

    def render(self, context: RenderContext) -> Optional[str]:
        """Render branch fragment, hidden outside a repository."""
        _get_or_fetch_git_status(context)

        if not context.git_status or not context.git_status.is_git_repo:
            return None

        return format_branch(context.git_status, context.config.git) or None
