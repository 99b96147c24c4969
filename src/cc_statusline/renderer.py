"""Main rendering pipeline for status line."""

from typing import Optional

from .types import RenderContext
from .utils.colors import colorize
from .widgets import builtin  # noqa: F401
from .widgets.registry import get_widget

SEPARATOR = "separator"

FIRST_LINE = ["git-branch", SEPARATOR, "directory", SEPARATOR, "model"]
SECOND_LINE = [
    "context",
    SEPARATOR,
    "usage-five-hour",
    SEPARATOR,
    "usage-seven-day",
]


def render_widget(widget_type: str, context: RenderContext) -> Optional[str]:
    """Render a single widget with its default color applied.

    Args:
        widget_type: Registered widget type
        context: Render context

    Returns:
        Rendered and colorized widget string, or None to skip
    """
    widget = get_widget(widget_type)
    if not widget:
        return None

    content = widget.render(context)
    if not content:
        return None

    # "none" color means widget handles its own coloring
    if widget.default_color == "none":
        return content

    return colorize(content, widget.default_color)


def _remove_orphaned_separators(pairs: list[tuple[str, Optional[str]]]) -> list[str]:
    """Remove separators that have no adjacent content.

    A separator is orphaned if:
    - It's at the start (nothing visible before it)
    - It's at the end (nothing visible after it)
    - It's adjacent to another separator (no content between)

    Args:
        pairs: List of (widget_type, rendered_string) tuples

    Returns:
        List of rendered strings with orphaned separators removed
    """
    rendered = [(widget_type, s) for widget_type, s in pairs if s is not None]

    result = []
    prev_was_separator = True  # Treat start as separator to skip leading separators

    for widget_type, content in rendered:
        is_separator = widget_type == SEPARATOR

        if is_separator:
            if not prev_was_separator:
                result.append((widget_type, content))
            prev_was_separator = True
        else:
            result.append((widget_type, content))
            prev_was_separator = False

    if result and result[-1][0] == SEPARATOR:
        result.pop()

    return [content for _, content in result]


def render_line(widget_types: list[str], context: RenderContext) -> str:
    """Render one line from a list of widget types.

    Args:
        widget_types: Widget types in display order (with separators)
        context: Render context with payload, configuration and data

    Returns:
        Formatted line with ANSI colors, "" if nothing is visible
    """
    rendered_pairs = [
        (widget_type, render_widget(widget_type, context))
        for widget_type in widget_types
    ]
    return "".join(_remove_orphaned_separators(rendered_pairs))


def render_status_line(context: RenderContext) -> str:
    """Compose the final output from the first and second lines.

    Args:
        context: Render context with data and configuration

    Returns:
        One line (one-line mode or first line hidden) or two lines joined by
        a newline
    """
    config = context.config

    second_line = render_line(SECOND_LINE, context)
    if not config.show_first_line:
        return second_line

    first_line = render_line(FIRST_LINE, context)
    lines = [line for line in (first_line, second_line) if line]

    if config.one_line:
        joiner = render_widget(SEPARATOR, context) or " "
        return joiner.join(lines)

    return "\n".join(lines)
