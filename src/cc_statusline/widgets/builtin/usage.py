"""Usage limit widgets for the five-hour and seven-day windows."""

from typing import Optional

from ...config.schema import StatusLineConfig
from ...types import RenderContext, UsageWindow
from ...utils.colors import AnsiBuilder
from ...utils.formatting import format_percentage, format_reset_time
from ...utils.progress import render_bar
from ..base import Widget
from ..registry import register_widget

FIVE_HOUR_ICON = "🕔"
SEVEN_DAY_ICON = "📅"


def render_usage_block(
    window: Optional[UsageWindow], label: str, icon: str, config: StatusLineConfig
) -> Optional[str]:
    """Render ``label [bar] P% (reset)`` for one usage window.

    Returns:
        Block string, or None when the window is not available
    """
    if window is None or not window.resets_at:
        return None

    limits = config.limits
    label_text = icon if config.use_icon_labels else label
    out = AnsiBuilder().styled(label_text, "dim").text(" ")

    if limits.show_progress_bar:
        bar = render_bar(window.utilization, limits.progress_bar_length, limits.color)
        out.text(bar).text(" ")

    reset_time = format_reset_time(window.resets_at)
    out.styled(format_percentage(window.utilization), "light_gray")
    out.text(" ").styled(f"({reset_time})", "dim")
    return out.build()


@register_widget(
    "usage-five-hour",
    display_name="5h Usage",
    description="Five-hour usage limit with progress bar and reset time",
)
class FiveHourUsageWidget(Widget):
    """Display five-hour usage window."""

    def render(self, context: RenderContext) -> Optional[str]:
        limits = context.usage_limits
        window = limits.five_hour if limits else None
        return render_usage_block(window, "5h:", FIVE_HOUR_ICON, context.config)


@register_widget(
    "usage-seven-day",
    display_name="7d Usage",
    description="Seven-day usage limit, shown when enabled in limits settings",
)
class SevenDayUsageWidget(Widget):
    """Display seven-day usage window."""

    def render(self, context: RenderContext) -> Optional[str]:
        if not context.config.limits.show_seven_day:
            return None

        limits = context.usage_limits
        window = limits.seven_day if limits else None
        return render_usage_block(window, "7d:", SEVEN_DAY_ICON, context.config)
