"""Formatting primitives for status line fragments.

Every function here is pure and returns a string whose styled parts are
closed with a reset, so fragments can be concatenated freely.
"""

import math
import os

from datetime import datetime, timezone
from typing import Optional, Union

from ..config.schema import GitOptions, SessionOptions
from ..types import GitStatus
from .colors import AnsiBuilder

DIRTY_SYMBOL = "•"
CONTEXT_ICON = "📚"

MS_PER_DAY = 86_400_000
MS_PER_HOUR = 3_600_000
MS_PER_MINUTE = 60_000


def round_half_up(value: float) -> int:
    """Round .5 upwards, like JavaScript ``Math.round``."""
    return math.floor(value + 0.5)


def format_path(path: str, mode: str = "truncated", home: Optional[str] = None) -> str:
    """Format a working directory for display.

    Args:
        path: Absolute directory path
        mode: "full", "truncated" (last two segments) or "basename"
        home: Home directory to replace with "~" (defaults to $HOME)

    Returns:
        Display path
    """
    if home is None:
        home = os.getenv("HOME", "")

    formatted = path
    if home and path.startswith(home):
        formatted = f"~{path[len(home):]}"

    if mode == "basename":
        segments = [s for s in path.split("/") if s]
        return segments[-1] if segments else path

    if mode == "truncated":
        segments = [s for s in formatted.split("/") if s]
        if len(segments) > 2:
            return "/" + "/".join(segments[-2:])

    return formatted


def format_tokens(count: float, show_decimals: bool = True) -> str:
    """Format a token count as 850, 192k or 1.5m with a gray suffix.

    Args:
        count: Token count
        show_decimals: One fractional digit instead of rounding to an integer

    Returns:
        Formatted count
    """
    if count >= 1_000_000:
        value, suffix = count / 1_000_000, "m"
    elif count >= 1_000:
        value, suffix = count / 1_000, "k"
    else:
        if isinstance(count, float) and count.is_integer():
            count = int(count)
        return str(count)

    number = f"{value:.1f}" if show_decimals else str(round_half_up(value))
    return AnsiBuilder().text(number).styled(suffix, "gray").build()


def _parse_timestamp(timestamp: Union[str, datetime]) -> datetime:
    if isinstance(timestamp, datetime):
        parsed = timestamp
    else:
        parsed = datetime.fromisoformat(timestamp.strip().replace("Z", "+00:00"))

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_reset_time(
    timestamp: Union[str, datetime, None], now: Optional[datetime] = None
) -> str:
    """Format the time left until ``timestamp`` as 2d3h, 5h12m or 40m.

    Args:
        timestamp: ISO-8601 string or datetime; naive values are UTC
        now: Reference time (defaults to the current time)

    Returns:
        Compact duration, "now" if already passed, "N/A" if unparseable
    """
    try:
        reset_at = _parse_timestamp(timestamp)  # type: ignore[arg-type]
        current = _parse_timestamp(now or datetime.now(timezone.utc))
        diff_ms = math.floor((reset_at - current).total_seconds() * 1000)
    except (TypeError, ValueError, AttributeError, OverflowError):
        return "N/A"

    if diff_ms <= 0:
        return "now"

    days = diff_ms // MS_PER_DAY
    hours = (diff_ms % MS_PER_DAY) // MS_PER_HOUR
    minutes = (diff_ms % MS_PER_HOUR) // MS_PER_MINUTE

    if days > 0:
        return f"{days}d{hours}h" if hours > 0 else f"{days}d"
    if hours > 0:
        return f"{hours}h{minutes}m"
    return f"{minutes}m"


def format_percentage(value: float) -> str:
    """Integer percentage with a gray percent sign."""
    return AnsiBuilder().text(str(round_half_up(value))).styled("%", "gray").build()


def format_branch(git: GitStatus, options: GitOptions) -> str:
    """Format branch name and working tree change indicators.

    Args:
        git: Repository status
        options: Which facets to show

    Returns:
        Branch fragment, possibly empty
    """
    out = AnsiBuilder()

    if options.show_branch:
        out.text(git.branch)

    if not git.has_changes:
        return out.build()

    if options.show_dirty_indicator:
        out.text(" ").styled(DIRTY_SYMBOL, "purple")

    changes: list[str] = []

    if options.show_changes:
        added = git.staged.added + git.unstaged.added
        deleted = git.staged.deleted + git.unstaged.deleted
        if added + deleted > 0:
            changes.append(
                AnsiBuilder()
                .styled(f"+{added}", "green")
                .text(" ")
                .styled(f"-{deleted}", "red")
                .build()
            )

    if options.show_staged and git.staged.files > 0:
        changes.append(AnsiBuilder().styled(f"~{git.staged.files}", "gray").build())

    if options.show_unstaged and git.unstaged.files > 0:
        changes.append(AnsiBuilder().styled(f"~{git.unstaged.files}", "yellow").build())

    if changes:
        out.text(" " + " ".join(changes))

    return out.build()


def format_session(
    tokens_used: int,
    tokens_max: int,
    percentage: float,
    options: SessionOptions,
    use_icons: bool,
) -> str:
    """Format the context usage block: label, tokens and percentage.

    Returns:
        Session fragment, or "" when every item is disabled
    """
    items: list[str] = []

    if options.show_tokens:
        used = format_tokens(tokens_used, options.show_token_decimals)
        if options.show_max_tokens:
            limit = format_tokens(tokens_max, options.show_token_decimals)
            items.append(
                AnsiBuilder().text(used).styled("/", "gray").text(limit).build()
            )
        else:
            items.append(used)

    if options.show_percentage:
        items.append(format_percentage(percentage))

    if not items:
        return ""

    if options.info_separator:
        joiner = (
            AnsiBuilder().text(" ").styled(options.info_separator, "gray").text(" ").build()
        )
    else:
        joiner = " "

    label = CONTEXT_ICON if use_icons else "Context:"
    out = AnsiBuilder().styled(label, "dim").text(" ")
    for index, item in enumerate(items):
        if index:
            out.text(joiner)
        out.styled(item, "light_gray")
    return out.build()
