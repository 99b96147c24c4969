"""Fractional-block progress bar rendering."""

import math

from typing import Optional

from .colors import AnsiBuilder

FULL_BLOCK = "█"
EMPTY_BLOCK = "░"
# Index is the filled eighth of a cell; index 0 means no partial glyph
PARTIAL_BLOCKS = ("", "▏", "▎", "▍", "▌", "▋", "▊", "▉")

FIXED_BAR_COLORS = {
    "green": "fg_green",
    "yellow": "fg_yellow",
    "red": "fg_red",
    "blue": "fg_blue",
}

# (lower bound, color) checked from the top; below the last bound is gray
PROGRESSIVE_TIERS = (
    (90, "fg_red"),
    (70, "fg_orange"),
    (50, "fg_yellow"),
)


def bar_cells(percentage: float, length: int) -> tuple[int, Optional[str], int]:
    """Split a bar into full cells, an optional partial glyph and empty cells.

    Args:
        percentage: Fill percentage; values outside 0-100 are tolerated
        length: Bar width in cells

    Returns:
        Tuple of (full_cells, partial_glyph or None, empty_cells)
    """
    if length <= 0:
        return 0, None, 0

    if math.isnan(percentage):
        percentage = 0.0
    progress = (percentage / 100) * length
    # Anything past a full bar (including inf) draws a full bar
    progress = min(progress, float(length))
    if progress <= 0:
        return 0, None, length

    full_cells = math.floor(progress)
    remainder = progress - full_cells

    partial = PARTIAL_BLOCKS[math.floor(remainder * 8)] or None

    used_cells = full_cells + (1 if partial else 0)
    empty_cells = max(0, length - used_cells)

    return full_cells, partial, empty_cells


def get_bar_color(percentage: float, color_mode: str) -> str:
    """Pick the fill color name for a bar.

    ``progressive`` escalates by the raw percentage; the other modes are
    fixed colors.

    Raises:
        ValueError: If ``color_mode`` is not a known mode
    """
    if color_mode == "progressive":
        for lower_bound, color in PROGRESSIVE_TIERS:
            if percentage >= lower_bound:
                return color
        return "fg_gray"

    try:
        return FIXED_BAR_COLORS[color_mode]
    except KeyError:
        raise ValueError(f"Unknown progress bar color mode: {color_mode!r}") from None


def render_bar(percentage: float, length: int, color_mode: str) -> str:
    """Render a progress bar with eighth-cell resolution.

    The background code stays in effect for the whole bar and there is no
    reset between the filled and empty parts, only one at the end.

    Args:
        percentage: Fill percentage (0-100)
        length: Bar width in cells
        color_mode: One of progressive, green, yellow, red, blue

    Returns:
        Bar string with ANSI codes
    """
    fill_color = get_bar_color(percentage, color_mode)
    full_cells, partial, empty_cells = bar_cells(percentage, length)

    bar = AnsiBuilder().push("bg_bar")

    if full_cells > 0 or partial:
        bar.push(fill_color).text(FULL_BLOCK * full_cells).text(partial or "")

    if empty_cells > 0:
        bar.push("fg_empty").text(EMPTY_BLOCK * empty_cells)

    return bar.build()
