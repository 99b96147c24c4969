"""ANSI color codes and a small builder for styled fragments."""

import re

from typing import Optional

COLORS = {
    "green": "\033[0;32m",
    "red": "\033[0;31m",
    "purple": "\033[0;35m",
    "yellow": "\033[0;33m",
    "orange": "\033[38;5;208m",
    "gray": "\033[0;90m",
    "dim": "\033[2;90m",
    "light_gray": "\033[0;37m",
    # 256-color foregrounds for progress bars
    "fg_gray": "\033[38;5;240m",
    "fg_yellow": "\033[38;5;220m",
    "fg_orange": "\033[38;5;208m",
    "fg_red": "\033[38;5;196m",
    "fg_green": "\033[38;5;28m",
    "fg_blue": "\033[38;5;33m",
    "fg_empty": "\033[38;5;236m",
    "bg_bar": "\033[48;5;236m",
    "reset": "\033[0m",
}

COLORS["grey"] = COLORS["gray"]

RESET = COLORS["reset"]

_ANSI_RE = re.compile(r"\033\[[0-9;]*m")


def get_color_code(color_name: Optional[str]) -> str:
    """Get ANSI color code by name.

    Args:
        color_name: Color name (e.g., "gray", "fg_red") or None

    Returns:
        ANSI color code or empty string if not found
    """
    if not color_name:
        return ""
    return COLORS.get(color_name.lower(), "")


def strip_ansi(text: str) -> str:
    """Remove ANSI SGR sequences, leaving the visible text."""
    return _ANSI_RE.sub("", text)


class AnsiBuilder:
    """Accumulates text and style codes, keeping track of open styles.

    ``push`` opens a style without closing the previous one, so several codes
    can stay in effect across segments (the progress bar relies on this).
    ``pop`` emits a single reset if anything is open. ``build`` always leaves
    the output in the neutral state.
    """

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._open = False

    def push(self, *color_names: str) -> "AnsiBuilder":
        for name in color_names:
            code = get_color_code(name)
            if code:
                self._parts.append(code)
                self._open = True
        return self

    def text(self, text: str) -> "AnsiBuilder":
        if text:
            self._parts.append(text)
        return self

    def pop(self) -> "AnsiBuilder":
        if self._open:
            self._parts.append(RESET)
            self._open = False
        return self

    def styled(self, text: str, *color_names: str) -> "AnsiBuilder":
        """Append ``text`` in the given style, then return to neutral."""
        return self.push(*color_names).text(text).pop()

    def build(self) -> str:
        self.pop()
        return "".join(self._parts)


def colorize(text: str, color: Optional[str] = None) -> str:
    """Apply a named color to text, closing it with a reset.

    Args:
        text: Text to colorize
        color: Color name, or None to return the text unchanged

    Returns:
        Colorized text with ANSI codes
    """
    if not text or not color:
        return text
    return AnsiBuilder().styled(text, color).build()
