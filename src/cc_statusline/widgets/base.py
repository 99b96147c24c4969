"""Base class for status line blocks."""

from abc import ABC, abstractmethod
from typing import Optional

from ..types import RenderContext


class Widget(ABC):
    """One block of the status line.

    ``display_name``, ``description`` and ``default_color`` are filled in by
    ``@register_widget``. A block that has nothing to show returns None and
    the renderer drops it together with any separator left dangling.
    """

    display_name: str = ""
    description: str = ""
    default_color: str = "none"

    @abstractmethod
    def render(self, context: RenderContext) -> Optional[str]:
        """Render the block from the payload, configuration and collected data.

        Returns:
            Fragment (may contain ANSI codes, must end neutral) or None to hide
        """
