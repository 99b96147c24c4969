"""Built-in widgets for status line.

Importing this module registers all built-in widgets with the registry.
"""

from .context import ContextWidget
from .directory import DirectoryWidget
from .git import GitBranchWidget
from .model import ModelWidget
from .separator import SeparatorWidget
from .usage import FiveHourUsageWidget, SevenDayUsageWidget

__all__ = [
    "SeparatorWidget",
    "GitBranchWidget",
    "DirectoryWidget",
    "ModelWidget",
    "ContextWidget",
    "FiveHourUsageWidget",
    "SevenDayUsageWidget",
]
