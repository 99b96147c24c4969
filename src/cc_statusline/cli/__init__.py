"""CLI commands for cc-statusline."""

from .commands import cmd_export, cmd_get, cmd_import, cmd_list, cmd_reset, cmd_set
from .editor import cmd_edit

__all__ = [
    "cmd_edit",
    "cmd_export",
    "cmd_get",
    "cmd_import",
    "cmd_list",
    "cmd_reset",
    "cmd_set",
]
