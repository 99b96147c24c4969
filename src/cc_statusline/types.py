"""Data types for cc-statusline."""

from dataclasses import dataclass, field
from typing import Any, Optional

from .config.defaults import get_default_config
from .config.schema import StatusLineConfig


@dataclass
class FileChanges:
    """Line and file counts for one side of the index (staged or unstaged)."""

    added: int = 0
    deleted: int = 0
    files: int = 0


@dataclass
class GitStatus:
    """Git repository status information."""

    branch: str = ""
    has_changes: bool = False
    staged: FileChanges = field(default_factory=FileChanges)
    unstaged: FileChanges = field(default_factory=FileChanges)
    is_git_repo: bool = False


@dataclass
class ContextUsage:
    """Context window usage as shown in the session block."""

    tokens: int = 0
    max_tokens: int = 0
    percentage: int = 0


@dataclass
class UsageWindow:
    """Utilization of one rate-limit window."""

    utilization: float
    resets_at: Optional[str] = None


@dataclass
class UsageLimits:
    """Rate-limit windows; either may be absent."""

    five_hour: Optional[UsageWindow] = None
    seven_day: Optional[UsageWindow] = None


@dataclass
class ContextWindow:
    """Context window data from Claude Code status payload."""

    context_window_size: int = 0
    current_input_tokens: Optional[int] = None
    cache_creation_input_tokens: Optional[int] = None
    cache_read_input_tokens: Optional[int] = None

    @property
    def current_context_tokens(self) -> int:
        """Calculate current context tokens per official formula.

        Formula: input_tokens + cache_creation_input_tokens + cache_read_input_tokens
        """
        if self.current_input_tokens is None:
            return 0
        return (
            (self.current_input_tokens or 0)
            + (self.cache_creation_input_tokens or 0)
            + (self.cache_read_input_tokens or 0)
        )

    @property
    def has_current_usage(self) -> bool:
        """Check if current_usage data is available."""
        return self.current_input_tokens is not None


@dataclass
class RenderContext:
    """Context passed to widgets during rendering."""

    data: dict[str, Any]
    config: StatusLineConfig = field(default_factory=get_default_config)
    git_status: Optional[GitStatus] = None
    context_usage: Optional[ContextUsage] = None
    usage_limits: Optional[UsageLimits] = None
