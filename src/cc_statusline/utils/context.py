"""Context window usage for the session block."""

from typing import Any, Optional

from ..config.schema import ContextOptions
from ..parsers.transcript import get_context_length
from ..types import ContextUsage, ContextWindow
from .formatting import round_half_up


def extract_context_window(data: dict[str, Any]) -> Optional[ContextWindow]:
    """Extract context_window data from Claude Code payload.

    Args:
        data: JSON input data from Claude Code

    Returns:
        ContextWindow if data is present and valid, None otherwise
    """
    cw = data.get("context_window")
    if not cw or not isinstance(cw, dict):
        return None

    current_usage = cw.get("current_usage") or {}

    return ContextWindow(
        context_window_size=cw.get("context_window_size", 0) or 0,
        current_input_tokens=current_usage.get("input_tokens"),
        cache_creation_input_tokens=current_usage.get("cache_creation_input_tokens"),
        cache_read_input_tokens=current_usage.get("cache_read_input_tokens"),
    )


def compute_context_usage(used_tokens: int, options: ContextOptions) -> ContextUsage:
    """Apply overhead and buffer settings to a raw token count.

    The percentage is relative to ``max_context_tokens`` and capped at 100.
    With ``use_usable_context_only`` the autocompact buffer is counted as
    already used, since that part of the window is never available.
    """
    tokens = used_tokens + options.overhead_tokens
    if options.use_usable_context_only:
        tokens += options.autocompact_buffer_tokens

    percentage = min(100, round_half_up(tokens * 100 / options.max_context_tokens))

    return ContextUsage(
        tokens=tokens,
        max_tokens=options.max_context_tokens,
        percentage=percentage,
    )


def get_context_usage(
    data: dict[str, Any], transcript_path: str, options: ContextOptions
) -> ContextUsage:
    """Context usage, preferring the payload's current_usage over the transcript.

    Args:
        data: JSON input data from Claude Code
        transcript_path: Path to the JSONL transcript
        options: Context section of the configuration

    Returns:
        ContextUsage (zero tokens if nothing is known yet)
    """
    context_window = extract_context_window(data)

    if context_window and context_window.has_current_usage:
        used = context_window.current_context_tokens
    else:
        used = get_context_length(transcript_path) or 0

    return compute_context_usage(used, options)
