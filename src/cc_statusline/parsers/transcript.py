"""Context token extraction from JSONL transcript message.usage fields."""

import json
import os

from datetime import datetime
from typing import Any, Optional


def is_real_compact_boundary(data: dict[str, Any]) -> bool:
    """Check if this is a real compact boundary set by Claude Code.

    Args:
        data: Parsed JSON line from transcript

    Returns:
        True if this line is a valid compact boundary marker
    """
    return (
        data.get("type") == "system"
        and data.get("subtype") == "compact_boundary"
        and "compactMetadata" in data
        and isinstance(data["compactMetadata"], dict)
        and "trigger" in data["compactMetadata"]
    )


def _parse_time(timestamp_str: Any) -> Optional[datetime]:
    if not isinstance(timestamp_str, str):
        return None
    try:
        return datetime.fromisoformat(timestamp_str.replace("Z", "+00:00"))
    except ValueError:
        return None


def get_context_length(transcript_path: str) -> Optional[int]:
    """Current context size from the most recent main-chain usage entry.

    Usage before the last compact boundary is ignored. Sidechain and API
    error messages do not describe the main context and are skipped.

    Args:
        transcript_path: Path to the JSONL transcript file

    Returns:
        input + cache read + cache creation tokens, 0 if the transcript has no
        usage yet, or None if the transcript cannot be read
    """
    if not transcript_path or not os.path.isfile(transcript_path):
        return None

    most_recent_time: Optional[datetime] = None
    most_recent_usage: Optional[dict[str, int]] = None

    try:
        with open(transcript_path, encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue

                try:
                    data = json.loads(line)
                except json.JSONDecodeError:
                    continue
                if not isinstance(data, dict):
                    continue

                if is_real_compact_boundary(data):
                    most_recent_time = None
                    most_recent_usage = None
                    continue

                message = data.get("message")
                usage = message.get("usage") if isinstance(message, dict) else None
                if not usage:
                    continue

                if data.get("isSidechain") or data.get("isApiErrorMessage"):
                    continue

                entry_time = _parse_time(data.get("timestamp"))
                if entry_time is None:
                    continue
                if most_recent_time is None or entry_time >= most_recent_time:
                    most_recent_time = entry_time
                    most_recent_usage = usage

    except OSError:
        return None

    if not most_recent_usage:
        return 0

    return (
        (most_recent_usage.get("input_tokens") or 0)
        + (most_recent_usage.get("cache_read_input_tokens") or 0)
        + (most_recent_usage.get("cache_creation_input_tokens") or 0)
    )
