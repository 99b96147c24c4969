"""Debug logging utilities."""

import os
import sys
import time

from pathlib import Path


def get_log_dir() -> Path:
    """Directory for debug logs under the XDG cache home."""
    cache_home = os.getenv("XDG_CACHE_HOME", os.path.expanduser("~/.cache"))
    return Path(cache_home) / "cc-statusline" / "logs"


def debug_log(message: str, session_id: str = "") -> None:
    """Log debug messages to per-session debug log files if debug mode is enabled.

    Args:
        message: Debug message to log
        session_id: Optional session identifier
    """
    if not os.getenv("CC_STATUSLINE_DEBUG"):
        return

    logs_dir = get_log_dir()
    log_file = logs_dir / f"statusline_debug_{session_id or 'unknown'}.log"
    timestamp = time.strftime("%Y-%m-%d %H:%M:%S")

    session_prefix = f"[{session_id}] " if session_id else ""
    log_message = f"[{timestamp}] {session_prefix}{message}\n"

    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(log_message)
    except OSError:
        print(
            f"DEBUG (couldn't write to {log_file}): {session_prefix}{message}",
            file=sys.stderr,
        )
