"""Utilities for reading the Claude OAuth credentials."""

import json

from pathlib import Path
from typing import Optional

__all__ = ["get_credentials_path", "read_oauth_token"]


def get_credentials_path() -> Path:
    """Get path to Claude credentials file."""
    return Path.home() / ".claude" / ".credentials.json"


def read_oauth_token() -> Optional[str]:
    """Read the OAuth access token of a Claude subscription login.

    Returns:
        Access token, or None if not logged in with a subscription
    """
    credentials_path = get_credentials_path()

    if not credentials_path.exists():
        return None

    try:
        with open(credentials_path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError):
        return None

    oauth_data = data.get("claudeAiOauth") if isinstance(data, dict) else None
    if not isinstance(oauth_data, dict):
        return None

    token = oauth_data.get("accessToken")
    if isinstance(token, str) and token:
        return token
    return None
