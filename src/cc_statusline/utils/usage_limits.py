"""Subscription usage limits (five-hour and seven-day windows)."""

import json
import os
import tempfile
import time
import urllib.error
import urllib.request

from typing import Any, Optional, cast

from ..types import UsageLimits, UsageWindow
from .credentials import read_oauth_token
from .debug import debug_log

USAGE_URL = "https://api.anthropic.com/api/oauth/usage"
OAUTH_BETA_HEADER = "oauth-2025-04-20"

CACHE_FILE_NAME = "cc_statusline_usage_cache.json"
CACHE_FILE = os.path.join(tempfile.gettempdir(), CACHE_FILE_NAME)
CACHE_TTL_SECONDS = 60


def _read_cache() -> Optional[dict[str, Any]]:
    try:
        if os.path.exists(CACHE_FILE):
            cache_age = time.time() - os.path.getmtime(CACHE_FILE)
            if cache_age <= CACHE_TTL_SECONDS:
                with open(CACHE_FILE, encoding="utf-8") as f:
                    data = json.load(f)
                    return data if isinstance(data, dict) else None
    except (OSError, json.JSONDecodeError):
        pass
    return None


def _write_cache(data: dict[str, Any]) -> None:
    try:
        with open(CACHE_FILE, "w", encoding="utf-8") as f:
            json.dump(data, f)
    except OSError:
        pass


def fetch_usage_data(token: str) -> Optional[dict[str, Any]]:
    """Fetch raw usage data from the OAuth usage endpoint.

    Args:
        token: OAuth access token

    Returns:
        Decoded JSON object, or None on any network or decoding failure
    """
    request = urllib.request.Request(
        USAGE_URL,
        headers={
            "Authorization": f"Bearer {token}",
            "anthropic-beta": OAUTH_BETA_HEADER,
            "Accept": "application/json",
        },
    )
    try:
        with urllib.request.urlopen(request, timeout=5) as response:
            data = json.loads(response.read().decode("utf-8"))
    except (
        urllib.error.URLError,
        urllib.error.HTTPError,
        json.JSONDecodeError,
        TimeoutError,
        OSError,
    ) as e:
        debug_log(f"Usage fetch failed: {e}")
        return None

    return cast(dict[str, Any], data) if isinstance(data, dict) else None


def parse_usage_window(raw: Any) -> Optional[UsageWindow]:
    """Build a UsageWindow from ``{"utilization": .., "resets_at": ..}``."""
    if not isinstance(raw, dict):
        return None

    utilization = raw.get("utilization")
    if isinstance(utilization, bool) or not isinstance(utilization, (int, float)):
        return None

    resets_at = raw.get("resets_at")
    return UsageWindow(
        utilization=float(utilization),
        resets_at=resets_at if isinstance(resets_at, str) else None,
    )


def parse_usage_limits(data: dict[str, Any]) -> UsageLimits:
    """Pick the five-hour and seven-day windows out of a usage response."""
    return UsageLimits(
        five_hour=parse_usage_window(data.get("five_hour")),
        seven_day=parse_usage_window(data.get("seven_day")),
    )


def get_usage_limits() -> UsageLimits:
    """Usage limits from the short-lived cache or the usage endpoint.

    Returns:
        UsageLimits; both windows are None when unavailable
    """
    data = _read_cache()

    if data is None:
        token = read_oauth_token()
        if not token:
            return UsageLimits()

        data = fetch_usage_data(token)
        if data is None:
            return UsageLimits()
        _write_cache(data)

    return parse_usage_limits(data)
