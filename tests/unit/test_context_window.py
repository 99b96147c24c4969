import json

import pytest

from cc_statusline.config.schema import ContextOptions
from cc_statusline.utils.context import (
    compute_context_usage,
    extract_context_window,
    get_context_usage,
)


def _write_transcript(path, tokens):
    entry = {
        "type": "assistant",
        "timestamp": "2026-01-01T10:00:00Z",
        "message": {"usage": {"input_tokens": tokens}},
    }
    path.write_text(json.dumps(entry) + "\n")


@pytest.mark.unit
class TestContextWindowExtraction:
    """Test extraction and fallback behavior."""

    def test_extracts_complete_context_window(self):
        """Full context_window payload is extracted correctly."""
        data = {
            "context_window": {
                "total_input_tokens": 15234,
                "total_output_tokens": 4521,
                "context_window_size": 200000,
                "current_usage": {
                    "input_tokens": 8500,
                    "output_tokens": 1200,
                    "cache_creation_input_tokens": 5000,
                    "cache_read_input_tokens": 2000,
                },
            }
        }

        cw = extract_context_window(data)

        assert cw is not None
        assert cw.context_window_size == 200000
        assert cw.current_context_tokens == 15500  # 8500 + 5000 + 2000
        assert cw.has_current_usage is True

    def test_handles_null_current_usage(self):
        """Falls back when current_usage is null (no messages yet)."""
        data = {
            "context_window": {
                "context_window_size": 200000,
                "current_usage": None,
            }
        }

        cw = extract_context_window(data)

        assert cw is not None
        assert cw.context_window_size == 200000
        assert cw.has_current_usage is False
        assert cw.current_context_tokens == 0

    def test_returns_none_when_context_window_missing_or_null(self):
        """Returns None for old payloads or null context_window."""
        assert extract_context_window({}) is None
        assert extract_context_window({"context_window": None}) is None
        assert extract_context_window({"context_window": "bad"}) is None


@pytest.mark.unit
class TestComputeContextUsage:
    """Test overhead, buffer and percentage arithmetic."""

    def test_plain_usage(self):
        usage = compute_context_usage(50000, ContextOptions())

        assert usage.tokens == 50000
        assert usage.max_tokens == 200000
        assert usage.percentage == 25

    def test_overhead_added(self):
        usage = compute_context_usage(50000, ContextOptions(overhead_tokens=10000))
        assert usage.tokens == 60000
        assert usage.percentage == 30

    def test_usable_context_counts_buffer(self):
        options = ContextOptions(use_usable_context_only=True)
        usage = compute_context_usage(50000, options)

        assert usage.tokens == 95000
        assert usage.percentage == 48

    def test_half_percent_rounds_up(self):
        usage = compute_context_usage(25000, ContextOptions())
        assert usage.percentage == 13
        assert compute_context_usage(1000, ContextOptions()).percentage == 1

    def test_percentage_capped(self):
        usage = compute_context_usage(500000, ContextOptions())
        assert usage.percentage == 100

    def test_custom_maximum(self):
        usage = compute_context_usage(100000, ContextOptions(max_context_tokens=1000000))
        assert usage.percentage == 10


@pytest.mark.unit
class TestContextUsagePriority:
    """Test that context_window is prioritized over transcript parsing."""

    def test_context_window_preferred_over_transcript(self, tmp_path):
        transcript = tmp_path / "session.jsonl"
        _write_transcript(transcript, 50000)
        data = {
            "context_window": {
                "context_window_size": 200000,
                "current_usage": {
                    "input_tokens": 8500,
                    "cache_creation_input_tokens": 5000,
                    "cache_read_input_tokens": 2000,
                },
            }
        }

        usage = get_context_usage(data, str(transcript), ContextOptions())

        assert usage.tokens == 15500

    def test_falls_back_to_transcript(self, tmp_path):
        transcript = tmp_path / "session.jsonl"
        _write_transcript(transcript, 50000)

        usage = get_context_usage({}, str(transcript), ContextOptions())

        assert usage.tokens == 50000
        assert usage.percentage == 25

    def test_nothing_known_is_zero(self, tmp_path):
        usage = get_context_usage({}, str(tmp_path / "missing.jsonl"), ContextOptions())
        assert usage.tokens == 0
        assert usage.percentage == 0
