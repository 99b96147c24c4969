import pytest


def pytest_configure(config):
    """Register custom test markers."""
    config.addinivalue_line("markers", "unit: Unit tests that do not perform real I/O")
    config.addinivalue_line("markers", "integration: Integration tests with mocked I/O")


@pytest.fixture
def mock_stdin(monkeypatch):
    """Factory fixture to mock stdin with custom content."""
    import io
    import sys

    def _mock_stdin(content: str):
        monkeypatch.setattr(sys, "stdin", io.StringIO(content))

    return _mock_stdin


@pytest.fixture
def temp_config_dir(monkeypatch, tmp_path):
    """Point XDG_CONFIG_HOME at a temporary directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def sample_input_payload():
    """Sample statusline input payload."""
    return {
        "session_id": "abc123-def456",
        "workspace": {"current_dir": "/Users/alice/projects/app/src"},
        "transcript_path": "/path/to/transcript.jsonl",
        "model": {"id": "claude-opus-4-5-20251101", "display_name": "Opus 4.5"},
        "version": "2.0.53",
    }
