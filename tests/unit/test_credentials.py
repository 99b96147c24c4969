"""Unit tests for credentials utility."""

import json

import pytest

from cc_statusline.utils.credentials import read_oauth_token


@pytest.fixture
def creds_file(tmp_path, monkeypatch):
    """Credentials file location patched into the credentials module."""
    path = tmp_path / ".claude" / ".credentials.json"
    path.parent.mkdir(parents=True)
    monkeypatch.setattr(
        "cc_statusline.utils.credentials.get_credentials_path",
        lambda: path,
    )
    return path


@pytest.mark.unit
class TestReadOAuthToken:
    """Tests for read_oauth_token function."""

    def test_reads_access_token(self, creds_file):
        credentials = {
            "claudeAiOauth": {
                "accessToken": "sk-ant-oat01-xyz789",
                "subscriptionType": "max",
            }
        }
        creds_file.write_text(json.dumps(credentials))

        assert read_oauth_token() == "sk-ant-oat01-xyz789"

    def test_returns_none_when_no_oauth(self, creds_file):
        creds_file.write_text(json.dumps({"someOtherKey": "value"}))
        assert read_oauth_token() is None

    def test_returns_none_when_file_missing(self, creds_file):
        assert read_oauth_token() is None

    def test_handles_malformed_json(self, creds_file):
        creds_file.write_text("not valid json")
        assert read_oauth_token() is None

    def test_handles_oauth_data_not_dict(self, creds_file):
        creds_file.write_text(json.dumps({"claudeAiOauth": "not a dict"}))
        assert read_oauth_token() is None

    def test_handles_empty_token(self, creds_file):
        creds_file.write_text(json.dumps({"claudeAiOauth": {"accessToken": ""}}))
        assert read_oauth_token() is None

    def test_handles_top_level_list(self, creds_file):
        creds_file.write_text(json.dumps(["token"]))
        assert read_oauth_token() is None
