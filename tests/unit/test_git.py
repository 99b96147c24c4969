"""Unit tests for git status collection."""

import pytest

from cc_statusline.utils import git as git_module
from cc_statusline.utils.git import get_git_status, parse_numstat


def _fake_git(responses):
    """Build a _run_git replacement answering from a dict keyed by args."""

    def run(args, cwd=None):
        return responses.get(" ".join(args))

    return run


@pytest.mark.unit
class TestParseNumstat:
    """Tests for numstat parsing."""

    def test_sums_lines_and_files(self):
        output = "10\t2\tsrc/app.py\n3\t0\tREADME.md"
        changes = parse_numstat(output)

        assert changes.added == 13
        assert changes.deleted == 2
        assert changes.files == 2

    def test_binary_files_count_as_files_only(self):
        changes = parse_numstat("-\t-\tlogo.png\n1\t1\tmain.py")

        assert changes.files == 2
        assert changes.added == 1
        assert changes.deleted == 1

    def test_empty_output(self):
        for output in (None, ""):
            changes = parse_numstat(output)
            assert (changes.added, changes.deleted, changes.files) == (0, 0, 0)

    def test_ignores_malformed_lines(self):
        changes = parse_numstat("garbage\n5\t5\tfile.txt")
        assert changes.files == 1


@pytest.mark.unit
class TestGetGitStatus:
    """Tests for get_git_status with git calls stubbed out."""

    def test_not_a_repository(self, monkeypatch):
        monkeypatch.setattr(git_module, "_run_git", _fake_git({}))

        status = get_git_status("/tmp")

        assert status.is_git_repo is False
        assert status.has_changes is False

    def test_clean_repository(self, monkeypatch):
        responses = {
            "rev-parse --git-dir": ".git",
            "branch --show-current": "main",
            "diff --numstat": "",
            "diff --cached --numstat": "",
        }
        monkeypatch.setattr(git_module, "_run_git", _fake_git(responses))

        status = get_git_status("/repo")

        assert status.is_git_repo is True
        assert status.branch == "main"
        assert status.has_changes is False

    def test_staged_and_unstaged_changes(self, monkeypatch):
        responses = {
            "rev-parse --git-dir": ".git",
            "branch --show-current": "feature/x",
            "diff --numstat": "4\t1\ta.py",
            "diff --cached --numstat": "2\t0\tb.py\n-\t-\tc.png",
        }
        monkeypatch.setattr(git_module, "_run_git", _fake_git(responses))

        status = get_git_status("/repo")

        assert status.has_changes is True
        unstaged, staged = status.unstaged, status.staged
        assert (unstaged.added, unstaged.deleted, unstaged.files) == (4, 1, 1)
        assert (staged.added, staged.deleted, staged.files) == (2, 0, 2)

    def test_detached_head_uses_short_sha(self, monkeypatch):
        responses = {
            "rev-parse --git-dir": ".git",
            "branch --show-current": "",
            "rev-parse --short HEAD": "abc1234",
        }
        monkeypatch.setattr(git_module, "_run_git", _fake_git(responses))

        assert get_git_status("/repo").branch == "abc1234"
