"""Git command execution utilities."""

import subprocess

from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from ..types import FileChanges, GitStatus


def _run_git(args: list[str], cwd: Optional[str] = None) -> Optional[str]:
    """Run git command and return stdout, or None on error.

    Args:
        args: Git command arguments
        cwd: Working directory for git command

    Returns:
        Command stdout or None if command failed
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            timeout=5,
            cwd=cwd,
        )
        return result.stdout.strip() if result.returncode == 0 else None
    except (subprocess.TimeoutExpired, FileNotFoundError, OSError):
        return None


def parse_numstat(output: Optional[str]) -> FileChanges:
    """Parse ``git diff --numstat`` output into line and file counts.

    Binary files report "-" for both columns and count as files only.
    """
    changes = FileChanges()
    if not output:
        return changes

    for line in output.splitlines():
        parts = line.split("\t")
        if len(parts) < 3:
            continue
        changes.files += 1
        if parts[0].isdigit():
            changes.added += int(parts[0])
        if parts[1].isdigit():
            changes.deleted += int(parts[1])

    return changes


def get_git_status(cwd: Optional[str] = None) -> GitStatus:
    """Get branch and staged/unstaged change counts.

    Args:
        cwd: Working directory to check git status in

    Returns:
        GitStatus; ``is_git_repo`` is False outside a repository
    """
    git_dir = _run_git(["rev-parse", "--git-dir"], cwd=cwd)
    if git_dir is None:
        return GitStatus(is_git_repo=False)

    with ThreadPoolExecutor(max_workers=3) as executor:
        branch_future = executor.submit(_run_git, ["branch", "--show-current"], cwd)
        unstaged_future = executor.submit(_run_git, ["diff", "--numstat"], cwd)
        staged_future = executor.submit(_run_git, ["diff", "--cached", "--numstat"], cwd)

        branch = branch_future.result()
        unstaged = parse_numstat(unstaged_future.result())
        staged = parse_numstat(staged_future.result())

    if not branch:
        # Detached HEAD
        branch = _run_git(["rev-parse", "--short", "HEAD"], cwd=cwd) or ""

    return GitStatus(
        branch=branch,
        has_changes=staged.files > 0 or unstaged.files > 0,
        staged=staged,
        unstaged=unstaged,
        is_git_repo=True,
    )
