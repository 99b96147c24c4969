#!/usr/bin/env python3

import argparse
import json
import os
import sys

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Optional, cast

from .cli import (
    cmd_edit,
    cmd_export,
    cmd_get,
    cmd_import,
    cmd_list,
    cmd_reset,
    cmd_set,
)
from .config.loader import load_config
from .renderer import render_status_line
from .types import RenderContext
from .utils.colors import AnsiBuilder
from .utils.context import get_context_usage
from .utils.debug import debug_log
from .utils.git import get_git_status
from .utils.usage_limits import get_usage_limits


def parse_input_data() -> dict[str, Any]:
    """Parse JSON input from stdin and return as dict.

    Returns:
        Dictionary with Claude Code JSON payload
    """
    try:
        input_data = sys.stdin.read()
        data = json.loads(input_data)
    except (json.JSONDecodeError, ValueError):
        return {}
    return cast(dict[str, Any], data) if isinstance(data, dict) else {}


def get_working_dir(data: dict[str, Any]) -> str:
    """Working directory from the payload's workspace, falling back to cwd."""
    workspace = data.get("workspace") or {}
    return str(workspace.get("current_dir") or data.get("cwd") or "")


def find_transcript_path(data: dict[str, Any]) -> str:
    """Find transcript path, with fallback to construct from session_id.

    Args:
        data: JSON input data

    Returns:
        Path to transcript file, or empty string if not found
    """
    transcript_path: str = data.get("transcript_path") or ""
    if transcript_path and os.path.isfile(transcript_path):
        return transcript_path

    session_id = data.get("session_id", "")
    workspace = get_working_dir(data)

    if session_id and workspace:
        # Claude Code stores transcripts in ~/.claude/projects/{encoded_path}/{session_id}.jsonl
        encoded_path = workspace.replace("/", "-")
        potential_path = os.path.expanduser(
            f"~/.claude/projects/{encoded_path}/{session_id}.jsonl"
        )
        if os.path.isfile(potential_path):
            return potential_path

    return transcript_path


def build_render_context(data: dict[str, Any]) -> RenderContext:
    """Load configuration and collect git, context and usage-limit data.

    Args:
        data: JSON input data from Claude Code

    Returns:
        RenderContext ready for rendering
    """
    config = load_config()
    session_id = data.get("session_id", "")
    cwd = get_working_dir(data)
    transcript_path = find_transcript_path(data)

    debug_log("=== SESSION START ===", session_id)
    debug_log(f"Working Directory: {cwd}", session_id)
    debug_log(f"Transcript Path: {transcript_path}", session_id)

    with ThreadPoolExecutor(max_workers=3) as executor:
        git_future = executor.submit(get_git_status, cwd) if cwd else None
        context_future = executor.submit(
            get_context_usage, data, transcript_path, config.context
        )
        limits_future = executor.submit(get_usage_limits)

        git_status = git_future.result() if git_future else None
        context_usage = context_future.result()
        usage_limits = limits_future.result()

    debug_log(f"Git status: {git_status}", session_id)
    debug_log(f"Context usage: {context_usage}", session_id)
    debug_log(f"Usage limits: {usage_limits}", session_id)

    return RenderContext(
        data=data,
        config=config,
        git_status=git_status,
        context_usage=context_usage,
        usage_limits=usage_limits,
    )


def render_error(error: Exception) -> str:
    """Short two-line error message shown in place of the status line."""
    first = (
        AnsiBuilder()
        .styled("Error:", "red")
        .text(" ")
        .styled(str(error), "light_gray")
    )
    second = AnsiBuilder().styled("Check statusline configuration", "gray")
    return f"{first.build()}\n{second.build()}"


def run_statusline() -> int:
    """Read the payload from stdin and print the status line.

    Returns:
        Exit code (always 0 so the host keeps displaying output)
    """
    data = parse_input_data()

    try:
        output = render_status_line(build_render_context(data))
    except Exception as e:
        debug_log(f"Render failed: {e!r}", data.get("session_id", ""))
        output = render_error(e)

    print(output)
    return 0


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser.

    Returns:
        Configured argument parser
    """
    from . import __version__

    parser = argparse.ArgumentParser(
        prog="cc-statusline",
        description="Status line for Claude Code - git, context and usage limits",
        epilog="When no command is given, reads JSON from stdin and outputs the statusline.",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")
    config_parser = subparsers.add_parser("config", help="Read or change settings")
    config_commands = config_parser.add_subparsers(dest="config_command")

    get_parser = config_commands.add_parser("get", help="Print a value (or all) as JSON")
    get_parser.add_argument("key", nargs="?", help="Dot-path such as git.showBranch")

    set_parser = config_commands.add_parser("set", help="Set a value")
    set_parser.add_argument("key", help="Dot-path such as limits.color")
    set_parser.add_argument("value", help="true/false, a number, null, or text")

    config_commands.add_parser("list", help="List all settings")

    reset_parser = config_commands.add_parser("reset", help="Reset one key or everything")
    reset_parser.add_argument("key", nargs="?")

    import_parser = config_commands.add_parser("import", help="Import a JSON/YAML file")
    import_parser.add_argument("file")

    export_parser = config_commands.add_parser("export", help="Export to a JSON/YAML file")
    export_parser.add_argument("file")

    config_commands.add_parser("edit", help="Interactive editor")

    return parser


def run_config_command(args: argparse.Namespace) -> int:
    """Dispatch ``cc-statusline config <command>``.

    Returns:
        Exit code of the command
    """
    command = args.config_command

    if command == "get":
        return cmd_get(args.key)
    if command == "set":
        return cmd_set(args.key, args.value)
    if command == "list":
        return cmd_list()
    if command == "reset":
        return cmd_reset(args.key)
    if command == "import":
        return cmd_import(args.file)
    if command == "export":
        return cmd_export(args.file)

    # No sub-command: interactive mode
    return cmd_edit()


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point: render the status line or run a config command."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if args.command == "config":
        return run_config_command(args)

    return run_statusline()


if __name__ == "__main__":
    sys.exit(main())
