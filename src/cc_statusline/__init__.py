"""Status line for Claude Code sessions: git, context and usage limits."""

__version__ = "0.1.0"
