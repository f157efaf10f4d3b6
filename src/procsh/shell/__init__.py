"""User shell discovery and command invocation planning."""

from procsh.shell.discovery import classify_shell, get_user_shell
from procsh.shell.resolve import (
    INVOCATION_TEMPLATES,
    InvalidCommandError,
    is_interactive_shell_command,
    resolve_command,
)

__all__ = [
    "INVOCATION_TEMPLATES",
    "InvalidCommandError",
    "classify_shell",
    "get_user_shell",
    "is_interactive_shell_command",
    "resolve_command",
]
