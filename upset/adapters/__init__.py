"""Adapters — bindings to the external tools upset drives.

Public re-exports for convenient access.
"""

from upset.adapters.base import (
    Command,
    CommandError,
    CommandExecutionError,
    ToolNotFoundError,
)
from upset.adapters.mock import MockCommand
from upset.adapters.shell.command import ShellCommand

__all__ = [
    "Command",
    "CommandError",
    "CommandExecutionError",
    "MockCommand",
    "ShellCommand",
    "ToolNotFoundError",
]
