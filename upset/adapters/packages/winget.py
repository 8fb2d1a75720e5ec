"""
Winget command — the Windows package manager CLI.
"""

from __future__ import annotations

from upset.adapters.shell.command import ShellCommand

WINGET_COMMAND = "winget"


class WingetCommand(ShellCommand):
    """``winget`` bound as a command."""

    def __init__(self) -> None:
        super().__init__(WINGET_COMMAND)
