"""
Wget command — non-interactive file downloads.
"""

from __future__ import annotations

from upset.adapters.shell.command import ShellCommand

WGET_COMMAND = "wget"


class WgetCommand(ShellCommand):
    """``wget`` bound as a command."""

    def __init__(self) -> None:
        super().__init__(WGET_COMMAND)
