"""
Git command — version control through the git CLI, never raw API calls.
"""

from __future__ import annotations

from upset.adapters.shell.command import ShellCommand

GIT_COMMAND = "git"


class GitCommand(ShellCommand):
    """``git`` bound as a command."""

    def __init__(self) -> None:
        super().__init__(GIT_COMMAND)
