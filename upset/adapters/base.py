"""
Command base — the contract between capability handlers and external tools.

Every handler talks to its tool through this interface, never through
``subprocess`` directly. That keeps argument construction testable with
a fake command and keeps process handling in one place.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence


class CommandError(Exception):
    """Base class for failures raised while running an external tool."""

    def __init__(self, tool: str, message: str):
        super().__init__(message)
        self.tool = tool


class ToolNotFoundError(CommandError):
    """The executable is not installed (or not on PATH)."""

    def __init__(self, tool: str):
        super().__init__(tool, f"{tool} command can not be found!")


class CommandExecutionError(CommandError):
    """The executable exists but could not be spawned."""


class Command(ABC):
    """Abstract base class for a single external executable.

    Implementations:
        1. Return the executable name from ``name``
        2. Implement ``is_available`` (presence detection)
        3. Implement ``execute`` (run with arguments, report exit status)
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The executable this command is bound to (e.g. 'git')."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check whether the executable can be found.

        Only an explicit "not found" from the OS counts as absent.
        Should never raise.
        """

    @abstractmethod
    def execute(self, arguments: Sequence[str]) -> bool:
        """Run the executable with ``arguments`` and wait for it to exit.

        Returns:
            True when the process exited with status 0, False otherwise.

        Raises:
            ToolNotFoundError: The executable is not available.
            CommandExecutionError: The process could not be spawned.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
