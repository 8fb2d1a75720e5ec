"""
Mock command — universal test double for command execution.

Records the argument vector of every invocation and never spawns a process.
Configurable to succeed, fail, or raise per first argument, or to act
as if the tool were not installed at all.
"""

from __future__ import annotations

from collections.abc import Sequence

from upset.adapters.base import Command, CommandError, ToolNotFoundError


class MockCommand(Command):
    """Universal mock command for testing.

    By default every execution succeeds. Responses can be overridden
    per item, where the item is whichever argument the caller marks
    with ``set_result``/``set_error``.
    """

    def __init__(
        self,
        command_name: str = "mock",
        available: bool = True,
        default_result: bool = True,
    ):
        self._name = command_name
        self._available = available
        self._default_result = default_result
        self._results: dict[str, bool] = {}
        self._errors: dict[str, CommandError] = {}
        self._call_log: list[list[str]] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_log(self) -> list[list[str]]:
        """All argument vectors this mock has received, in order."""
        return self._call_log

    @property
    def call_count(self) -> int:
        """Number of times execute has been called."""
        return len(self._call_log)

    def is_available(self) -> bool:
        return self._available

    def set_result(self, argument: str, result: bool) -> None:
        """Return ``result`` for any call whose arguments contain ``argument``."""
        self._results[argument] = result

    def set_error(self, argument: str, error: CommandError | None = None) -> None:
        """Raise ``error`` for any call whose arguments contain ``argument``."""
        self._errors[argument] = error or CommandError(self._name, "Mock failure")

    def execute(self, arguments: Sequence[str]) -> bool:
        if not self._available:
            raise ToolNotFoundError(self._name)

        self._call_log.append(list(arguments))

        for argument in arguments:
            if argument in self._errors:
                raise self._errors[argument]
            if argument in self._results:
                return self._results[argument]

        return self._default_result

    def reset(self) -> None:
        """Clear call log and custom responses."""
        self._call_log.clear()
        self._results.clear()
        self._errors.clear()
