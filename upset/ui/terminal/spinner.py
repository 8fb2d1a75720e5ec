"""
Spinner terminal output — a single animated line per item.

While an item is loading, a rich status spinner shows its message.
Finishing the item removes the spinner and prints a ✓ or ⚠ line in its
place. Rich only animates when the console is a terminal; anything
written to stdout or stderr meanwhile is printed above the spinner
instead of through it. On other streams only the final lines appear.
"""

from __future__ import annotations

from typing import IO

from rich.console import Console
from rich.status import Status
from rich.text import Text

from upset.ui.terminal.base import SUCCESS_MARK, WARNING_MARK, TerminalOutput

SPINNER = "dots"


class SpinnerTerminalOutput(TerminalOutput):
    """Animated progress line, finished with a success or warning mark."""

    def __init__(self, file: IO[str] | None = None, console: Console | None = None):
        super().__init__(file)
        self._console = console or Console(file=file, highlight=False)
        self._status: Status | None = None

    @property
    def console(self) -> Console:
        return self._console

    @property
    def animated(self) -> bool:
        return self._console.is_terminal

    def loading(self, message: str) -> None:
        self._stop_status()
        self._status = self._console.status(Text(message), spinner=SPINNER)
        self._status.start()

    def succeed(self, message: str) -> None:
        self._finish(SUCCESS_MARK, "bold green", message)

    def warn(self, message: str) -> None:
        self._finish(WARNING_MARK, "bold yellow", message)

    def _finish(self, mark: str, style: str, message: str) -> None:
        self._stop_status()
        self._console.print(Text.assemble((mark, style), " ", message), soft_wrap=True)

    def _stop_status(self) -> None:
        if self._status is None:
            return
        self._status.stop()
        self._status = None
