"""
Plain terminal output — one line per event, safe for logs and CI.
"""

from __future__ import annotations

from upset.ui.terminal.base import SUCCESS_MARK, WARNING_MARK, TerminalOutput


class PlainTerminalOutput(TerminalOutput):
    """Writes ``… message`` on loading and a marked line when the item ends."""

    def loading(self, message: str) -> None:
        self._line("…", "cyan", message)

    def succeed(self, message: str) -> None:
        self._line(SUCCESS_MARK, "green", message)

    def warn(self, message: str) -> None:
        self._line(WARNING_MARK, "yellow", message)
