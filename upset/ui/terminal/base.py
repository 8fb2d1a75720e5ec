"""
Terminal output base — notification sinks that render to a terminal.
"""

from __future__ import annotations

from typing import IO

import click

from upset.core.notifications import NotificationSink

SUCCESS_MARK = "✓"
WARNING_MARK = "⚠"


class TerminalOutput(NotificationSink):
    """A notification sink writing to a text stream (stdout by default)."""

    def __init__(self, file: IO[str] | None = None):
        self._file = file

    def _line(self, mark: str, color: str, message: str) -> None:
        click.echo(f"{click.style(mark, fg=color, bold=True)} {message}", file=self._file)
