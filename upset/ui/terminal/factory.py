"""
Terminal output factory — choose how progress is rendered.
"""

from __future__ import annotations

from enum import Enum
from typing import IO

from upset.ui.terminal.base import TerminalOutput
from upset.ui.terminal.plain import PlainTerminalOutput
from upset.ui.terminal.spinner import SpinnerTerminalOutput


class TerminalOutputType(str, Enum):
    SPINNER = "spinner"
    PLAIN = "plain"


class TerminalOutputFactory:
    """Builds the terminal output for a given rendering style."""

    def get_terminal_output(
        self,
        output_type: TerminalOutputType,
        file: IO[str] | None = None,
    ) -> TerminalOutput:
        if output_type is TerminalOutputType.SPINNER:
            return SpinnerTerminalOutput(file=file)
        if output_type is TerminalOutputType.PLAIN:
            return PlainTerminalOutput(file=file)
        raise ValueError(f"Unknown terminal output type: {output_type!r}")
