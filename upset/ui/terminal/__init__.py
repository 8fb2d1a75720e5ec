"""Terminal renderings of the notification sink."""

from upset.ui.terminal.base import TerminalOutput
from upset.ui.terminal.factory import TerminalOutputFactory, TerminalOutputType
from upset.ui.terminal.plain import PlainTerminalOutput
from upset.ui.terminal.spinner import SpinnerTerminalOutput

__all__ = [
    "PlainTerminalOutput",
    "SpinnerTerminalOutput",
    "TerminalOutput",
    "TerminalOutputFactory",
    "TerminalOutputType",
]
