"""
Parser base — interprets one schema version of the configuration body.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from upset.core.models.configuration import ConfigurationBody
from upset.core.models.receipt import RunReport, SkippedEntry


class UnsupportedToolError(Exception):
    """Raised in strict mode when entries name tools no handler supports."""

    def __init__(self, entries: list[SkippedEntry]):
        names = ", ".join(f"{e.section}: {e.tool!r}" for e in entries)
        super().__init__(f"Unsupported tools in configuration ({names})")
        self.entries = entries


class ConfigurationParser(ABC):
    """Walks a configuration body and dispatches every entry to a handler."""

    @abstractmethod
    def parse(self, configuration: ConfigurationBody) -> RunReport:
        """Process every section of ``configuration``.

        Item failures are reported through the notification sink and the
        returned report; they never raise.
        """

    @abstractmethod
    def find_unsupported(self, configuration: ConfigurationBody) -> list[SkippedEntry]:
        """Entries whose tool name no factory recognizes, without running anything."""
