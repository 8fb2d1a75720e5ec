"""
Parser for version 1.0 of the configuration format.

Sections are processed in a fixed order: packages, then version
control, then downloads. Within a section, list order is processing
order. An entry naming an unsupported tool is skipped without any
notification.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from upset.core.capabilities.base import CapabilityFactory
from upset.core.models.configuration import ConfigurationBody
from upset.core.models.receipt import RunReport, SkippedEntry
from upset.core.parser.base import ConfigurationParser

logger = logging.getLogger(__name__)


class _Entry(Protocol):
    @property
    def tool(self) -> str: ...

    @property
    def target(self) -> str: ...

    @property
    def items(self) -> Sequence[str]: ...


class Version100Parser(ConfigurationParser):
    """Dispatches the packages, version_control and downloads sections."""

    version = 1.0

    def __init__(
        self,
        package_managers: CapabilityFactory,
        version_control_systems: CapabilityFactory,
        file_downloads: CapabilityFactory,
    ):
        self._package_managers = package_managers
        self._version_control_systems = version_control_systems
        self._file_downloads = file_downloads

    def _sections(
        self, configuration: ConfigurationBody
    ) -> list[tuple[str, Sequence[_Entry] | None, CapabilityFactory]]:
        return [
            ("packages", configuration.packages, self._package_managers),
            ("version_control", configuration.version_control, self._version_control_systems),
            ("downloads", configuration.downloads, self._file_downloads),
        ]

    def parse(self, configuration: ConfigurationBody) -> RunReport:
        report = RunReport(schema_version=self.version)

        for section, entries, factory in self._sections(configuration):
            if entries is None:
                continue
            for entry in entries:
                handler = factory.resolve(entry.tool, entry.target)
                if handler is None:
                    logger.info("Skipping %s entry: unsupported tool %r", section, entry.tool)
                    report.skipped.append(SkippedEntry(section=section, tool=entry.tool))
                    continue
                report.batches.append(handler.process(entry.items))

        return report

    def find_unsupported(self, configuration: ConfigurationBody) -> list[SkippedEntry]:
        return [
            SkippedEntry(section=section, tool=entry.tool)
            for section, entries, factory in self._sections(configuration)
            for entry in entries or ()
            if not factory.supports(entry.tool)
        ]
