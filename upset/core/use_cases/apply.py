"""
Apply use case — make the machine match a configuration file.

This is the top-level driver: it finds and reads the configuration,
selects the parser for its schema version, and lets the parser
dispatch every entry to its capability handler. Anything that stops
the document from being interpreted is fatal; item failures are not.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from upset.core.capabilities.downloads import FileDownloadFactory
from upset.core.capabilities.packages import PackageManagerFactory
from upset.core.capabilities.version_control import VersionControlSystemFactory
from upset.core.config.loader import ConfigError, find_configuration_file, read_configuration
from upset.core.models.configuration import ConfigurationDocument
from upset.core.models.receipt import RunReport
from upset.core.notifications import NotificationSink
from upset.core.parser.base import UnsupportedToolError
from upset.core.parser.factory import ParserFactory, UnsupportedVersionError

logger = logging.getLogger(__name__)


@dataclass
class ApplyResult:
    """Result of applying a configuration file."""

    config_path: Path | None = None
    document: ConfigurationDocument | None = None
    report: RunReport | None = None
    error: str | None = None

    def to_dict(self) -> dict:
        result: dict = {}
        if self.error:
            result["error"] = self.error
            return result

        result["config_path"] = str(self.config_path) if self.config_path else None
        if self.report:
            result["report"] = self.report.to_dict()
        return result


def build_parser_factory(output: NotificationSink) -> ParserFactory:
    """Wire the three capability factories around one shared sink."""
    return ParserFactory(
        package_managers=PackageManagerFactory(output),
        version_control_systems=VersionControlSystemFactory(output),
        file_downloads=FileDownloadFactory(output),
    )


def apply_configuration(
    output: NotificationSink,
    config_path: Path | None = None,
    strict: bool = False,
    parser_factory: ParserFactory | None = None,
) -> ApplyResult:
    """Read ``config_path`` and process every section it declares.

    Args:
        output: Sink receiving per-item progress.
        config_path: Configuration file. None searches for upset.yml upward.
        strict: Treat entries naming unsupported tools as fatal, before
            anything is processed.
        parser_factory: Optional pre-wired factory (tests inject fakes).

    Returns:
        ApplyResult with the run report, or ``error`` set on a fatal failure.
    """
    result = ApplyResult()

    # ── Load configuration ───────────────────────────────────────
    if config_path is None:
        config_path = find_configuration_file()
    if config_path is None:
        result.error = "No upset.yml found."
        return result
    result.config_path = config_path

    try:
        document = read_configuration(config_path)
    except ConfigError as e:
        result.error = str(e)
        return result
    result.document = document

    # ── Select parser ────────────────────────────────────────────
    if parser_factory is None:
        parser_factory = build_parser_factory(output)

    try:
        parser = parser_factory.select(document)
    except UnsupportedVersionError as e:
        result.error = str(e)
        return result

    if strict:
        unsupported = parser.find_unsupported(document.configuration)
        if unsupported:
            result.error = str(UnsupportedToolError(unsupported))
            return result

    # ── Process ──────────────────────────────────────────────────
    report = parser.parse(document.configuration)
    result.report = report

    logger.info(
        "Applied %s: %d/%d items succeeded, %d entries skipped",
        config_path,
        report.succeeded,
        report.total,
        len(report.skipped),
    )
    return result
