"""
Config check use case — validate an upset file without running anything.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from upset.core.config.loader import ConfigError, find_configuration_file, read_configuration
from upset.core.models.configuration import ConfigurationDocument
from upset.core.notifications import NullNotificationSink
from upset.core.parser.factory import UnsupportedVersionError
from upset.core.use_cases.apply import build_parser_factory


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    document: ConfigurationDocument | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        body = self.document.configuration if self.document else None
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "version": self.document.version if self.document else None,
            "packages": len(body.packages or ()) if body else 0,
            "version_control": len(body.version_control or ()) if body else 0,
            "downloads": len(body.downloads or ()) if body else 0,
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate configuration and report issues.

    Unsupported schema versions are errors. Entries naming a tool that
    no handler supports are warnings: ``apply`` skips them.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_configuration_file()
    if config_path is None:
        result.errors.append("No upset.yml found.")
        return result
    result.config_path = config_path

    try:
        document = read_configuration(config_path)
    except ConfigError as e:
        result.errors.append(str(e))
        return result
    result.document = document

    try:
        parser = build_parser_factory(NullNotificationSink()).select(document)
    except UnsupportedVersionError as e:
        result.errors.append(str(e))
        return result

    body = document.configuration
    if body.is_empty:
        result.warnings.append("Configuration is empty. Nothing will be done.")

    for skipped in parser.find_unsupported(body):
        result.warnings.append(
            f"Unsupported tool '{skipped.tool}' in {skipped.section}; entry will be skipped."
        )

    for section, entries in (
        ("packages", body.packages),
        ("version_control", body.version_control),
        ("downloads", body.downloads),
    ):
        for entry in entries or ():
            if not entry.items:
                result.warnings.append(f"{section} entry for '{entry.tool}' lists no items.")

    result.valid = len(result.errors) == 0
    return result
