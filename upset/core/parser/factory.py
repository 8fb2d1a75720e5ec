"""
Parser factory — picks the parser for a document's schema version.

Versions map explicitly to parser constructors. Supporting a new
schema version means adding one entry to ``_PARSERS``; callers keep
calling ``select``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from upset.core.capabilities.base import CapabilityFactory
from upset.core.models.configuration import ConfigurationDocument
from upset.core.parser.base import ConfigurationParser
from upset.core.parser.version_100 import Version100Parser

logger = logging.getLogger(__name__)

ParserConstructor = Callable[
    [CapabilityFactory, CapabilityFactory, CapabilityFactory], ConfigurationParser
]

_PARSERS: dict[float, ParserConstructor] = {
    1.0: Version100Parser,
}


class UnsupportedVersionError(Exception):
    """The document declares a schema version no parser understands."""

    def __init__(self, version: float):
        super().__init__(f"Unsupported specification version: {version}")
        self.version = version


def supported_versions() -> list[float]:
    return sorted(_PARSERS)


class ParserFactory:
    """Builds the parser matching a document's declared schema version."""

    def __init__(
        self,
        package_managers: CapabilityFactory,
        version_control_systems: CapabilityFactory,
        file_downloads: CapabilityFactory,
    ):
        self._package_managers = package_managers
        self._version_control_systems = version_control_systems
        self._file_downloads = file_downloads

    def select(self, document: ConfigurationDocument) -> ConfigurationParser:
        """Return a parser for ``document.version``.

        Raises:
            UnsupportedVersionError: No parser is registered for the version.
        """
        constructor = _PARSERS.get(document.version)
        if constructor is None:
            raise UnsupportedVersionError(document.version)

        logger.debug("Using %s for schema version %s", constructor.__name__, document.version)
        return constructor(
            self._package_managers,
            self._version_control_systems,
            self._file_downloads,
        )
