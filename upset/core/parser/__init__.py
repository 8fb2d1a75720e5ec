"""Configuration parsers, one per schema version."""

from upset.core.parser.base import ConfigurationParser, UnsupportedToolError
from upset.core.parser.factory import ParserFactory, UnsupportedVersionError
from upset.core.parser.version_100 import Version100Parser

__all__ = [
    "ConfigurationParser",
    "ParserFactory",
    "UnsupportedToolError",
    "UnsupportedVersionError",
    "Version100Parser",
]
