"""Configuration file discovery and loading."""

from upset.core.config.loader import (
    ConfigError,
    ConfigMalformedError,
    ConfigUnreadableError,
    find_configuration_file,
    read_configuration,
)

__all__ = [
    "ConfigError",
    "ConfigMalformedError",
    "ConfigUnreadableError",
    "find_configuration_file",
    "read_configuration",
]
