"""
Configuration loader — reads an upset YAML file into domain models.

This is the primary entry point for loading configuration. It reads
YAML, validates against the Pydantic models, and returns a frozen
ConfigurationDocument. Every failure here is fatal to a run.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from upset.core.models.configuration import ConfigurationDocument

logger = logging.getLogger(__name__)

# Default config filenames, in lookup order
CONFIG_FILE_NAMES = ("upset.yml", "upset.yaml")


class ConfigError(Exception):
    """Raised when the configuration file cannot be used."""


class ConfigUnreadableError(ConfigError):
    """The file is missing or cannot be read."""


class ConfigMalformedError(ConfigError):
    """The file was read but its content is not a valid configuration."""


def find_configuration_file(start_dir: Path | None = None) -> Path | None:
    """Search for upset.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to the configuration file, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        for name in CONFIG_FILE_NAMES:
            candidate = current / name
            if candidate.is_file():
                return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def read_configuration(path: Path | str) -> ConfigurationDocument:
    """Load and validate a configuration file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Validated, immutable ConfigurationDocument.

    Raises:
        ConfigUnreadableError: The file is missing or unreadable.
        ConfigMalformedError: The content is not YAML or not a valid document.
    """
    path = Path(path)

    if not path.is_file():
        raise ConfigUnreadableError(f"Config file not found: {path}")

    logger.debug("Loading configuration from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigUnreadableError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigMalformedError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigMalformedError(
            f"Expected a YAML mapping in {path}, got {type(data).__name__}"
        )

    try:
        document = ConfigurationDocument.model_validate(data)
    except ValidationError as e:
        raise ConfigMalformedError(f"Invalid configuration in {path}: {e}") from e

    body = document.configuration
    logger.info(
        "Loaded configuration v%s (%d package, %d version control, %d download entries)",
        document.version,
        len(body.packages or ()),
        len(body.version_control or ()),
        len(body.downloads or ()),
    )
    return document
