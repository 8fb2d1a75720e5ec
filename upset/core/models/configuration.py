"""
Configuration models — the typed tree of an upset configuration file.

Loaded from YAML by ``upset.core.config.loader``. Keys follow the
snake_case file format (``package_manager``, ``version_control``,
``destination_folder``); camelCase spellings are accepted as aliases.

The document is frozen once validated: parsers read it, never mutate it.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

_FROZEN = ConfigDict(frozen=True, populate_by_name=True)


class PackageEntry(BaseModel):
    """Applications to install with one package manager from one source."""

    model_config = _FROZEN

    package_manager: str = Field(
        validation_alias=AliasChoices("package_manager", "packageManager"),
    )
    source: str
    applications: tuple[str, ...] = ()

    @property
    def tool(self) -> str:
        return self.package_manager

    @property
    def target(self) -> str:
        return self.source

    @property
    def items(self) -> tuple[str, ...]:
        return self.applications


class RepositoryEntry(BaseModel):
    """Repositories to fetch with one version control system."""

    model_config = _FROZEN

    vcs: str
    destination_folder: str = Field(
        validation_alias=AliasChoices("destination_folder", "destinationFolder"),
    )
    repositories: tuple[str, ...] = ()

    @property
    def tool(self) -> str:
        return self.vcs

    @property
    def target(self) -> str:
        return self.destination_folder

    @property
    def items(self) -> tuple[str, ...]:
        return self.repositories


class DownloadEntry(BaseModel):
    """Remote files to fetch with one download manager."""

    model_config = _FROZEN

    download_manager: str = Field(
        validation_alias=AliasChoices("download_manager", "downloadManager"),
    )
    destination_folder: str = Field(
        validation_alias=AliasChoices("destination_folder", "destinationFolder"),
    )
    files: tuple[str, ...] = ()

    @property
    def tool(self) -> str:
        return self.download_manager

    @property
    def target(self) -> str:
        return self.destination_folder

    @property
    def items(self) -> tuple[str, ...]:
        return self.files


class ConfigurationBody(BaseModel):
    """The three capability sections. A missing section means "nothing to do"."""

    model_config = _FROZEN

    packages: tuple[PackageEntry, ...] | None = None
    version_control: tuple[RepositoryEntry, ...] | None = Field(
        default=None,
        validation_alias=AliasChoices("version_control", "versionControl"),
    )
    downloads: tuple[DownloadEntry, ...] | None = None

    @property
    def is_empty(self) -> bool:
        return not (self.packages or self.version_control or self.downloads)


class ConfigurationDocument(BaseModel):
    """Root of a configuration file: a schema version plus the body."""

    model_config = _FROZEN

    version: float = Field(validation_alias=AliasChoices("version", "schemaVersion"))
    configuration: ConfigurationBody = Field(default_factory=ConfigurationBody)

    @field_validator("version", mode="before")
    @classmethod
    def _numeric_version(cls, value: Any) -> Any:
        # YAML `true` would otherwise coerce to 1.0
        if isinstance(value, bool):
            raise ValueError("version must be a number")
        return value

    @field_validator("configuration", mode="before")
    @classmethod
    def _empty_configuration(cls, value: Any) -> Any:
        # ``configuration:`` with nothing under it loads as None
        return {} if value is None else value
