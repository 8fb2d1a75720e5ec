"""Capabilities — install packages, fetch repositories, download files."""

from upset.core.capabilities.base import CapabilityFactory, CapabilityHandler
from upset.core.capabilities.downloads import FileDownloadFactory, WgetFileDownload
from upset.core.capabilities.packages import PackageManagerFactory, WingetPackageManager
from upset.core.capabilities.version_control import (
    GitVersionControlSystem,
    VersionControlSystemFactory,
)

__all__ = [
    "CapabilityFactory",
    "CapabilityHandler",
    "FileDownloadFactory",
    "GitVersionControlSystem",
    "PackageManagerFactory",
    "VersionControlSystemFactory",
    "WgetFileDownload",
    "WingetPackageManager",
]
