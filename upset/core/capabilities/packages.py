"""
Package installation — install applications with a package manager.
"""

from __future__ import annotations

from upset.adapters.packages.winget import WingetCommand
from upset.core.capabilities.base import CapabilityFactory, CapabilityHandler, HandlerBuilder
from upset.core.notifications import NotificationSink


class WingetPackageManager(CapabilityHandler):
    """Install applications with winget.

    ``target`` is the winget source the packages come from, usually
    ``msstore`` or ``winget``.
    """

    capability = "packages"
    loading_message = "Installing {item}"
    success_message = "Successfully installed {item}"
    warning_message = "Unable to install {item}"

    @property
    def source(self) -> str:
        return self.target

    def build_arguments(self, item: str) -> list[str]:
        return ["install", item, "-s", self.source, "--disable-interactivity"]


def _winget(source: str, output: NotificationSink) -> CapabilityHandler:
    return WingetPackageManager(WingetCommand(), source, output)


class PackageManagerFactory(CapabilityFactory):
    """Resolves ``package_manager`` names from the packages section."""

    _BUILDERS: dict[str, HandlerBuilder] = {
        "winget": _winget,
    }

    @property
    def builders(self) -> dict[str, HandlerBuilder]:
        return self._BUILDERS
