"""
File downloads — fetch remote files with a download manager.
"""

from __future__ import annotations

from upset.adapters.downloads.wget import WgetCommand
from upset.core.capabilities.base import CapabilityFactory, CapabilityHandler, HandlerBuilder
from upset.core.notifications import NotificationSink


class WgetFileDownload(CapabilityHandler):
    """Download files with wget into ``destination_folder``."""

    capability = "downloads"
    loading_message = "Downloading {item}"
    success_message = "Successfully downloaded {item}"
    warning_message = "Unable to download {item}"

    @property
    def destination_folder(self) -> str:
        return self.target

    def build_arguments(self, item: str) -> list[str]:
        return [item, "-O", self.destination_folder]


def _wget(destination_folder: str, output: NotificationSink) -> CapabilityHandler:
    return WgetFileDownload(WgetCommand(), destination_folder, output)


class FileDownloadFactory(CapabilityFactory):
    """Resolves ``download_manager`` names from the downloads section."""

    _BUILDERS: dict[str, HandlerBuilder] = {
        "wget": _wget,
    }

    @property
    def builders(self) -> dict[str, HandlerBuilder]:
        return self._BUILDERS
