"""
Version control — fetch repositories with a version control system.
"""

from __future__ import annotations

from upset.adapters.vcs.git import GitCommand
from upset.core.capabilities.base import CapabilityFactory, CapabilityHandler, HandlerBuilder
from upset.core.notifications import NotificationSink


class GitVersionControlSystem(CapabilityHandler):
    """Clone repositories with git.

    Repositories are cloned relative to the working directory upset runs
    in; ``destination_folder`` is kept for reporting.
    """

    capability = "version_control"
    loading_message = "Cloning {item}"
    success_message = "Successfully cloned {item}"
    warning_message = "Unable to clone {item}"

    @property
    def destination_folder(self) -> str:
        return self.target

    def build_arguments(self, item: str) -> list[str]:
        return ["clone", item]


def _git(destination_folder: str, output: NotificationSink) -> CapabilityHandler:
    return GitVersionControlSystem(GitCommand(), destination_folder, output)


class VersionControlSystemFactory(CapabilityFactory):
    """Resolves ``vcs`` names from the version_control section."""

    _BUILDERS: dict[str, HandlerBuilder] = {
        "git": _git,
    }

    @property
    def builders(self) -> dict[str, HandlerBuilder]:
        return self._BUILDERS
