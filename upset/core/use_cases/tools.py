"""
Tools use case — which supported tools are present on this machine.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from upset.core.capabilities.base import CapabilityFactory
from upset.core.capabilities.downloads import FileDownloadFactory
from upset.core.capabilities.packages import PackageManagerFactory
from upset.core.capabilities.version_control import VersionControlSystemFactory
from upset.core.notifications import NullNotificationSink


@dataclass
class ToolStatus:
    capability: str
    tool: str
    available: bool


@dataclass
class ToolsResult:
    tools: list[ToolStatus] = field(default_factory=list)

    @property
    def missing(self) -> list[str]:
        return [t.tool for t in self.tools if not t.available]

    def to_dict(self) -> dict:
        return {
            "tools": [
                {"capability": t.capability, "tool": t.tool, "available": t.available}
                for t in self.tools
            ],
            "missing": self.missing,
        }


def check_tools(factories: list[CapabilityFactory] | None = None) -> ToolsResult:
    """Probe every tool the factories can resolve."""
    if factories is None:
        sink = NullNotificationSink()
        factories = [
            PackageManagerFactory(sink),
            VersionControlSystemFactory(sink),
            FileDownloadFactory(sink),
        ]

    result = ToolsResult()
    for factory in factories:
        for name in factory.supported_tools:
            handler = factory.resolve(name, "")
            if handler is None:
                continue
            result.tools.append(
                ToolStatus(
                    capability=handler.capability,
                    tool=handler.command.name,
                    available=handler.command.is_available(),
                )
            )
    return result
