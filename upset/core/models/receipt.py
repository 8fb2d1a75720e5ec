"""
Receipt and report models — the outcome of processing configuration items.

A Receipt records one invocation (one application, one repository or
one file). Receipts are grouped into a BatchReport per configuration
entry, and batches into a RunReport per parse. Reports are purely
informational: item failures are already reported to the user as
warnings and never escalate into errors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, Field


def now_iso() -> str:
    """Current UTC time as ISO string."""
    return datetime.now(UTC).isoformat()


class Receipt(BaseModel):
    """Result of running a tool for a single item."""

    capability: str
    tool: str
    item: str
    arguments: list[str] = Field(default_factory=list)
    status: Literal["ok", "failed"] = "ok"

    started_at: str = Field(default_factory=now_iso)
    ended_at: str = Field(default_factory=now_iso)
    duration_ms: int = 0

    error: str | None = None

    @property
    def ok(self) -> bool:
        """Whether the item was processed successfully."""
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        return self.status == "failed"

    @classmethod
    def success(cls, capability: str, tool: str, item: str, **kwargs: Any) -> Receipt:
        """Create a success receipt."""
        return cls(capability=capability, tool=tool, item=item, status="ok", **kwargs)

    @classmethod
    def failure(
        cls,
        capability: str,
        tool: str,
        item: str,
        error: str,
        **kwargs: Any,
    ) -> Receipt:
        """Create a failure receipt."""
        return cls(
            capability=capability,
            tool=tool,
            item=item,
            status="failed",
            error=error,
            **kwargs,
        )


@dataclass
class BatchReport:
    """Receipts for every item of one configuration entry."""

    capability: str = ""
    tool: str = ""
    target: str = ""
    receipts: list[Receipt] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.receipts)

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.receipts if r.ok)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.receipts if r.failed)

    @property
    def status(self) -> str:
        if self.failed == 0:
            return "ok"
        if self.succeeded > 0:
            return "partial"
        return "failed"

    def to_dict(self) -> dict:
        return {
            "capability": self.capability,
            "tool": self.tool,
            "target": self.target,
            "status": self.status,
            "total": self.total,
            "succeeded": self.succeeded,
            "failed": self.failed,
            "receipts": [r.model_dump(mode="json") for r in self.receipts],
        }


@dataclass(frozen=True)
class SkippedEntry:
    """A configuration entry whose tool has no handler."""

    section: str
    tool: str


@dataclass
class RunReport:
    """Everything one parse did, in processing order."""

    schema_version: float = 0.0
    batches: list[BatchReport] = field(default_factory=list)
    skipped: list[SkippedEntry] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(b.total for b in self.batches)

    @property
    def succeeded(self) -> int:
        return sum(b.succeeded for b in self.batches)

    @property
    def failed(self) -> int:
        return sum(b.failed for b in self.batches)

    def to_dict(self) -> dict:
        return {
            "schema_version": self.schema_version,
            "total": self.total,
            "succeeded": self.succeeded,
            "failed": self.failed,
            "batches": [b.to_dict() for b in self.batches],
            "skipped": [{"section": s.section, "tool": s.tool} for s in self.skipped],
        }
