"""
Notification sink — where handlers report per-item progress.

Every item produces exactly one ``loading`` call followed by exactly
one of ``succeed`` or ``warn``. Terminal renderings live in
``upset.ui.terminal``; the core only knows this interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class NotificationSink(ABC):
    """Receives progress events for the items being processed."""

    @abstractmethod
    def loading(self, message: str) -> None:
        """An item has started processing."""

    @abstractmethod
    def succeed(self, message: str) -> None:
        """The current item finished successfully."""

    @abstractmethod
    def warn(self, message: str) -> None:
        """The current item failed; processing continues."""


class NullNotificationSink(NotificationSink):
    """Discards every event (JSON output, validation-only runs)."""

    def loading(self, message: str) -> None:
        pass

    def succeed(self, message: str) -> None:
        pass

    def warn(self, message: str) -> None:
        pass
