"""
Capability base — handlers that perform a capability with one tool, and
the factories that resolve tool names to handlers.

A handler processes a list of items one at a time. A failing item is
reported as a warning and never stops the remaining items: one bad
repository URL must not abort the rest of the list.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Sequence

from upset.adapters.base import Command, CommandError
from upset.core.models.receipt import BatchReport, Receipt, now_iso
from upset.core.notifications import NotificationSink

logger = logging.getLogger(__name__)


class CapabilityHandler(ABC):
    """Performs one capability (install, clone, download) with one tool.

    Subclasses define the argument vector for an item and the three
    messages shown while it is processed. ``target`` is the source or
    destination fixed for the whole batch.
    """

    capability: str = ""
    loading_message: str = "{item}"
    success_message: str = "{item}"
    warning_message: str = "{item}"

    def __init__(self, command: Command, target: str, output: NotificationSink):
        self._command = command
        self._target = target
        self._output = output

    @property
    def command(self) -> Command:
        return self._command

    @property
    def target(self) -> str:
        return self._target

    @abstractmethod
    def build_arguments(self, item: str) -> list[str]:
        """Argument vector passed to the command for ``item``."""

    def process(self, items: Iterable[str]) -> BatchReport:
        """Run the command once per item, in order.

        Never raises for item failures; they end up as warnings and as
        failed receipts in the returned report.
        """
        report = BatchReport(
            capability=self.capability,
            tool=self._command.name,
            target=self._target,
        )
        for item in items:
            report.receipts.append(self._process_item(item))

        logger.info(
            "%s via %s: %d/%d succeeded",
            self.capability,
            self._command.name,
            report.succeeded,
            report.total,
        )
        return report

    def _process_item(self, item: str) -> Receipt:
        self._output.loading(self.loading_message.format(item=item))

        arguments = self.build_arguments(item)
        started_at = now_iso()
        start = time.monotonic()
        error: str | None = None
        try:
            ok = self._command.execute(arguments)
            if not ok:
                error = f"{self._command.name} exited with a nonzero status"
        except CommandError as e:
            logger.info("%s failed for %s: %s", e.tool, item, e)
            error = str(e)

        elapsed_ms = int((time.monotonic() - start) * 1000)

        if error is None:
            self._output.succeed(self.success_message.format(item=item))
            return Receipt.success(
                self.capability,
                self._command.name,
                item,
                arguments=arguments,
                duration_ms=elapsed_ms,
                started_at=started_at,
            )

        self._output.warn(self.warning_message.format(item=item))
        return Receipt.failure(
            self.capability,
            self._command.name,
            item,
            error=error,
            arguments=arguments,
            duration_ms=elapsed_ms,
            started_at=started_at,
        )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} tool={self._command.name!r} target={self._target!r}>"


HandlerBuilder = Callable[[str, NotificationSink], CapabilityHandler]


class CapabilityFactory(ABC):
    """Resolves a tool name to a freshly constructed handler.

    Constructed once with the shared notification sink, which is handed
    to every handler it builds. Handlers are never cached: each
    ``resolve`` call returns a new, independent instance.

    Adding a tool means adding one entry to ``builders``.
    """

    def __init__(self, output: NotificationSink):
        self._output = output

    @property
    @abstractmethod
    def builders(self) -> dict[str, HandlerBuilder]:
        """Lowercase tool name → builder taking (target, sink)."""

    @property
    def supported_tools(self) -> Sequence[str]:
        return tuple(self.builders)

    def supports(self, name: str) -> bool:
        return name.lower() in self.builders

    def resolve(self, name: str, target: str) -> CapabilityHandler | None:
        """Build the handler for ``name``, or None when the tool is unsupported."""
        builder = self.builders.get(name.lower())
        if builder is None:
            logger.debug("%s: unsupported tool %r", self.__class__.__name__, name)
            return None
        return builder(target, self._output)
