"""
Shared test fixtures and configuration.
"""

import logging
import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

from upset.core.notifications import NotificationSink


class RecordingOutput(NotificationSink):
    """Notification sink that remembers every event in order."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    def loading(self, message: str) -> None:
        self.events.append(("loading", message))

    def succeed(self, message: str) -> None:
        self.events.append(("success", message))

    def warn(self, message: str) -> None:
        self.events.append(("warning", message))

    @property
    def kinds(self) -> list[str]:
        return [kind for kind, _ in self.events]


@pytest.fixture
def output() -> RecordingOutput:
    """A fresh recording notification sink."""
    return RecordingOutput()


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Write YAML content to tmp_path/upset.yml and return the path."""

    def _write(content: str, name: str = "upset.yml") -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """The CLI reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def _plain_terminal(monkeypatch):
    """Keep rich from forcing colors or a terminal because of the caller's env."""
    for name in ("FORCE_COLOR", "TTY_INTERACTIVE", "TTY_COMPATIBLE"):
        monkeypatch.delenv(name, raising=False)
