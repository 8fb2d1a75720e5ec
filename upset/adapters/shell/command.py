"""
Shell command — run one external executable and report its exit status.

This is the only place where tool processes are spawned. The named
tool commands (winget, git, wget) are thin subclasses that fix the
executable name.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
import time
from collections.abc import Sequence

from upset.adapters.base import Command, CommandExecutionError, ToolNotFoundError

logger = logging.getLogger(__name__)


class ShellCommand(Command):
    """Run an executable synchronously and capture its output.

    Presence is detected by actually invoking the executable with no
    arguments. A missing executable is the only outcome treated as
    absent: a nonzero exit or a permission error still means the tool
    exists.
    """

    def __init__(self, executable: str):
        self._executable = executable

    @property
    def name(self) -> str:
        return self._executable

    def is_available(self) -> bool:
        try:
            subprocess.run(
                [self._executable],
                stdin=subprocess.DEVNULL,
                capture_output=True,
            )
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.debug("%s probe failed but the executable exists: %s", self._executable, e)
        return True

    def execute(self, arguments: Sequence[str]) -> bool:
        if not self.is_available():
            raise ToolNotFoundError(self._executable)

        argv = [self._executable, *arguments]
        logger.info("CMD %s", " ".join(shlex.quote(a) for a in argv))
        start = time.monotonic()

        try:
            result = subprocess.run(
                argv,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
            )
        except OSError as e:
            raise CommandExecutionError(
                self._executable, f"Unable to start {self._executable}: {e}"
            ) from e

        elapsed_ms = int((time.monotonic() - start) * 1000)
        if result.stdout:
            logger.debug("STDOUT %s", result.stdout.strip())
        if result.stderr:
            logger.debug("STDERR %s", result.stderr.strip())
        logger.info(
            "%s exited with code %d (%dms)", self._executable, result.returncode, elapsed_ms
        )

        return result.returncode == 0
