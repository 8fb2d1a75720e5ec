"""
Logging configuration — one setup call for the whole process.

The CLI group calls ``setup_logging`` before any command runs. Every
module logs through ``logging.getLogger(__name__)`` and inherits it.

Console level precedence:
    --debug / --verbose / --quiet  >  UPSET_LOG_LEVEL  >  WARNING

A log file is written when UPSET_LOG_FILE is set; its level comes from
UPSET_LOG_FILE_LEVEL and defaults to the console level.

Console logs go to stderr so they never interleave with the progress
lines written to stdout.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

ENV_LOG_LEVEL = "UPSET_LOG_LEVEL"
ENV_LOG_FILE = "UPSET_LOG_FILE"
ENV_LOG_FILE_LEVEL = "UPSET_LOG_FILE_LEVEL"

# ── Format strings ──────────────────────────────────────────────

# WARNING and above: the message is enough
_FMT_MINIMAL = "%(levelname)s: %(message)s"

# INFO: which module said it, and when
_FMT_VERBOSE = "%(asctime)s [%(name)s] %(message)s"

# DEBUG and the log file: full location
_FMT_DEBUG = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"

_DATEFMT_CONSOLE = "%H:%M:%S"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"


class _StderrHandler(logging.StreamHandler):
    """Writes to whatever ``sys.stderr`` is when a record is emitted.

    The spinner output swaps ``sys.stderr`` while it animates so that log
    lines are printed above the spinner instead of through it.
    """

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def level_from_flags(
    *,
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Pick the console level name from CLI flags, falling back to the env."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    env = os.environ if environ is None else environ
    return env.get(ENV_LOG_LEVEL, "WARNING")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Configure the root logger.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Unknown names fall back to WARNING.
        log_file: Optional path of a log file to append to.
        log_file_level: Level for the file; defaults to ``level``.
    """
    console_level = _parse_level(level)

    if console_level <= logging.DEBUG:
        fmt = _FMT_DEBUG
    elif console_level <= logging.INFO:
        fmt = _FMT_VERBOSE
    else:
        fmt = _FMT_MINIMAL

    console = _StderrHandler()
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=_DATEFMT_CONSOLE))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)

    effective_level = console_level

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        effective_level = min(effective_level, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_DEBUG, datefmt=_DATEFMT_FILE))
        root.addHandler(fh)

    root.setLevel(effective_level)


def setup_logging_from_env(level: str, environ: Mapping[str, str] | None = None) -> None:
    """``setup_logging`` with the file settings taken from the environment."""
    env = os.environ if environ is None else environ
    setup_logging(
        level=level,
        log_file=env.get(ENV_LOG_FILE),
        log_file_level=env.get(ENV_LOG_FILE_LEVEL),
    )


def _parse_level(level: str | None) -> int:
    """Convert a level name string to its numeric constant."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
