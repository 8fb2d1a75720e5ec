"""Process-spawning command implementation."""

from upset.adapters.shell.command import ShellCommand

__all__ = ["ShellCommand"]
