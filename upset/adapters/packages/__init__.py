"""Package manager commands."""

from upset.adapters.packages.winget import WingetCommand

__all__ = ["WingetCommand"]
