"""File download commands."""

from upset.adapters.downloads.wget import WgetCommand

__all__ = ["WgetCommand"]
