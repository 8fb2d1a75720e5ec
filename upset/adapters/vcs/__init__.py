"""Version control commands."""

from upset.adapters.vcs.git import GitCommand

__all__ = ["GitCommand"]
