"""
upset — set up a machine from a single YAML file.

Installs packages, clones repositories and downloads files by driving
the tools already present on the machine (winget, git, wget).
"""

__version__ = "0.1.0"
