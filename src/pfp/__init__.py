"""Project picker utilities.

This package scans configured directory trees for project roots and hands the
qualifying paths to a fuzzy selector, then opens the chosen project in a tmux
session or window.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("pfp")
except PackageNotFoundError:
    __version__ = "unknown"
