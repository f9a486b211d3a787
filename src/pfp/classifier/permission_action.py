"""Permission action enum for handling unreadable directories during classification."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action to take when a directory cannot be read because access is denied.

    Values:
        IGNORE: Treat the directory as empty and keep scanning (default behavior)
        RAISE: Raise the PermissionError, aborting the scan
    """

    IGNORE = "ignore"
    RAISE = "raise"
