"""Directory tree classification for the project picker.

This package walks configured root directories and decides which paths qualify
for the picker, either because they contain a marker (directory-marker mode)
or because they are files (file-listing mode).
"""

from .classifier import ClassifyResult, classify, scan_root
from .permission_action import PermissionAction

__all__ = ["ClassifyResult", "PermissionAction", "classify", "scan_root"]
