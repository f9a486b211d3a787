"""Identity of a directory by device and inode, used to detect symlink cycles."""

import os
from typing import Any, Optional

from pfp.types import PathType


class FileIdentifier:
    """Uniquely identifies a directory by its device and inode numbers.

    The classifier keeps the identifiers of the directories on the branch it is
    currently descending. A child whose identifier is already on the branch is a
    symlink (or bind mount) back to an ancestor and is not entered again.

    Attributes:
        device_id (int): The device ID from stat information.
        inode_number (int): The inode number from stat information.
    """

    def __init__(self, device_id: int, inode_number: int):
        self.device_id = device_id
        self.inode_number = inode_number

    @classmethod
    def from_stat(cls, stat_result: os.stat_result) -> "FileIdentifier":
        return cls(stat_result.st_dev, stat_result.st_ino)

    @classmethod
    def of(cls, path: PathType) -> Optional["FileIdentifier"]:
        """Identify the directory at ``path``, following symlinks.

        Returns:
            The identifier, or None if the path cannot be stat'ed.
        """
        try:
            return cls.from_stat(os.stat(path))
        except OSError:
            return None

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FileIdentifier):
            return False
        return self.device_id == other.device_id and self.inode_number == other.inode_number

    def __hash__(self) -> int:
        return hash((self.device_id, self.inode_number))

    def __repr__(self) -> str:
        return f"FileIdentifier(device_id={self.device_id}, inode_number={self.inode_number})"
