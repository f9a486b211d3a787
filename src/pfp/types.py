from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class TraversalMode(str, Enum):
    """Traversal strategy used by the classifier for one include entry.

    Attributes:
        DIRECTORY_MARKER: A directory qualifies when one of its children matches a marker.
        FILE_LISTING: Every non-ignored file qualifies; markers are not consulted.
    """

    DIRECTORY_MARKER = "directoryMarker"
    FILE_LISTING = "fileListing"


class EntryType(Enum):
    """Resolved type of a directory entry after following symlinks.

    Attributes:
        FILE: Regular file, or a symlink to one
        DIRECTORY: Directory, or a symlink to one
        OTHER: Anything else, including broken, cyclic or unreadable symlinks
    """

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"
