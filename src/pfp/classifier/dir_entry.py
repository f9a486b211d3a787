"""Reading directory entries with symlinks resolved to their target type."""

import os
from dataclasses import dataclass
from typing import List, Optional

from pfp.exceptions import DescendError
from pfp.types import EntryType

from .file_identifier import FileIdentifier


@dataclass(frozen=True)
class DirEntry:
    """One entry of a directory listing.

    Attributes:
        name: The entry name.
        path: The entry path, joined onto the directory that was read.
        entry_type: Type after following symlinks.
        identity: Device and inode of the target, for directories only.
    """

    name: str
    path: str
    entry_type: EntryType
    identity: Optional[FileIdentifier] = None

    @property
    def is_dir(self) -> bool:
        return self.entry_type is EntryType.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.entry_type is EntryType.FILE

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")


def resolve_entry_type(entry: "os.DirEntry[str]") -> EntryType:
    """Resolve an entry's type, following symlinks.

    Broken symlinks, symlink cycles and entries whose target cannot be stat'ed
    resolve to OTHER so that callers skip them.
    """
    try:
        if entry.is_dir():
            return EntryType.DIRECTORY
        if entry.is_file():
            return EntryType.FILE
    except OSError:
        pass
    return EntryType.OTHER


def _check_utf8(name: str, directory: str) -> None:
    # os.scandir decodes undecodable bytes as lone surrogates
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        raise DescendError(f"entry is not utf8 string: {name!r} in {directory}")


def read_dir(path: str) -> List[DirEntry]:
    """List a directory, sorted by entry name.

    Args:
        path: Directory to read.

    Returns:
        The directory's entries.

    Raises:
        OSError: If the directory cannot be read.
        DescendError: If an entry name is not valid UTF-8.
    """
    entries = []
    with os.scandir(path) as it:
        for entry in it:
            _check_utf8(entry.name, path)
            entry_type = resolve_entry_type(entry)
            identity = None
            if entry_type is EntryType.DIRECTORY:
                try:
                    identity = FileIdentifier.from_stat(entry.stat())
                except OSError:
                    entry_type = EntryType.OTHER
            entries.append(DirEntry(entry.name, entry.path, entry_type, identity))
    entries.sort(key=lambda e: e.name)
    return entries
