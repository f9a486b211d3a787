"""Test configuration and fixtures for pfp."""

from pathlib import Path
from typing import Callable, Iterable

import pytest


def build_tree(root: Path, entries: Iterable[str]) -> Path:
    """Create files and directories below root.

    Entries ending in "/" are directories, everything else is an empty file.
    """
    for entry in entries:
        path = root / entry
        if entry.endswith("/"):
            path.mkdir(parents=True, exist_ok=True)
        else:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch()
    return root


@pytest.fixture
def make_tree(tmp_path) -> Callable[..., Path]:
    """Build a directory tree under tmp_path/<name> and return its root."""

    def _make(entries: Iterable[str], name: str = "repo") -> Path:
        root = tmp_path / name
        root.mkdir(exist_ok=True)
        return build_tree(root, entries)

    return _make
