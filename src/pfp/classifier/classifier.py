"""Recursive classification of directory trees.

The classifier decides, for a directory and everything below it, which paths
qualify for the project picker. It returns a ``ClassifyResult`` carrying a
"qualifies" flag for the directory itself and the ordered list of qualifying
paths found in its subtree; callers compose results by concatenation.

Two traversal strategies share one entry point and one child filter:

- directory-marker mode: a directory qualifies if one of its children's names
  matches a marker, or if any descendant directory qualifies.
- file-listing mode: every visible file qualifies; a directory qualifies if
  anything below it does.

Qualification always propagates upwards. Whether a directory that qualifies
only through its descendants is also recorded is controlled separately by
``include_intermediate_paths``.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Set

from pfp.log import TRACE
from pfp.rule_set import EffectiveRules
from pfp.types import PathType, TraversalMode

from .dir_entry import DirEntry, read_dir
from .file_identifier import FileIdentifier
from .permission_action import PermissionAction

logger = logging.getLogger(__name__)


@dataclass
class ClassifyResult:
    """Outcome of classifying one directory.

    Attributes:
        yields: Whether the directory qualifies, directly or through a descendant.
        paths: Qualifying paths recorded in the directory's subtree, descendants
            before the directories containing them.
    """

    yields: bool = False
    paths: List[str] = field(default_factory=list)


@dataclass
class _ScanState:
    permission_action: PermissionAction
    branch: Set[FileIdentifier] = field(default_factory=set)


def classify(
    path: PathType,
    rules: EffectiveRules,
    depth: int = 0,
    check_markers: bool = True,
    permission_action: PermissionAction = PermissionAction.IGNORE,
) -> ClassifyResult:
    """Classify the directory at ``path`` and its subtree.

    Args:
        path: Directory to classify.
        rules: Resolved rules for the scan.
        depth: Depth of ``path`` below the scan root. The subtree is explored
            until ``rules.depth`` is reached.
        check_markers: Whether ``path``'s own children are tested against the
            markers. Descendants are always tested.
        permission_action: Whether a directory that cannot be read because of
            missing permissions is skipped or aborts the scan.

    Returns:
        The classification of ``path``.

    Raises:
        DescendError: If an entry name in the subtree is not valid UTF-8.
        PermissionError: If a directory is unreadable and permission_action is RAISE.

    Example:
        >>> import os, tempfile
        >>> from pfp.rule_set import GlobalDefaults, RuleSet, resolve_rules
        >>> with tempfile.TemporaryDirectory() as root:
        ...     os.makedirs(os.path.join(root, "app", ".git"))
        ...     rules = resolve_rules(RuleSet(), GlobalDefaults())
        ...     result = classify(root, rules)
        ...     [os.path.relpath(p, root) for p in result.paths]
        ['app', '.']
    """
    state = _ScanState(permission_action)
    return _classify(os.fspath(path), depth, rules, state, check_markers)


def scan_root(
    root: PathType,
    rules: EffectiveRules,
    permission_action: PermissionAction = PermissionAction.IGNORE,
) -> List[str]:
    """Collect the qualifying paths below a configured root.

    The root is treated as a container of projects: its own children are not
    tested against the markers, but everything below it is. When
    ``include_intermediate_paths`` is set the root itself is listed first so that
    it is always browsable, even when nothing below it qualifies.

    Args:
        root: Root directory, with environment variables already expanded.
        rules: Resolved rules for the include entry the root belongs to.
        permission_action: How unreadable directories are handled.

    Returns:
        Absolute qualifying paths in display order, without duplicates.
    """
    root_path = os.path.abspath(os.fspath(root))
    output = {}
    if rules.include_intermediate_paths:
        output[root_path] = None

    if not os.path.isdir(root_path):
        logger.warning("Root path is not a readable directory: %s", root_path)

    result = classify(root_path, rules, check_markers=False, permission_action=permission_action)
    output.update(dict.fromkeys(result.paths))
    logger.debug("Root %s: %d qualifying paths", root_path, len(output))
    return list(output)


def _classify(
    path: str,
    depth: int,
    rules: EffectiveRules,
    state: _ScanState,
    check_markers: bool = True,
) -> ClassifyResult:
    entries = _read_entries(path, state.permission_action)
    if entries is None:
        return ClassifyResult()

    identity = FileIdentifier.of(path)
    if identity is not None:
        state.branch.add(identity)
    try:
        if rules.mode is TraversalMode.FILE_LISTING:
            return _classify_files(path, depth, rules, state, entries)
        return _classify_markers(path, depth, rules, state, entries, check_markers)
    finally:
        if identity is not None:
            state.branch.discard(identity)


def _classify_markers(
    path: str,
    depth: int,
    rules: EffectiveRules,
    state: _ScanState,
    entries: List[DirEntry],
    check_markers: bool,
) -> ClassifyResult:
    matched = False
    if check_markers:
        marker = next((entry.name for entry in entries if rules.is_marker(entry.name)), None)
        if marker is not None:
            logger.log(TRACE, "match found %s (marker %s)", path, marker)
            matched = True
            if rules.yield_on_marker:
                return ClassifyResult(True, [path])

    if depth >= rules.depth:
        return ClassifyResult(matched, [path] if matched else [])

    result = ClassifyResult(matched)
    for child in _visible_children(entries, rules, state):
        if not child.is_dir:
            continue
        child_result = _classify(child.path, depth + 1, rules, state)
        result.paths.extend(child_result.paths)
        result.yields = result.yields or child_result.yields

    if matched or (result.yields and rules.include_intermediate_paths):
        result.paths.append(path)
    return result


def _classify_files(
    path: str,
    depth: int,
    rules: EffectiveRules,
    state: _ScanState,
    entries: List[DirEntry],
) -> ClassifyResult:
    result = ClassifyResult()
    if depth >= rules.depth:
        return result

    for child in _visible_children(entries, rules, state):
        if child.is_file:
            result.paths.append(child.path)
            result.yields = True
        elif child.is_dir:
            child_result = _classify(child.path, depth + 1, rules, state)
            result.paths.extend(child_result.paths)
            result.yields = result.yields or child_result.yields

    if result.yields and rules.include_intermediate_paths:
        result.paths.append(path)
    return result


def _visible_children(entries: List[DirEntry], rules: EffectiveRules, state: _ScanState) -> Iterator[DirEntry]:
    """Entries that may be traversed or listed: not ignored, not hidden, not a loop."""
    for entry in entries:
        if rules.is_ignored(entry.name):
            continue
        if entry.is_hidden and not rules.traverse_hidden:
            continue
        if entry.is_dir and entry.identity in state.branch:
            logger.log(TRACE, "skipping %s: directory already on the current branch", entry.path)
            continue
        yield entry


def _read_entries(path: str, permission_action: PermissionAction) -> Optional[List[DirEntry]]:
    try:
        return read_dir(path)
    except PermissionError as e:
        if permission_action == PermissionAction.RAISE:
            raise PermissionError(f"Access denied to {path}: {e}")
        logger.log(TRACE, "cannot read %s: %s", path, e)
    except OSError as e:
        logger.log(TRACE, "cannot read %s: %s", path, e)
    return None
