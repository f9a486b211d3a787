"""Tree rendering of classifier output."""

import os
from typing import Any, Dict, Iterable, Iterator, List, Optional

from anytree import Node, RenderTree


class PathNode(Node):  # type: ignore
    """Node representing one qualifying path in a rendered tree.

    Extends anytree.Node. The node name is the path relative to the parent node
    (or the full path for a top-level node), so a chain of directories that were
    not recorded collapses into a single label.

    Attributes:
        name (str): Display label.
        full_path (str): The qualifying path.
        parent (Optional[PathNode]): The nearest recorded ancestor.

    Example:
        >>> root = PathNode("/repo", full_path="/repo")
        >>> child = PathNode("sub", parent=root, full_path="/repo/sub")
        >>> child.full_path
        '/repo/sub'
    """

    def __init__(self, name: str, parent: Optional["PathNode"] = None, full_path: str = "", **kwargs: Any) -> None:
        super().__init__(name, parent, **kwargs)
        self.full_path = full_path or name


def build_path_tree(paths: Iterable[str]) -> List[PathNode]:
    """Arrange paths under their nearest listed ancestor.

    Args:
        paths: Absolute paths, in any order.

    Returns:
        The top-level nodes, in order of first appearance.

    Example:
        >>> roots = build_path_tree(["/repo/a/b", "/repo", "/other"])
        >>> [r.name for r in roots]
        ['/repo', '/other']
        >>> [c.name for c in roots[0].children]
        ['a/b']
    """
    unique = list(dict.fromkeys(os.path.normpath(p) for p in paths))
    first_seen = {p: i for i, p in enumerate(unique)}
    # ancestors have fewer components, so they are placed first
    ordered = sorted(unique, key=lambda p: p.rstrip(os.sep).count(os.sep))

    nodes: Dict[str, PathNode] = {}
    roots: List[PathNode] = []
    for path in ordered:
        parent = _nearest_ancestor(path, nodes)
        if parent is None:
            node = PathNode(path, full_path=path)
            roots.append(node)
        else:
            node = PathNode(os.path.relpath(path, parent.full_path), parent=parent, full_path=path)
        nodes[path] = node

    roots.sort(key=lambda n: first_seen[n.full_path])
    return roots


def _nearest_ancestor(path: str, nodes: Dict[str, PathNode]) -> Optional[PathNode]:
    current = os.path.dirname(path)
    while current and current != path:
        if current in nodes:
            return nodes[current]
        path, current = current, os.path.dirname(current)
    return None


def stream_path_tree(paths: Iterable[str]) -> Iterator[str]:
    """Render paths as a tree, one line at a time.

    Example:
        >>> for line in stream_path_tree(["/repo/sub", "/repo"]):
        ...     print(line)
        /repo
        └── sub
    """
    for root in build_path_tree(paths):
        for prefix, _, node in RenderTree(root):
            yield f"{prefix}{node.name}"
