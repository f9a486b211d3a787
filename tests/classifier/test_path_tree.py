"""Unit tests for tree rendering of qualifying paths."""

from pfp.classifier.path_tree import build_path_tree, stream_path_tree


def test_build_path_tree_nests_under_nearest_listed_ancestor():
    roots = build_path_tree(["/repo", "/repo/x/y/z", "/repo/x", "/repo/b"])

    assert len(roots) == 1
    repo = roots[0]
    assert repo.name == "/repo"
    assert sorted(child.name for child in repo.children) == ["b", "x"]
    x = next(child for child in repo.children if child.name == "x")
    assert [child.name for child in x.children] == ["y/z"]
    assert x.children[0].full_path == "/repo/x/y/z"


def test_build_path_tree_keeps_unrelated_roots_in_order():
    roots = build_path_tree(["/work/app", "/home/me/dotfiles", "/work"])
    assert [root.full_path for root in roots] == ["/home/me/dotfiles", "/work"]


def test_build_path_tree_deduplicates():
    roots = build_path_tree(["/repo", "/repo/", "/repo/a", "/repo/a"])
    assert len(roots) == 1
    assert len(roots[0].children) == 1


def test_build_path_tree_empty():
    assert build_path_tree([]) == []


def test_stream_path_tree_renders_lines():
    lines = list(stream_path_tree(["/repo", "/repo/sub", "/repo/x/y", "/repo/x"]))
    assert lines == [
        "/repo",
        "├── sub",
        "└── x",
        "    └── y",
    ]


def test_stream_path_tree_collapses_unlisted_directories():
    lines = list(stream_path_tree(["/repo/sub/deep", "/repo"]))
    assert lines == ["/repo", "└── sub/deep"]
