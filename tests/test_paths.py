"""Unit tests for path expansion and display names."""

import pytest

from pfp.exceptions import EnvVarError
from pfp.paths import expand, pane_name, session_name


@pytest.fixture
def env(monkeypatch):
    monkeypatch.setenv("HOME", "/home/me")
    monkeypatch.setenv("PROJECTS", "/srv/projects")
    monkeypatch.delenv("PFP_TEST_UNSET", raising=False)


@pytest.mark.parametrize(
    "path,expected",
    [
        ("$HOME/work", "/home/me/work"),
        ("${HOME}/work", "/home/me/work"),
        ("${PROJECTS}${HOME}", "/srv/projects/home/me"),
        ("$PROJECTS/a-$HOME", "/srv/projects/a-/home/me"),
        ("~/notes", "/home/me/notes"),
        ("/no/variables", "/no/variables"),
        ("/tmp/${}", "/tmp/"),
        ("/price$", "/price$"),
        ("/tmp/$1", "/tmp/$1"),
    ],
)
def test_expand(env, path, expected):
    assert expand(path) == expected


@pytest.mark.parametrize("path", ["$PFP_TEST_UNSET/x", "/a/${PFP_TEST_UNSET}"])
def test_expand_unset_variable(env, path):
    with pytest.raises(EnvVarError) as excinfo:
        expand(path)
    assert excinfo.value.name == "PFP_TEST_UNSET"


@pytest.mark.parametrize(
    "path,expected",
    [
        ("/Users/alice/projects/my-app", "proj/my-app"),
        ("/Users/alice/projects/my-app/", "proj/my-app"),
        ("/home/me/src/tool", "src/tool"),
        ("/home/me/.config/nvim", ".con/nvim"),
        ("/opt/app", "opt/app"),
        ("/opt", "/opt"),
        ("relative", "relative"),
    ],
)
def test_pane_name(path, expected):
    assert pane_name(path) == expected


@pytest.mark.parametrize(
    "pane,expected",
    [
        ("proj/my-app", "proj/my-app"),
        ("dotf/.config", "dotf/config"),
        ("work/site.example.com", "work/siteexamplecom"),
    ],
)
def test_session_name(pane, expected):
    assert session_name(pane) == expected
