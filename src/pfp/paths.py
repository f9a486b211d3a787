"""Path expansion and display names derived from paths."""

import os
import re

from pfp.exceptions import EnvVarError

_ENV_VAR = re.compile(r"\$(?:\{([^}/]*)\}|([A-Za-z_][A-Za-z0-9_]*))")
_LAST_TWO_SEGMENTS = re.compile(r"/(?P<first>[^/]+)/(?P<second>[^/]+)$")


def expand(path: str) -> str:
    """Replace ``$NAME`` and ``${NAME}`` references with environment values.

    A leading ``~`` is expanded to the home directory as well. An empty ``${}``
    is removed.

    Args:
        path: Path as written in the configuration or on the command line.

    Returns:
        The expanded path.

    Raises:
        EnvVarError: If a referenced variable is not set.

    Example:
        >>> import os
        >>> os.environ["PFP_DOC_ROOT"] = "/srv"
        >>> expand("${PFP_DOC_ROOT}/projects/$PFP_DOC_ROOT")
        '/srv/projects//srv'
        >>> expand("/tmp/${}x")
        '/tmp/x'
    """

    def substitute(match: "re.Match[str]") -> str:
        name = match.group(1) if match.group(1) is not None else match.group(2)
        if not name:
            return ""
        try:
            return os.environ[name]
        except KeyError:
            raise EnvVarError(name) from None

    return os.path.expanduser(_ENV_VAR.sub(substitute, path))


def pane_name(path: str) -> str:
    """Short display name for a path: the last two segments, the first cut to 4 characters.

    Paths with fewer than two segments are returned unchanged.

    Example:
        >>> pane_name("/Users/alice/projects/my-app")
        'proj/my-app'
        >>> pane_name("/Users/alice/projects/my-app/")
        'proj/my-app'
        >>> pane_name("/opt")
        '/opt'
    """
    trimmed = path.rstrip("/") or path
    match = _LAST_TWO_SEGMENTS.search(trimmed)
    if match is None:
        return path
    return f"{match.group('first')[:4]}/{match.group('second')}"


def session_name(pane: str) -> str:
    """Session identifier for a pane name.

    tmux reads dots in target names as window/pane separators, so they are dropped.

    Example:
        >>> session_name("dotf/.config")
        'dotf/config'
    """
    return pane.replace(".", "")
