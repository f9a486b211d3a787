"""Implementations of the pfp subcommands."""

import argparse
import logging
import sys
from typing import List, Tuple

from pfp.classifier import PermissionAction
from pfp.classifier.path_tree import stream_path_tree
from pfp.cli.safe_writer import SafeWriter
from pfp.config import Config
from pfp.paths import expand, pane_name, session_name
from pfp.picker import collect_paths, pick_project
from pfp.selector import select_from_list
from pfp.tmux import Tmux

logger = logging.getLogger(__name__)

SESSIONS_HEADER = "Active sessions:"
START_HEADER = "Start sessions:"


def _permission_action(args: argparse.Namespace) -> PermissionAction:
    return {"ignore": PermissionAction.IGNORE, "fail": PermissionAction.RAISE}[args.permission_action]


def new_session(args: argparse.Namespace, config: Config, tmux: Tmux) -> None:
    """Pick a project, create a detached session for it and switch to it."""
    pick = pick_project(config, _permission_action(args))
    pane = pane_name(pick)
    name = session_name(pane)
    tmux.new_session(name, pane, pick)
    tmux.switch_client(name)


def new_pane(args: argparse.Namespace, config: Config, tmux: Tmux) -> None:
    """Pick a project and open it in a new window of the current session."""
    pick = pick_project(config, _permission_action(args))
    tmux.new_window(pane_name(pick), pick)


def kill_session(args: argparse.Namespace, config: Config, tmux: Tmux) -> None:
    """Kill the current session after moving the client to another one."""
    current = tmux.current_session()
    tmux.switch_to_last()
    tmux.kill_session(current)


def _session_sort_key(pair: Tuple[str, str]) -> Tuple[int, str]:
    session_id = pair[1].lstrip("$")
    return (int(session_id), "") if session_id.isdigit() else (sys.maxsize, session_id)


def sessions(args: argparse.Namespace, config: Config, tmux: Tmux) -> None:
    """Pick an active session, with the cursor starting on the current one, and switch to it."""
    current = tmux.current_window()
    targets: List[str] = [target for target, _ in sorted(tmux.list_session_windows(), key=_session_sort_key)]
    position = targets.index(current) if current in targets else 0

    pick = select_from_list(
        targets,
        SESSIONS_HEADER,
        [
            "--layout",
            "reverse",
            "--preview",
            "tmux capture-pane -ept {}",
            "--preview-window",
            "right:nohidden",
            "--sync",
            "--bind",
            f"load:pos({position + 1})",
        ],
    ).strip()
    if pick:
        tmux.switch_client(pick)


def start(args: argparse.Namespace, config: Config, tmux: Tmux) -> None:
    """Create the predefined sessions the user picks, then attach."""
    if not config.sessions:
        tmux.start_server(inherit_stdin=args.attach)
        return

    existing = set(tmux.list_sessions())
    descriptions = "\n".join(session.describe() for session in config.sessions)
    pick = select_from_list(
        [session.name for session in config.sessions],
        START_HEADER,
        [
            "-m",
            "--layout",
            "reverse",
            "--preview",
            f"echo '{descriptions}'",
            "--preview-window",
            "right:nohidden",
        ],
    )
    picked = {line for line in pick.splitlines() if line}

    for session in config.sessions:
        if session.name not in picked:
            continue
        if session.name in existing:
            print(f"session {session.name} exists")
            continue

        windows = [expand(window) for window in session.windows] or [expand("$HOME")]
        first, rest = windows[0], windows[1:]
        tmux.new_session(session.name, pane_name(first), first)
        for directory in rest:
            tmux.new_window(pane_name(directory), directory, session=session.name)
        tmux.renumber_windows(session.name)
        logger.info("Started session %s with %d windows", session.name, len(windows))

    tmux.attach(inherit_stdin=args.attach)


def list_paths(args: argparse.Namespace, config: Config, tmux: Tmux) -> None:
    """Print the qualifying paths, one per line or as a tree.

    The whole list is computed before anything is written, so a failing scan
    prints nothing.
    """
    paths = collect_paths(config, _permission_action(args))
    lines = list(stream_path_tree(paths)) if args.tree else paths

    output = args.output if args.output else sys.stdout.fileno()
    with SafeWriter(output) as writer:
        try:
            writer.write_lines(lines)
        except BrokenPipeError:
            pass  # SafeWriter will automatically close in the context manager
