"""Command-line argument parsing for pfp.

This module defines the command-line interface for pfp: the global options
and one subcommand per action.
"""

import argparse
from pathlib import Path

from pfp import __version__

NEW_SESSION = "new-session"
NEW_PANE = "new-pane"
KILL_SESSION = "kill-session"
SESSIONS = "sessions"
START = "start"
LIST = "list"


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with pfp's options and subcommands.
    """
    description = """
    pfp: pick a project directory and open it in tmux.

    Configured root directories are scanned for project markers (e.g., a .git
    directory or a Cargo.toml file). The matching directories are offered in fzf,
    and the chosen one is opened in a new tmux session or window.
    """

    epilog = """
    Examples:
      # Pick a project and open it in a new session
      pfp new-session

      # Pick a project and open it in a new window of the current session
      pfp new-pane

      # Use a different configuration file
      pfp -c ~/dotfiles/pfp.json new-session

      # Print the projects that would be offered, one per line
      pfp list

      # ... or as a tree
      pfp list --tree

      # Feed the list into another tool
      pfp list | fzf --preview 'tree -C {}'

      # Start predefined sessions and attach to them
      pfp start -a

      # Show traversal details on stderr
      pfp -vvv list
      PFP_LOG=trace pfp list
    """

    parser = argparse.ArgumentParser(
        prog="pfp",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"pfp {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "-c",
        "--config",
        metavar="FILE",
        help=(
            "Config file path; environment variables are expanded "
            "(default: $XDG_CONFIG_HOME/pfp/config.json). "
            "A missing default config falls back to scanning $HOME."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity on stderr (-v info, -vv debug, -vvv trace). Overrides PFP_LOG.",
    )
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=["ignore", "fail"],
        default="ignore",
        help="How to handle directories that cannot be read (default: ignore).",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.add_parser(NEW_SESSION, help="Pick a path and create new tmux session")
    subparsers.add_parser(NEW_PANE, help="Pick a path and create new tmux window")
    subparsers.add_parser(KILL_SESSION, help="Kill current session and switch to last/previous session")
    subparsers.add_parser(SESSIONS, help="Show list of active sessions, select one to switch to it")

    start_parser = subparsers.add_parser(START, help="Start tmux sessions from predefined list")
    start_parser.add_argument(
        "-a",
        "--attach",
        action="store_true",
        help="Attach to tmux session after start",
    )

    list_parser = subparsers.add_parser(LIST, help="Print the paths that would be offered for picking")
    list_parser.add_argument(
        "-t",
        "--tree",
        action="store_true",
        help="Render the paths as a tree instead of one per line.",
    )
    list_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )

    return parser
