"""Command-line interface for pfp.

This module provides the entry point of the ``pfp`` command. It parses the
command line, configures logging, loads the configuration and dispatches to
the subcommand implementations in ``pfp.cli.commands``.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution, or the selection was cancelled
    2: Command-line syntax error
    65: Invalid configuration (EX_DATAERR)
    126: Permission denied (with -P fail)
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Pick a project and open it in a new tmux session
    $ pfp new-session

    # List the projects that would be offered
    $ pfp list --tree
"""

import argparse
import logging
import sys
from typing import Callable, Dict, Optional, Sequence

from pfp.cli import argparser
from pfp.cli.argparser import create_parser
from pfp.cli.commands import kill_session, list_paths, new_pane, new_session, sessions, start
from pfp.cli.signal_handler import setup_signal_handling, signal_handler
from pfp.config import Config, load_config
from pfp.exceptions import ConfigError, EmptyPickError
from pfp.log import configure_logging, level_from_verbosity
from pfp.tmux import Tmux

logger = logging.getLogger(__name__)

EXIT_DATAERR = 65
EXIT_PERMISSION_DENIED = 126

Command = Callable[[argparse.Namespace, Config, Tmux], None]

COMMANDS: Dict[str, Command] = {
    argparser.NEW_SESSION: new_session,
    argparser.NEW_PANE: new_pane,
    argparser.KILL_SESSION: kill_session,
    argparser.SESSIONS: sessions,
    argparser.START: start,
    argparser.LIST: list_paths,
}


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the pfp command-line interface.

    Args:
        argv: Arguments to parse instead of ``sys.argv[1:]``.
    """
    setup_signal_handling()

    parser = create_parser()
    # argparse calls sys.exit(2) for argument errors or sys.exit(0) for --version
    args = parser.parse_args(argv)

    configure_logging(level_from_verbosity(args.verbose) if args.verbose else None)

    if args.command is None:
        parser.print_help()
        return

    try:
        config = load_config(args.config)
        COMMANDS[args.command](args, config, Tmux())
    except EmptyPickError:
        logger.debug("Selection cancelled")
        sys.exit(1)
    except ConfigError as e:
        print(f"Config error: {str(e)}", file=sys.stderr)
        sys.exit(EXIT_DATAERR)
    except PermissionError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(EXIT_PERMISSION_DENIED)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
