"""Session control through the tmux command line."""

import logging
import subprocess
from typing import List, Optional, Tuple

from pfp.exceptions import CommandError

logger = logging.getLogger(__name__)

TMUX = "tmux"


class Tmux:
    """Thin wrapper around tmux subcommands.

    Every method runs one tmux invocation. Output is captured unless
    ``inherit_stdin`` is requested, which is needed for commands that attach a
    client to the current terminal.
    """

    def run(self, *args: str, inherit_stdin: bool = False) -> "subprocess.CompletedProcess[str]":
        """Run ``tmux <args>`` and return the completed process.

        Raises:
            CommandError: If tmux cannot be started.
        """
        logger.debug("tmux %s", " ".join(args))
        try:
            return subprocess.run(
                [TMUX, *args],
                stdin=None if inherit_stdin else subprocess.DEVNULL,
                capture_output=not inherit_stdin,
                text=True,
                check=False,
            )
        except OSError as e:
            raise CommandError(TMUX, str(e)) from e

    def _output(self, *args: str) -> str:
        return self.run(*args).stdout.replace("'", "").strip()

    def current_session(self) -> str:
        return self._output("display-message", "-p", "#S")

    def current_window(self) -> str:
        """Current ``session:window`` target."""
        return self._output("display-message", "-p", "#S:#I")

    def list_sessions(self) -> List[str]:
        return [line for line in self._output("list-sessions", "-F", "#S").splitlines() if line]

    def list_session_windows(self) -> List[Tuple[str, str]]:
        """``(session:window, session_id)`` pairs for every session."""
        pairs = []
        for line in self._output("list-sessions", "-F", "#S:#I,#{session_id}").splitlines():
            target, _, session_id = line.partition(",")
            if target:
                pairs.append((target, session_id))
        return pairs

    def new_session(self, name: str, window_name: str, directory: str) -> None:
        self.run("new-session", "-d", "-s", name, "-n", window_name, "-c", directory)

    def new_window(self, window_name: str, directory: str, session: Optional[str] = None) -> None:
        """Open a window in the current session, or detached in ``session``."""
        if session is None:
            self.run("new-window", "-n", window_name, "-c", directory)
        else:
            self.run("new-window", "-d", "-t", f"{session}:", "-n", window_name, "-c", directory)

    def renumber_windows(self, session: str) -> None:
        self.run("move-window", "-r", "-t", session)

    def switch_client(self, target: str) -> None:
        self.run("switch-client", "-t", target)

    def switch_to_last(self) -> None:
        """Switch to the last session, or the previous one if there is no last session."""
        if self.run("switch-client", "-l").returncode != 0:
            self.run("switch-client", "-p")

    def kill_session(self, name: str) -> None:
        self.run("kill-session", "-t", name)

    def attach(self, inherit_stdin: bool = True) -> None:
        self.run("attach", inherit_stdin=inherit_stdin)

    def start_server(self, inherit_stdin: bool = True) -> None:
        self.run(inherit_stdin=inherit_stdin)
