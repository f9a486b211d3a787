"""Interactive selection through fzf."""

import logging
import subprocess
from typing import Iterable, Sequence, Union

from pfp.exceptions import CommandError, EmptyPickError

logger = logging.getLogger(__name__)

FZF = "fzf"


def execute_fzf_command(args: Sequence[str], input_text: str) -> str:
    """Run fzf with ``input_text`` on stdin and return what it printed.

    fzf draws its interface on the terminal directly, so only stdin and stdout
    are redirected.

    Raises:
        CommandError: If fzf cannot be started.
    """
    try:
        completed = subprocess.run(
            [FZF, *args],
            input=input_text,
            stdout=subprocess.PIPE,
            text=True,
            check=False,
        )
    except OSError as e:
        raise CommandError(FZF, str(e)) from e
    return completed.stdout


def select_from_list(items: Union[str, Iterable[str]], header: str, options: Sequence[str] = ()) -> str:
    """Let the user pick from a list.

    Args:
        items: Newline-joined list, or an iterable of lines.
        header: Header shown above the list.
        options: Extra fzf options (layout, preview command, key bindings).

    Returns:
        The selected line(s) as printed by fzf.

    Raises:
        EmptyPickError: If nothing was selected.
        CommandError: If fzf cannot be started.
    """
    input_text = items if isinstance(items, str) else "\n".join(items)
    result = execute_fzf_command([*options, "--header", header], input_text)
    if not result:
        logger.debug("Empty pick")
        raise EmptyPickError()
    logger.debug("Pick: %s", result)
    return result
