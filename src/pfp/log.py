"""Logging setup for pfp.

Modules log through ``logging.getLogger(__name__)``. This module registers the
extra ``TRACE`` level used for per-directory traversal messages and configures
the stderr handler for the command-line interface.
"""

import logging
import os
from typing import Optional, Union

TRACE = 5
LOG_ENV_VAR = "PFP_LOG"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

logging.addLevelName(TRACE, "TRACE")


def level_from_verbosity(verbosity: int) -> int:
    """Map a repeated -v count to a logging level.

    Args:
        verbosity: Number of times -v was given.

    Returns:
        WARNING for 0, INFO for 1, DEBUG for 2 and TRACE for 3 or more.
    """
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    if verbosity == 2:
        return logging.DEBUG
    return TRACE


def parse_level(name: str) -> int:
    """Convert a level name such as ``debug`` or ``trace`` to its numeric value.

    Raises:
        ValueError: If the name is not a known logging level.
    """
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name}")
    return level


def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    """Configure the root logger to write to stderr.

    An explicit level wins; otherwise the ``PFP_LOG`` environment variable is
    consulted, falling back to WARNING.
    """
    if level is None:
        env_level = os.environ.get(LOG_ENV_VAR)
        level = parse_level(env_level) if env_level else logging.WARNING
    elif isinstance(level, str):
        level = parse_level(level)

    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
