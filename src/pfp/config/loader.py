"""Reading the configuration file.

The configuration is JSON with comments: ``//`` line comments, ``/* */``
block comments and trailing commas are accepted and removed before the
document is handed to ``json``.
"""

import json
import logging
import os
from typing import List, Optional

from pydantic import ValidationError

from pfp.exceptions import ConfigError
from pfp.paths import expand

from .models import Config, IncludeEntry

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = "pfp"
CONFIG_FILE_NAME = "config.json"


def default_config_path() -> str:
    """``$XDG_CONFIG_HOME/pfp/config.json``, with ``~/.config`` when the variable is unset."""
    config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.expanduser("~/.config")
    return os.path.join(config_home, CONFIG_DIR_NAME, CONFIG_FILE_NAME)


def default_config() -> Config:
    """Configuration used when no file exists: scan ``$HOME`` with the default rules."""
    return Config(include=[IncludeEntry(paths=["$HOME"])])


def strip_jsonc(text: str) -> str:
    """Remove comments and trailing commas from a JSON-with-comments document.

    String literals are left untouched, including any ``//`` inside them.

    Example:
        >>> strip_jsonc('{"a": "http://x", // note\\n "b": [1, 2,], /* c */}')
        '{"a": "http://x", \\n "b": [1, 2] }'
    """
    out: List[str] = []
    i = 0
    length = len(text)
    pending_comma: Optional[int] = None

    while i < length:
        char = text[i]
        if char == '"':
            end = _string_end(text, i)
            out.append(text[i:end])
            pending_comma = None
            i = end
        elif text.startswith("//", i):
            newline = text.find("\n", i)
            i = length if newline == -1 else newline
        elif text.startswith("/*", i):
            close = text.find("*/", i + 2)
            if close == -1:
                raise ConfigError("Parse config: unterminated block comment")
            i = close + 2
        elif char == ",":
            pending_comma = len(out)
            out.append(char)
            i += 1
        elif char in "}]":
            if pending_comma is not None:
                out[pending_comma] = ""
            pending_comma = None
            out.append(char)
            i += 1
        else:
            if not char.isspace():
                pending_comma = None
            out.append(char)
            i += 1

    return "".join(out)


def _string_end(text: str, start: int) -> int:
    i = start + 1
    while i < len(text):
        if text[i] == "\\":
            i += 2
        elif text[i] == '"':
            return i + 1
        else:
            i += 1
    raise ConfigError("Parse config: unterminated string")


def parse_config(text: str) -> Config:
    """Parse and validate a configuration document.

    Raises:
        ConfigError: If the document is not valid JSON or fails validation.
    """
    try:
        data = json.loads(strip_jsonc(text))
    except json.JSONDecodeError as e:
        raise ConfigError(f"Parse config: {e}") from e

    try:
        return Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config: {e}") from e


def read_config(path: str) -> Config:
    """Read and validate the configuration file at ``path``.

    Raises:
        ConfigError: If the file cannot be read or is invalid.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        raise ConfigError(f"Read config: {e}") from e
    return parse_config(content)


def load_config(path: Optional[str] = None) -> Config:
    """Load the configuration for a command.

    Without an explicit path the default location is used, and a missing file
    there falls back to ``default_config()`` with a notice. An explicit path that
    cannot be read is an error.

    Args:
        path: Path given with -c/--config, possibly containing environment variables.

    Raises:
        ConfigError: If the configuration cannot be read or is invalid.
        EnvVarError: If the path references an unset variable.
    """
    if path is None:
        config_path = default_config_path()
        if not os.path.exists(config_path):
            logger.warning("Config not found at %s, using default config", config_path)
            return default_config()
    else:
        config_path = expand(path)

    config = read_config(config_path)
    logger.debug("Loaded config from %s: %r", config_path, config)
    return config
