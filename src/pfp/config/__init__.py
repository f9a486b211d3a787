"""Configuration loading and validation."""

from .loader import default_config, default_config_path, load_config, parse_config, read_config, strip_jsonc
from .models import Config, IncludeEntry, SessionConfig

__all__ = [
    "Config",
    "IncludeEntry",
    "SessionConfig",
    "default_config",
    "default_config_path",
    "load_config",
    "parse_config",
    "read_config",
    "strip_jsonc",
]
