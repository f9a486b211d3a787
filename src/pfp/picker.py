"""Project collection across all configured roots, and the project picker."""

import logging
from typing import Dict, List

from pfp.classifier import PermissionAction, scan_root
from pfp.config import Config
from pfp.paths import expand
from pfp.rule_set import resolve_rules, validate_defaults
from pfp.selector import select_from_list

logger = logging.getLogger(__name__)

PROJECTS_HEADER = "Projects:"
PROJECT_FZF_OPTIONS = (
    "--layout",
    "reverse",
    "--preview",
    "tree -C '{}'",
    "--preview-window",
    "right:nohidden",
)


def collect_paths(config: Config, permission_action: PermissionAction = PermissionAction.IGNORE) -> List[str]:
    """Scan every configured root and merge the results.

    The global lists and the rules of every include entry are compiled before
    the first directory is read, so an invalid pattern fails fast.
    A path reachable from several roots is listed once, where it was first found.

    Raises:
        PatternError: If a marker or ignore pattern is invalid.
        EnvVarError: If a root path references an unset variable.
        DescendError: If an entry name is not valid UTF-8.
    """
    defaults = config.global_defaults()
    validate_defaults(defaults)
    resolved = [(rule_set, resolve_rules(rule_set, defaults)) for rule_set in config.rule_sets()]

    output: Dict[str, None] = {}
    for rule_set, rules in resolved:
        for path in rule_set.paths:
            root = expand(path)
            output.update(dict.fromkeys(scan_root(root, rules, permission_action)))
    logger.debug("Collected %d paths", len(output))
    return list(output)


def pick_project(config: Config, permission_action: PermissionAction = PermissionAction.IGNORE) -> str:
    """Let the user choose a project path.

    Raises:
        EmptyPickError: If the user cancelled the selection.
    """
    paths = collect_paths(config, permission_action)
    return select_from_list(paths, PROJECTS_HEADER, PROJECT_FZF_OPTIONS).rstrip()
