"""Exact name matching rules."""

from typing import Iterable, Optional, Set

from .base_rules import BaseNameRules

WILDCARD = "*"


class ExactNameRules(BaseNameRules):
    """Rules that match entry names by exact string comparison.

    When ``allow_wildcard`` is set, the literal value ``"*"`` in the rule list
    matches every name. This is how a marker list says "any non-empty directory
    is a project".

    Attributes:
        names (Set[str]): The names to match.
        allow_wildcard (bool): Whether ``"*"`` matches everything.

    Example:
        >>> rules = ExactNameRules([".git", "*"], allow_wildcard=True)
        >>> rules.matches("anything")
        True
        >>> rules = ExactNameRules([".git", "*"])
        >>> rules.matches("anything")
        False
        >>> rules.matches("*")
        True
    """

    def __init__(self, names: Optional[Iterable[str]] = None, allow_wildcard: bool = False):
        self.names: Set[str] = set(names or ())
        self.allow_wildcard = allow_wildcard

    def matches(self, name: str) -> bool:
        if self.allow_wildcard and WILDCARD in self.names:
            return True
        return name in self.names

    def has_rules(self) -> bool:
        return bool(self.names)
