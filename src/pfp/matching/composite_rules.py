"""Composite name rules for combining multiple rule types."""

from typing import List, Sequence

from .base_rules import BaseNameRules


class CompositeNameRules(BaseNameRules):
    """Composite rules that combine exact, regex and glob rules.

    A name matches if ANY of the constituent rules matches it. Constituents
    without any rule are dropped; the rest are evaluated in the order provided
    and evaluation stops at the first match, so cheap exact lookups should come
    before regex and glob rules.

    Attributes:
        rules (List[BaseNameRules]): List of constituent rules.

    Example:
        >>> from pfp.matching.exact_rules import ExactNameRules
        >>> from pfp.matching.regex_rules import RegexNameRules
        >>> composite = CompositeNameRules([ExactNameRules(["node_modules"]), RegexNameRules([r"^\\.?venv"])])
        >>> composite.matches("node_modules")
        True
        >>> composite.matches(".venv")
        True
        >>> composite.matches("app")
        False
    """

    def __init__(self, rules: Sequence[BaseNameRules]):
        """Initialize composite rules.

        Args:
            rules: Sequence of rules to combine.

        Raises:
            ValueError: If the rules sequence is empty.
            TypeError: If any rule doesn't implement BaseNameRules.
        """
        if not rules:
            raise ValueError("At least one name rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseNameRules):
                raise TypeError(f"Rule at index {i} must implement BaseNameRules, got {type(rule)}")

        self.rules: List[BaseNameRules] = [rule for rule in rules if rule.has_rules()]

    def matches(self, name: str) -> bool:
        return any(rule.matches(name) for rule in self.rules)

    def has_rules(self) -> bool:
        return bool(self.rules)
