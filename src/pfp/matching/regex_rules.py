"""Name matching rules using regular expressions."""

import re
from typing import Iterable, List, Optional, Pattern

from pfp.exceptions import PatternError

from .base_rules import BaseNameRules


class RegexNameRules(BaseNameRules):
    """Rules that match entry names against a set of regular expressions.

    Each expression is compiled on its own, once, when the rules are built, so
    inline flags, group numbers and group names keep the meaning they have in
    isolation. Expressions are searched, not anchored: ``"lock"`` matches
    ``"Cargo.lock"``. Use ``^`` and ``$`` to anchor.

    Attributes:
        patterns (List[str]): The expressions in the order they were given.

    Example:
        >>> rules = RegexNameRules([r"^build\\.gradle(\\.kts)?$", r"(?i)\\.sln$"])
        >>> rules.matches("build.gradle.kts")
        True
        >>> rules.matches("App.SLN")
        True
        >>> rules.matches("gradle.properties")
        False
        >>> RegexNameRules([]).matches("anything")
        False
    """

    def __init__(self, patterns: Optional[Iterable[str]] = None):
        """Initialize RegexNameRules.

        Args:
            patterns: Regular expressions to match names against.

        Raises:
            PatternError: If any expression fails to compile. The error names
                the expression at fault.
        """
        self.patterns: List[str] = list(patterns or ())
        self._compiled: List[Pattern[str]] = [self._compile(pattern) for pattern in self.patterns]

    @staticmethod
    def _compile(pattern: str) -> Pattern[str]:
        try:
            return re.compile(pattern)
        except re.error as e:
            raise PatternError(pattern, str(e)) from e

    def matches(self, name: str) -> bool:
        return any(compiled.search(name) for compiled in self._compiled)

    def has_rules(self) -> bool:
        return bool(self._compiled)
