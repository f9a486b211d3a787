"""Name matching rules using .gitignore pattern syntax."""

from typing import Iterable, List, Optional

from pathspec import GitIgnoreSpec

from pfp.exceptions import PatternError

from .base_rules import BaseNameRules


class GlobNameRules(BaseNameRules):
    """Rules that match entry names using .gitignore wildmatch syntax.

    This class uses the pathspec library to match names the same way Git
    matches them. It supports basic globs (``*``, ``?``, ``[abc]``) and negation
    patterns (starting with ``!``), with later patterns overriding earlier ones.
    Since only bare names are matched, directory-anchored patterns such as
    ``build/`` or ``src/**`` are of little use here.

    Attributes:
        patterns (List[str]): The patterns in the order they were added.
        spec (GitIgnoreSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = GlobNameRules(["*.csproj", "*.egg-info", "!keep.egg-info"])
        >>> rules.matches("App.csproj")
        True
        >>> rules.matches("pfp.egg-info")
        True
        >>> rules.matches("keep.egg-info")
        False
    """

    def __init__(self, patterns: Optional[Iterable[str]] = None):
        """Initialize GlobNameRules.

        Args:
            patterns: Gitignore-style patterns.

        Raises:
            PatternError: If any pattern is malformed.
        """
        self.patterns: List[str] = []
        self.spec = GitIgnoreSpec.from_lines([])
        for pattern in patterns or ():
            self.add_rule(pattern)

    def matches(self, name: str) -> bool:
        return bool(self.patterns) and self.spec.match_file(name)

    def has_rules(self) -> bool:
        return bool(self.patterns)

    def add_rule(self, rule: str) -> None:
        """Add a single gitignore-style pattern.

        Raises:
            PatternError: If the pattern is malformed.

        Example:
            >>> rules = GlobNameRules()
            >>> rules.add_rule("*.pyc")
            >>> rules.matches("mod.pyc")
            True
            >>> rules.add_rule("!mod.pyc")
            >>> rules.matches("mod.pyc")
            False
        """
        candidate = self.patterns + [rule]
        try:
            spec = GitIgnoreSpec.from_lines(candidate)
        except ValueError as e:
            raise PatternError(rule, str(e)) from e
        self.patterns = candidate
        self.spec = spec
