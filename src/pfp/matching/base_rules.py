from abc import ABC, abstractmethod


class BaseNameRules(ABC):
    """
    Abstract base class defining the interface for directory entry name rules.

    Name rules answer a single question: does this entry name match? The same
    interface serves both marker lists (names whose presence makes a directory a
    project root) and ignore lists (names excluded from traversal). Matching is
    always performed on a bare entry name, never on a path.

    Example:
        >>> from pfp.matching.exact_rules import ExactNameRules
        >>> rules = ExactNameRules([".git", "Cargo.toml"])
        >>> rules.matches(".git")
        True
        >>> rules.matches("README.md")
        False
        >>>
        >>> from pfp.matching.regex_rules import RegexNameRules
        >>> rules = RegexNameRules([r"\\.csproj$"])
        >>> rules.matches("App.csproj")
        True
    """

    @abstractmethod
    def matches(self, name: str) -> bool:
        """
        Determine whether an entry name matches any of the rules.

        Args:
            name (str): A single directory entry name (no path separators).

        Returns:
            bool: True if the name matches, False otherwise.

        Example:
            >>> class SuffixRules(BaseNameRules):
            ...     def __init__(self, suffix: str):
            ...         self.suffix = suffix
            ...     def matches(self, name: str) -> bool:
            ...         return name.endswith(self.suffix)
            ...     def has_rules(self) -> bool:
            ...         return bool(self.suffix)
            >>> rules = SuffixRules(".toml")
            >>> rules.matches("pyproject.toml")
            True
            >>> rules.matches("setup.py")
            False
        """
        pass

    @abstractmethod
    def has_rules(self) -> bool:
        """
        Check whether any rules are configured.

        Returns:
            bool: False when the rules can never match a name.
        """
        pass
