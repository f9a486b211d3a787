"""Rule sets and the merge step that resolves them for a scan.

A ``RuleSet`` is built from one include entry of the configuration. Before a
scan starts, ``resolve_rules`` chains in the configuration-level
``GlobalDefaults`` according to the entry's chaining flags and compiles the
resulting marker and ignore lists into matchers, producing an
``EffectiveRules`` value. The classifier only ever sees ``EffectiveRules``.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Tuple

from pfp.matching import CompositeNameRules, ExactNameRules, GlobNameRules, RegexNameRules
from pfp.types import TraversalMode

# one recursion frame per level, well below Python's default recursion limit
MAX_DEPTH = 255
DEFAULT_DEPTH = MAX_DEPTH

DEFAULT_MARKERS: Tuple[str, ...] = (".git", "Cargo.toml")

DEFAULT_IGNORE: Tuple[str, ...] = (
    "node_modules",
    "venv",
    "bin",
    "target",
    "debug",
    "src",
    "test",
    "tests",
    "lib",
    "docs",
    "pkg",
)


@dataclass(frozen=True)
class NameRules:
    """Marker or ignore lists as configured.

    Attributes:
        exact: Names compared literally.
        pattern: Regular expressions searched in the name.
        glob: Gitignore-style wildmatch patterns.
    """

    exact: FrozenSet[str] = frozenset()
    pattern: Tuple[str, ...] = ()
    glob: Tuple[str, ...] = ()

    @classmethod
    def of(cls, exact: Iterable[str] = (), pattern: Iterable[str] = (), glob: Iterable[str] = ()) -> "NameRules":
        return cls(frozenset(exact), tuple(pattern), tuple(glob))

    def chain(self, other: "NameRules") -> "NameRules":
        """Union of two rule lists; this list's patterns come first."""
        return NameRules(
            self.exact | other.exact,
            _ordered_union(self.pattern, other.pattern),
            _ordered_union(self.glob, other.glob),
        )


def _ordered_union(first: Tuple[str, ...], second: Tuple[str, ...]) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(first + second))


@dataclass(frozen=True)
class GlobalDefaults:
    """Configuration-level values that include entries may chain in."""

    markers: NameRules = field(default_factory=lambda: NameRules.of(DEFAULT_MARKERS))
    ignore: NameRules = field(default_factory=lambda: NameRules.of(DEFAULT_IGNORE))
    traverse_hidden: bool = False
    yield_on_marker: bool = True
    chain_root_markers: bool = True
    chain_root_ignore: bool = True


@dataclass(frozen=True)
class RuleSet:
    """Scan rules for one include entry of the configuration.

    Attributes:
        paths: Root paths to scan, before environment expansion.
        mode: Traversal strategy.
        markers: Entry-level markers.
        ignore: Entry-level ignore list.
        depth: Maximum number of directory levels below a root to visit.
        include_intermediate_paths: Record directories that only qualify through
            a qualifying descendant.
        yield_on_marker: Stop descending into a directory once it matches a marker.
        chain_root_markers: Add the global markers to the entry markers.
        chain_root_ignore: Add the global ignore list to the entry ignore list.
        traverse_hidden: Descend into names starting with a dot.
    """

    paths: Tuple[str, ...] = ()
    mode: TraversalMode = TraversalMode.DIRECTORY_MARKER
    markers: NameRules = NameRules()
    ignore: NameRules = NameRules()
    depth: int = DEFAULT_DEPTH
    include_intermediate_paths: bool = True
    yield_on_marker: bool = True
    chain_root_markers: bool = True
    chain_root_ignore: bool = True
    traverse_hidden: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.depth <= MAX_DEPTH:
            raise ValueError(f"depth must be between 0 and {MAX_DEPTH}, got {self.depth}")


@dataclass(frozen=True)
class EffectiveRules:
    """A rule set with global defaults merged in and patterns compiled.

    Instances are produced by ``resolve_rules`` and are what the classifier
    consumes. Matchers are compiled once here, not once per directory.
    """

    mode: TraversalMode
    markers: CompositeNameRules
    ignore: CompositeNameRules
    depth: int
    include_intermediate_paths: bool
    yield_on_marker: bool
    traverse_hidden: bool

    def is_marker(self, name: str) -> bool:
        return self.markers.matches(name)

    def is_ignored(self, name: str) -> bool:
        return self.ignore.matches(name)


def merge_name_rules(entry: NameRules, defaults: NameRules, chain: bool) -> NameRules:
    """Chain the default list into the entry list when ``chain`` is set.

    Example:
        >>> entry = NameRules.of(["go.mod"])
        >>> sorted(merge_name_rules(entry, NameRules.of([".git"]), True).exact)
        ['.git', 'go.mod']
        >>> sorted(merge_name_rules(entry, NameRules.of([".git"]), False).exact)
        ['go.mod']
    """
    return entry.chain(defaults) if chain else entry


def compile_name_rules(rules: NameRules, allow_wildcard: bool = False) -> CompositeNameRules:
    """Compile configured lists into a single matcher.

    Raises:
        PatternError: If any regular expression or glob is malformed.
    """
    return CompositeNameRules(
        [
            ExactNameRules(rules.exact, allow_wildcard=allow_wildcard),
            RegexNameRules(rules.pattern),
            GlobNameRules(rules.glob),
        ]
    )


def validate_defaults(defaults: GlobalDefaults) -> None:
    """Compile the global marker and ignore lists on their own.

    Entries that do not chain the global lists never compile them, so this runs
    once per configuration to report a malformed global pattern regardless.

    Raises:
        PatternError: If any global pattern fails to compile.
    """
    compile_name_rules(defaults.markers, allow_wildcard=True)
    compile_name_rules(defaults.ignore)


def resolve_rules(rule_set: RuleSet, defaults: GlobalDefaults) -> EffectiveRules:
    """Produce the effective rules for one include entry.

    Effective markers are the entry markers plus, when ``chain_root_markers`` is
    set, the global markers; the ignore list is merged the same way under
    ``chain_root_ignore``. Only markers honour the ``"*"`` wildcard.

    Raises:
        PatternError: If any pattern fails to compile. This happens before any
            directory is read.
    """
    markers = merge_name_rules(rule_set.markers, defaults.markers, rule_set.chain_root_markers)
    ignore = merge_name_rules(rule_set.ignore, defaults.ignore, rule_set.chain_root_ignore)
    return EffectiveRules(
        mode=rule_set.mode,
        markers=compile_name_rules(markers, allow_wildcard=True),
        ignore=compile_name_rules(ignore),
        depth=rule_set.depth,
        include_intermediate_paths=rule_set.include_intermediate_paths,
        yield_on_marker=rule_set.yield_on_marker,
        traverse_hidden=rule_set.traverse_hidden,
    )
