"""Pydantic models for the pfp configuration document.

Keys are camelCase in the document (``includeIntermediatePaths``) and
snake_case in Python. Unknown keys are rejected so that typos surface as
configuration errors instead of being silently ignored.
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from pfp.rule_set import DEFAULT_DEPTH, DEFAULT_IGNORE, DEFAULT_MARKERS, MAX_DEPTH, GlobalDefaults, NameRules, RuleSet
from pfp.types import TraversalMode


class _ConfigModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", alias_generator=to_camel, populate_by_name=True)


class NameRulesConfig(_ConfigModel):
    """Marker or ignore lists of one include entry.

    Attributes:
        exact: Names compared literally. ``"*"`` as a marker matches every name.
        pattern: Regular expressions searched in entry names.
        glob: Gitignore-style wildmatch patterns.
    """

    exact: Tuple[str, ...] = ()
    pattern: Tuple[str, ...] = ()
    glob: Tuple[str, ...] = ()

    def to_name_rules(self) -> NameRules:
        return NameRules.of(self.exact, self.pattern, self.glob)


class RootMarkersConfig(NameRulesConfig):
    """Top-level markers and the defaults that entries inherit."""

    exact: Tuple[str, ...] = DEFAULT_MARKERS
    traverse_hidden: bool = False
    chain_root_markers: bool = True
    yield_on_marker: bool = True


class RootIgnoreConfig(NameRulesConfig):
    """Top-level ignore list."""

    exact: Tuple[str, ...] = DEFAULT_IGNORE
    chain_root_ignore: bool = True


class IncludeEntry(_ConfigModel):
    """One group of root paths scanned with the same rules.

    Optional flags fall back to the top-level value when absent.
    """

    paths: List[str] = Field(min_length=1)
    mode: TraversalMode = TraversalMode.DIRECTORY_MARKER
    markers: NameRulesConfig = NameRulesConfig()
    ignore: NameRulesConfig = NameRulesConfig()
    include_intermediate_paths: bool = True
    yield_on_marker: Optional[bool] = None
    traverse_hidden: Optional[bool] = None
    chain_root_markers: Optional[bool] = None
    chain_root_ignore: Optional[bool] = None
    depth: int = Field(default=DEFAULT_DEPTH, ge=0, le=MAX_DEPTH)

    def to_rule_set(self, defaults: GlobalDefaults) -> RuleSet:
        def pick(value: Optional[bool], fallback: bool) -> bool:
            return fallback if value is None else value

        return RuleSet(
            paths=tuple(self.paths),
            mode=self.mode,
            markers=self.markers.to_name_rules(),
            ignore=self.ignore.to_name_rules(),
            depth=self.depth,
            include_intermediate_paths=self.include_intermediate_paths,
            yield_on_marker=pick(self.yield_on_marker, defaults.yield_on_marker),
            chain_root_markers=pick(self.chain_root_markers, defaults.chain_root_markers),
            chain_root_ignore=pick(self.chain_root_ignore, defaults.chain_root_ignore),
            traverse_hidden=pick(self.traverse_hidden, defaults.traverse_hidden),
        )


class SessionConfig(_ConfigModel):
    """A predefined tmux session for the ``start`` command.

    Attributes:
        name: Session name.
        windows: Working directories, one window each. The first one creates the session.
    """

    name: str = Field(min_length=1)
    windows: List[str] = Field(default_factory=list)

    def describe(self) -> str:
        return f"{self.name}: {', '.join(self.windows)}"


class Config(_ConfigModel):
    """The whole configuration document."""

    markers: RootMarkersConfig = RootMarkersConfig()
    ignore: RootIgnoreConfig = RootIgnoreConfig()
    include: List[IncludeEntry]
    sessions: List[SessionConfig] = Field(default_factory=list)

    def global_defaults(self) -> GlobalDefaults:
        return GlobalDefaults(
            markers=self.markers.to_name_rules(),
            ignore=self.ignore.to_name_rules(),
            traverse_hidden=self.markers.traverse_hidden,
            yield_on_marker=self.markers.yield_on_marker,
            chain_root_markers=self.markers.chain_root_markers,
            chain_root_ignore=self.ignore.chain_root_ignore,
        )

    def rule_sets(self) -> List[RuleSet]:
        defaults = self.global_defaults()
        return [entry.to_rule_set(defaults) for entry in self.include]
