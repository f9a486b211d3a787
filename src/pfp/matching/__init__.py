"""Name matching rules for markers and ignore lists."""

from .base_rules import BaseNameRules
from .composite_rules import CompositeNameRules
from .exact_rules import WILDCARD, ExactNameRules
from .glob_rules import GlobNameRules
from .regex_rules import RegexNameRules

__all__ = [
    "BaseNameRules",
    "CompositeNameRules",
    "ExactNameRules",
    "GlobNameRules",
    "RegexNameRules",
    "WILDCARD",
]
