from unittest.mock import MagicMock

import pytest

from pfp.matching.base_rules import BaseNameRules
from pfp.matching.composite_rules import CompositeNameRules
from pfp.matching.exact_rules import ExactNameRules
from pfp.matching.glob_rules import GlobNameRules
from pfp.matching.regex_rules import RegexNameRules


@pytest.fixture
def composite():
    return CompositeNameRules(
        [
            ExactNameRules(["node_modules"]),
            RegexNameRules([r"^\.?venv"]),
            GlobNameRules(["*.egg-info"]),
        ]
    )


@pytest.mark.parametrize(
    "name,expected",
    [
        ("node_modules", True),
        (".venv", True),
        ("venv311", True),
        ("pfp.egg-info", True),
        ("app", False),
    ],
)
def test_composite_matches_if_any_rule_matches(composite, name, expected):
    assert composite.matches(name) == expected


def test_composite_requires_rules():
    with pytest.raises(ValueError):
        CompositeNameRules([])


def test_composite_rejects_non_rules():
    with pytest.raises(TypeError) as excinfo:
        CompositeNameRules([ExactNameRules(), "not a rule"])
    assert "index 1" in str(excinfo.value)


def test_composite_short_circuits():
    first = ExactNameRules(["hit"])
    second = MagicMock(spec=BaseNameRules)
    composite = CompositeNameRules([first, second])
    assert composite.matches("hit")
    second.matches.assert_not_called()


def test_empty_constituents_are_dropped():
    exact = ExactNameRules(["node_modules"])
    composite = CompositeNameRules([exact, RegexNameRules(), GlobNameRules()])
    assert composite.rules == [exact]
    assert composite.has_rules()


def test_composite_of_empty_rules_matches_nothing():
    composite = CompositeNameRules([ExactNameRules(), RegexNameRules()])
    assert not composite.has_rules()
    assert not composite.matches("anything")
