from unittest.mock import patch

import pytest

from pfp.exceptions import PatternError
from pfp.matching.glob_rules import GlobNameRules


@pytest.mark.parametrize(
    "name,expected",
    [
        ("App.csproj", True),
        ("App.csproj.user", False),
        ("pfp.egg-info", True),
        ("keep.egg-info", False),
        ("Makefile", True),
        ("makefile", False),
        ("file1.log", True),
        ("file10.log", False),
    ],
)
def test_glob_rules(name, expected):
    rules = GlobNameRules(["*.csproj", "*.egg-info", "!keep.egg-info", "Makefile", "file?.log"])
    assert rules.matches(name) == expected, f"Failed for name: {name}"


def test_empty_glob_rules_match_nothing():
    rules = GlobNameRules()
    assert not rules.has_rules()
    assert not rules.matches("anything")


def test_add_rule_with_negation():
    rules = GlobNameRules()
    rules.add_rule("*.pyc")
    assert rules.matches("mod.pyc")
    rules.add_rule("!mod.pyc")
    assert not rules.matches("mod.pyc")
    assert rules.matches("other.pyc")


def test_malformed_pattern_raises_pattern_error():
    rules = GlobNameRules(["*.pyc"])
    with patch("pfp.matching.glob_rules.GitIgnoreSpec.from_lines", side_effect=ValueError("bad pattern")):
        with pytest.raises(PatternError) as excinfo:
            rules.add_rule("***")
    assert excinfo.value.pattern == "***"
    assert "bad pattern" in str(excinfo.value)
    # the failed rule is not kept
    assert rules.patterns == ["*.pyc"]
