import pytest

from pfp.exceptions import ConfigError, PatternError
from pfp.matching.regex_rules import RegexNameRules


@pytest.mark.parametrize(
    "name,expected",
    [
        ("App.sln", True),
        ("App.sln.bak", False),
        ("build.gradle", True),
        ("build.gradle.kts", True),
        ("gradle.properties", False),
        ("Cargo.lock", True),
    ],
)
def test_regex_rules(name, expected):
    rules = RegexNameRules([r"\.sln$", r"^build\.gradle(\.kts)?$", "lock"])
    assert rules.matches(name) == expected, f"Failed for name: {name}"


def test_patterns_are_searched_not_anchored():
    rules = RegexNameRules(["mod"])
    assert rules.matches("go.mod")
    assert rules.matches("modules")


def test_empty_pattern_set_matches_nothing():
    rules = RegexNameRules([])
    assert not rules.has_rules()
    assert not rules.matches("")
    assert not rules.matches("anything")


@pytest.mark.parametrize("pattern", ["[a-", "(unclosed", "*leading"])
def test_invalid_pattern_raises(pattern):
    with pytest.raises(PatternError) as excinfo:
        RegexNameRules(["^ok$", pattern])
    assert excinfo.value.pattern == pattern
    assert pattern in str(excinfo.value)


def test_pattern_error_is_a_config_error():
    with pytest.raises(ConfigError):
        RegexNameRules(["("])


def test_inline_flags_apply_to_their_own_pattern():
    rules = RegexNameRules([r"^build\.gradle$", r"(?i)^makefile$"])
    assert rules.matches("Makefile")
    assert rules.matches("MAKEFILE")
    assert not rules.matches("Build.gradle")


def test_backreferences_are_local_to_their_pattern():
    rules = RegexNameRules([r"(x)", r"^(a)\1$"])
    assert rules.matches("aa")
    assert not rules.matches("ab")


def test_group_names_may_repeat_across_patterns():
    rules = RegexNameRules([r"(?P<n>a)$", r"^(?P<n>b)"])
    assert rules.matches("data")
    assert rules.matches("build")
    assert not rules.matches("cc")


def test_alternation_inside_pattern_does_not_leak():
    # "^x" anchors only its own pattern
    rules = RegexNameRules(["^x", "a|b"])
    assert rules.matches("b")
    assert rules.matches("xyz")
    assert not rules.matches("zzz")
