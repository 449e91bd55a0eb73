"""Unit tests for ordered replacement pipelines."""

from __future__ import annotations

import re

import pytest

from recordclean.errors import ConfigurationError
from recordclean.text.replace import ReplaceRule, apply_replacements


def test_replace_rule_replaces_every_match() -> None:
    """Rules have global scope within one application."""

    rule = ReplaceRule(search_value=r"\s{2,}", replace_value=" ")

    assert rule.apply("a   b    c") == "a b c"


def test_replace_rule_is_case_sensitive_unless_marked() -> None:
    """Case-insensitive matching is opt-in per rule or via pattern flags."""

    sensitive = ReplaceRule(search_value="ctr", replace_value="Center")
    insensitive = ReplaceRule(search_value="ctr", replace_value="Center", ignore_case=True)
    flagged = ReplaceRule(search_value=re.compile("ctr", re.IGNORECASE), replace_value="Center")

    assert sensitive.apply("Med Ctr") == "Med Ctr"
    assert insensitive.apply("Med Ctr") == "Med Center"
    assert flagged.apply("Med CTR") == "Med Center"


def test_replace_rule_supports_group_references() -> None:
    """Replacement templates may reference capture groups."""

    rule = ReplaceRule(search_value=r"(\w+), (\w+)", replace_value=r"\2 \1")

    assert rule.apply("Smith, John") == "John Smith"


def test_replace_rule_literal_mode_escapes_pattern_characters() -> None:
    """Literal search text matches exactly, including regex metacharacters."""

    rule = ReplaceRule(search_value="(Discount)", replace_value="", literal=True)

    assert rule.apply("DISCOUNT (Discount)") == "DISCOUNT "


def test_apply_replacements_folds_left_to_right() -> None:
    """Each rule receives the previous rule's output."""

    rules = [
        ReplaceRule(search_value="a", replace_value="b"),
        ReplaceRule(search_value="b", replace_value="c"),
    ]

    assert apply_replacements("ab", rules) == "cc"
    assert apply_replacements("ab", list(reversed(rules))) == "bc"
    assert apply_replacements("ab", []) == "ab"


@pytest.mark.parametrize("search_value", ["(", "", 42])
def test_replace_rule_rejects_invalid_patterns(search_value: object) -> None:
    """Invalid or empty search values fail at construction."""

    with pytest.raises(ConfigurationError):
        ReplaceRule(search_value=search_value, replace_value="")  # type: ignore[arg-type]


def test_replace_rule_reports_bad_group_reference_at_use() -> None:
    """A template referencing a missing group fails when applied."""

    rule = ReplaceRule(search_value="x", replace_value=r"\3")

    with pytest.raises(ConfigurationError, match="Invalid replacement template"):
        rule.apply("x")
