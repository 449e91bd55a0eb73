"""Unit tests for shared configuration parsing helpers."""

import pytest

from recordclean.errors import ConfigurationError
from recordclean.parsing import (
    normalize_optional_string,
    parse_permissive_boolean,
    parse_required_boolean,
    parse_token_list,
)


def test_normalize_optional_string_handles_blank_values() -> None:
    """Normalization should return `None` for `None` and blank textual values."""

    assert normalize_optional_string(None) is None
    assert normalize_optional_string("") is None
    assert normalize_optional_string("   ") is None
    assert normalize_optional_string("  value  ") == "value"
    assert normalize_optional_string(42) == "42"


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("TrUe", True),
        ("  ON ", True),
        ("YeS", True),
        ("FALSE", False),
        (" oFf ", False),
        ("nO", False),
    ],
)
def test_parse_permissive_boolean_accepts_mixed_case_tokens(
    token: str, expected: bool
) -> None:
    """Permissive parsing should accept valid tokens case-insensitively."""

    assert parse_permissive_boolean(token) is expected


@pytest.mark.parametrize("value", ["", "   ", "maybe", "2", object()])
def test_parse_permissive_boolean_returns_none_for_invalid_tokens(value: object) -> None:
    """Permissive parsing should return `None` for invalid or blank inputs."""

    assert parse_permissive_boolean(value) is None


def test_parse_required_boolean_raises_configuration_error() -> None:
    """Strict boolean parsing should name the offending field."""

    with pytest.raises(
        ConfigurationError,
        match=(
            r"`ignore_case` must be a boolean value "
            r"\(`true`/`false`, `1`/`0`, `yes`/`no`\)\."
        ),
    ):
        parse_required_boolean("maybe", "ignore_case")


def test_parse_token_list_deduplicates_and_drops_blanks() -> None:
    """Token lists keep first-seen order without blanks or duplicates."""

    assert parse_token_list(" Inc, ,Ltd,Inc ", "abbreviations") == ("Inc", "Ltd")
    assert parse_token_list(["Jr", " Sr ", None], "abbreviations") == ("Jr", "Sr")
    assert parse_token_list(None, "abbreviations") == ()


def test_parse_token_list_rejects_nested_values() -> None:
    """Nested containers are not valid tokens."""

    with pytest.raises(ConfigurationError, match="plain strings"):
        parse_token_list(["Inc", ["Ltd"]], "abbreviations")
    with pytest.raises(ConfigurationError, match="list of strings"):
        parse_token_list(7, "abbreviations")
