"""Shared parsing helpers for configuration file and environment values."""

from __future__ import annotations

from typing import Iterable

from .errors import ConfigurationError


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    token = normalized.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def parse_required_boolean(value: object, field_name: str) -> bool:
    """Parse a required boolean value from accepted textual tokens.

    Raises:
        ConfigurationError: If the token is not one of the accepted boolean values.
    """

    parsed = parse_permissive_boolean(value)
    if parsed is not None:
        return parsed

    raise ConfigurationError(
        f"`{field_name}` must be a boolean value (`true`/`false`, `1`/`0`, `yes`/`no`)."
    )


def parse_token_list(value: object, field_name: str) -> tuple[str, ...]:
    """Parse a comma-separated string or a sequence of strings into unique tokens.

    Blank entries are dropped and first-seen order is preserved.

    Raises:
        ConfigurationError: If the value is neither a string nor a sequence of scalars.
    """

    if value is None:
        return ()
    if isinstance(value, str):
        raw_tokens: Iterable[object] = value.split(",")
    elif isinstance(value, (list, tuple)):
        raw_tokens = value
    else:
        raise ConfigurationError(
            f"`{field_name}` must be a list of strings or a comma-separated string."
        )

    tokens: list[str] = []
    for raw in raw_tokens:
        if isinstance(raw, (dict, list, tuple)):
            raise ConfigurationError(f"`{field_name}` entries must be plain strings.")
        token = normalize_optional_string(raw)
        if token is not None and token not in tokens:
            tokens.append(token)
    return tuple(tokens)
