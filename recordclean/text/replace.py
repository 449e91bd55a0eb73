"""Ordered regex replacement pipelines.

Responsibilities:
- Represent one global search/replace rule as an immutable value.
- Apply rule sequences as a strict left-to-right fold.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import re
from typing import Sequence

from ..errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ReplaceRule:
    """One global search/replace rule.

    Attributes:
        search_value: Regex source, compiled pattern, or literal text when `literal`.
        replace_value: Replacement template using `re` group references (`\\1`).
        literal: Treat a string `search_value` as plain text.
        ignore_case: Match case-insensitively in addition to any pattern flags.
    """

    search_value: str | re.Pattern[str]
    replace_value: str = ""
    literal: bool = False
    ignore_case: bool = False
    pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Compile the search pattern once, rejecting invalid sources."""

        if not isinstance(self.replace_value, str):
            raise ConfigurationError(
                f"`replace_value` must be a string, got {type(self.replace_value).__name__}."
            )
        flags = re.IGNORECASE if self.ignore_case else 0
        if isinstance(self.search_value, re.Pattern):
            compiled = re.compile(self.search_value.pattern, self.search_value.flags | flags)
        elif isinstance(self.search_value, str) and self.search_value:
            source = re.escape(self.search_value) if self.literal else self.search_value
            try:
                compiled = re.compile(source, flags)
            except re.error as exc:
                raise ConfigurationError(
                    f"Invalid replacement pattern {self.search_value!r}: {exc}"
                ) from exc
        else:
            raise ConfigurationError(
                f"`search_value` must be a non-empty string or compiled pattern, "
                f"got {self.search_value!r}."
            )
        object.__setattr__(self, "pattern", compiled)

    def apply(self, value: str) -> str:
        """Replace every non-overlapping match in `value`."""

        try:
            return self.pattern.sub(self.replace_value, value)
        except (re.error, IndexError) as exc:
            raise ConfigurationError(
                f"Invalid replacement template {self.replace_value!r} "
                f"for pattern {self.pattern.pattern!r}: {exc}"
            ) from exc


def apply_replacements(value: str, rules: Sequence[ReplaceRule]) -> str:
    """Apply `rules` in order, feeding each output into the next rule."""

    current = value
    for rule in rules:
        current = rule.apply(current)
    return current
