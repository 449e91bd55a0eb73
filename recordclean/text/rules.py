"""Shared named normalization rules.

Responsibilities:
- Define each common normalization intent once as an immutable value.
- Expose a name-indexed registry used by callers and the CLI.

Key values:
- `UNCONDITIONAL_STRIP_DOT`, `STRIP_DOT_IF_NOT_END_WITH_ABBREVIATION`
- `ENSURE_SPACE_AROUND_HYPHEN`, `REPLACE_EM_HYPHEN`
- `ENTITY_NAME_CLEANING`, `DEFAULT_REGISTRY`
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Union

from ..errors import ConfigurationError
from ..settings import NormalizationConfig
from .cleaning import CleanStringOptions, clean_string
from .predicates import does_not_end_with_known_abbreviation
from .replace import ReplaceRule
from .strip import BoundPredicate, StripOptions, strip_char

Rule = Union[StripOptions, ReplaceRule, CleanStringOptions]


UNCONDITIONAL_STRIP_DOT = StripOptions(char=".", escape=True)

ENSURE_SPACE_AROUND_HYPHEN = ReplaceRule(
    search_value=r"( -(?=\S)|(?<=\S)- )",
    replace_value=" - ",
)

# "â€”" and "â\x80\x94" are the em-dash UTF-8 bytes decoded as cp1252 and latin-1.
REPLACE_EM_HYPHEN = ReplaceRule(search_value="â€”|â\x80\x94|—", replace_value="-")


def strip_dot_unless_abbreviation(config: NormalizationConfig) -> StripOptions:
    """Build a dot strip that keeps the trailing period of a known abbreviation."""

    return StripOptions(
        char=".",
        escape=True,
        right_condition=BoundPredicate(
            does_not_end_with_known_abbreviation,
            (frozenset(config.abbreviations), config.ignore_case),
        ),
    )


def entity_name_cleaning(config: NormalizationConfig) -> CleanStringOptions:
    """Build the composed cleaning used for entity and company names."""

    return CleanStringOptions(
        strip=strip_dot_unless_abbreviation(config),
        replace=(REPLACE_EM_HYPHEN, ENSURE_SPACE_AROUND_HYPHEN),
    )


@dataclass(frozen=True, slots=True)
class RulePreset:
    """A named rule with a one-line summary."""

    name: str
    summary: str
    rule: Rule

    def apply(self, value: str) -> str:
        """Apply the underlying rule to one value."""

        if isinstance(self.rule, StripOptions):
            return strip_char(value, self.rule)
        if isinstance(self.rule, ReplaceRule):
            return self.rule.apply(value)
        return clean_string(value, self.rule)


class RuleRegistry:
    """Immutable name-indexed collection of rule presets."""

    def __init__(self, presets: list[RulePreset]) -> None:
        """Index presets by name, rejecting duplicates."""

        indexed: dict[str, RulePreset] = {}
        for preset in presets:
            if preset.name in indexed:
                raise ConfigurationError(f"Duplicate rule preset name `{preset.name}`.")
            indexed[preset.name] = preset
        self._presets: Mapping[str, RulePreset] = MappingProxyType(indexed)

    @classmethod
    def from_config(cls, config: NormalizationConfig) -> RuleRegistry:
        """Build the standard presets for a configuration."""

        config.validate()
        return cls(
            [
                RulePreset(
                    name="unconditional-strip-dot",
                    summary="Strip one leading and one trailing dot.",
                    rule=UNCONDITIONAL_STRIP_DOT,
                ),
                RulePreset(
                    name="strip-dot-unless-abbreviation",
                    summary="Strip a leading dot; keep a trailing dot after an abbreviation.",
                    rule=strip_dot_unless_abbreviation(config),
                ),
                RulePreset(
                    name="ensure-space-around-hyphen",
                    summary="Space both sides of a hyphen spaced on one side only.",
                    rule=ENSURE_SPACE_AROUND_HYPHEN,
                ),
                RulePreset(
                    name="replace-em-dash",
                    summary="Replace em-dashes, including mis-decoded ones, with a hyphen.",
                    rule=REPLACE_EM_HYPHEN,
                ),
                RulePreset(
                    name="entity-name",
                    summary="Trim, normalize dashes and hyphen spacing, strip dots.",
                    rule=entity_name_cleaning(config),
                ),
            ]
        )

    def names(self) -> list[str]:
        """Return preset names in registration order."""

        return list(self._presets)

    def presets(self) -> list[RulePreset]:
        """Return presets in registration order."""

        return list(self._presets.values())

    def get(self, name: str) -> RulePreset:
        """Return the preset registered under `name`."""

        preset = self._presets.get(name)
        if preset is None:
            available = ", ".join(self._presets)
            raise ConfigurationError(f"Unknown rule preset `{name}`; available: {available}.")
        return preset

    def __contains__(self, name: object) -> bool:
        return name in self._presets


_DEFAULT_CONFIG = NormalizationConfig()

STRIP_DOT_IF_NOT_END_WITH_ABBREVIATION = strip_dot_unless_abbreviation(_DEFAULT_CONFIG)
ENTITY_NAME_CLEANING = entity_name_cleaning(_DEFAULT_CONFIG)
DEFAULT_REGISTRY = RuleRegistry.from_config(_DEFAULT_CONFIG)
