"""Normalization settings shared by the rule presets.

Responsibilities:
- Define the abbreviation settings consumed by `recordclean.text.rules`.
- Stay free of file-format dependencies; loading lives in `recordclean.config`.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigurationError


DEFAULT_ABBREVIATIONS: tuple[str, ...] = (
    "Inc",
    "Corp",
    "Co",
    "Ltd",
    "LLC",
    "LLP",
    "PLC",
    "Assn",
    "Bros",
    "Dept",
    "Jr",
    "Sr",
    "Dr",
    "Mr",
    "Mrs",
    "Ms",
    "St",
    "Ave",
    "Blvd",
)


@dataclass(frozen=True, slots=True)
class NormalizationConfig:
    """Settings shared by the rule presets of one process.

    Attributes:
        abbreviations: Tokens whose trailing period is kept by abbreviation-aware rules.
        ignore_case: Whether abbreviation tokens match case-insensitively.
    """

    abbreviations: tuple[str, ...] = DEFAULT_ABBREVIATIONS
    ignore_case: bool = True

    def validate(self) -> None:
        """Validate configuration values before presets are built."""

        if not self.abbreviations:
            raise ConfigurationError("`abbreviations` must contain at least one token.")
        for token in self.abbreviations:
            if not isinstance(token, str) or not token.strip():
                raise ConfigurationError("`abbreviations` entries must be non-empty strings.")
            if any(character.isspace() for character in token):
                raise ConfigurationError(
                    f"Abbreviation token `{token}` must be a single word."
                )
            # The candidate's closing period is dropped before comparison.
            if token.endswith("."):
                raise ConfigurationError(
                    f"Abbreviation token `{token}` must be given without its closing period."
                )
