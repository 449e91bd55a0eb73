"""Composed field cleaning.

Responsibilities:
- Combine replacement, edge stripping, casing, and padding into one call.
- Keep every step deterministic and driven by immutable option values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..errors import ConfigurationError
from .replace import ReplaceRule, apply_replacements
from .strip import StripOptions, strip_char


@dataclass(frozen=True, slots=True)
class CaseOptions:
    """Select at most one case transformation."""

    to_upper: bool = False
    to_lower: bool = False
    to_title: bool = False

    def __post_init__(self) -> None:
        """Reject conflicting case selections."""

        if sum((self.to_upper, self.to_lower, self.to_title)) > 1:
            raise ConfigurationError(
                "Only one of `to_upper`, `to_lower`, `to_title` may be set."
            )

    def apply(self, value: str) -> str:
        """Return `value` in the selected case."""

        if self.to_upper:
            return value.upper()
        if self.to_lower:
            return value.lower()
        if self.to_title:
            return value.title()
        return value


@dataclass(frozen=True, slots=True)
class PadOptions:
    """Pad a value to a minimum length on one side.

    Attributes:
        pad_length: Minimum resulting length.
        pad_char: Single fill character.
        pad_left: Fill on the left (e.g. zero-padded identifiers).
        pad_right: Fill on the right.
    """

    pad_length: int
    pad_char: str = "0"
    pad_left: bool = True
    pad_right: bool = False

    def __post_init__(self) -> None:
        """Validate length, fill character, and side selection."""

        if isinstance(self.pad_length, bool) or not isinstance(self.pad_length, int):
            raise ConfigurationError("`pad_length` must be an integer.")
        if self.pad_length < 0:
            raise ConfigurationError("`pad_length` must not be negative.")
        if not isinstance(self.pad_char, str) or len(self.pad_char) != 1:
            raise ConfigurationError(
                f"`pad_char` must be exactly one character, got {self.pad_char!r}."
            )
        if self.pad_left == self.pad_right:
            raise ConfigurationError("Exactly one of `pad_left`, `pad_right` must be set.")

    def apply(self, value: str) -> str:
        """Return `value` padded to `pad_length`."""

        if self.pad_left:
            return value.rjust(self.pad_length, self.pad_char)
        return value.ljust(self.pad_length, self.pad_char)


@dataclass(frozen=True, slots=True)
class CleanStringOptions:
    """Options for `clean_string`; every step is optional."""

    strip: StripOptions | None = None
    case: CaseOptions | None = None
    pad: PadOptions | None = None
    replace: tuple[ReplaceRule, ...] = ()

    def __post_init__(self) -> None:
        """Freeze the replacement pipeline."""

        object.__setattr__(self, "replace", tuple(self.replace))


def clean_string(value: object, options: CleanStringOptions | None = None) -> str:
    """Normalize one raw field value.

    Order: trim whitespace, replacements, trim again, edge strip, case, pad.
    `None` becomes an empty string and other non-strings are converted with `str()`.
    """

    if value is None:
        return ""
    text = value if isinstance(value, str) else str(value)
    text = text.strip()
    if options is None:
        return text
    if options.replace:
        text = apply_replacements(text, options.replace).strip()
    if options.strip is not None:
        text = strip_char(text, options.strip)
    if options.case is not None:
        text = options.case.apply(text)
    if options.pad is not None:
        text = options.pad.apply(text)
    return text


def clean_many(values: Sequence[object], options: CleanStringOptions | None = None) -> list[str]:
    """Apply `clean_string` to each value independently."""

    return [clean_string(value, options) for value in values]
