"""Conditional edge-character stripping.

Responsibilities:
- Remove one designated character from the start and/or end of a string.
- Gate each side on an optional predicate bound to its own argument list.

Key types:
- `BoundPredicate`: a predicate callable bundled with its extra arguments.
- `StripOptions`: immutable strip configuration consumed by `strip_char`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import re
from typing import Any, Callable, Sequence

from ..errors import ConfigurationError, PredicateError

Predicate = Callable[..., bool]


@dataclass(frozen=True, slots=True)
class BoundPredicate:
    """Predicate callable plus the ordered arguments passed after the candidate.

    Attributes:
        predicate: Pure function `(candidate, *args) -> bool`.
        args: Arguments appended to every call.
    """

    predicate: Predicate
    args: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        """Validate the callable and freeze the argument list."""

        if not callable(self.predicate):
            raise ConfigurationError(
                f"Strip condition must be callable, got {type(self.predicate).__name__}."
            )
        object.__setattr__(self, "args", tuple(self.args))

    @property
    def name(self) -> str:
        """Return a readable predicate name for diagnostics."""

        return getattr(self.predicate, "__name__", repr(self.predicate))

    def __call__(self, candidate: str) -> bool:
        """Evaluate the predicate; exceptions raised by it propagate unchanged."""

        result = self.predicate(candidate, *self.args)
        if not isinstance(result, bool):
            raise PredicateError(
                f"Predicate `{self.name}` returned {type(result).__name__}; expected bool."
            )
        return result


@dataclass(frozen=True, slots=True)
class StripOptions:
    """Immutable configuration for `strip_char`.

    Attributes:
        char: The single character to strip.
        escape: Treat `char` as an exact literal instead of a pattern fragment.
        left_condition: Gate for the leading side; `None` strips unconditionally.
        right_condition: Gate for the trailing side; `None` strips unconditionally.
    """

    char: str
    escape: bool = False
    left_condition: BoundPredicate | None = None
    right_condition: BoundPredicate | None = None
    _leading: re.Pattern[str] = field(init=False, repr=False, compare=False)
    _trailing: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate `char` and compile the anchored edge patterns once."""

        if not isinstance(self.char, str) or len(self.char) != 1:
            raise ConfigurationError(
                f"Strip `char` must be exactly one character, got {self.char!r}."
            )
        fragment = re.escape(self.char) if self.escape else self.char
        try:
            leading = re.compile(rf"\A(?:{fragment})")
            trailing = re.compile(rf"(?:{fragment})\Z")
        except re.error as exc:
            raise ConfigurationError(
                f"Strip `char` {self.char!r} is not a valid pattern; set `escape=True`."
            ) from exc
        object.__setattr__(self, "_leading", leading)
        object.__setattr__(self, "_trailing", trailing)

    @classmethod
    def build(
        cls,
        char: str,
        escape: bool = False,
        strip_left_condition: Predicate | None = None,
        left_args: Sequence[Any] | None = None,
        strip_right_condition: Predicate | None = None,
        right_args: Sequence[Any] | None = None,
    ) -> StripOptions:
        """Create options from separate condition/argument pairs."""

        left = (
            BoundPredicate(strip_left_condition, tuple(left_args or ()))
            if strip_left_condition is not None
            else None
        )
        right = (
            BoundPredicate(strip_right_condition, tuple(right_args or ()))
            if strip_right_condition is not None
            else None
        )
        return cls(char=char, escape=escape, left_condition=left, right_condition=right)


def _remove(pattern: re.Pattern[str], value: str) -> str:
    return pattern.sub("", value, count=1)


def strip_char(value: str, options: StripOptions) -> str:
    """Strip at most one `options.char` from each edge of `value`.

    The left side is evaluated first. The right condition sees the string after
    the left removal. Repeated edge characters lose only one occurrence per call.
    """

    if not value:
        return value
    if options.left_condition is None or options.left_condition(value):
        value = _remove(options._leading, value)
    if not value:
        return value
    if options.right_condition is None or options.right_condition(value):
        value = _remove(options._trailing, value)
    return value


def strip_char_fully(value: str, options: StripOptions) -> str:
    """Apply `strip_char` until the value stops changing."""

    while True:
        stripped = strip_char(value, options)
        if stripped == value:
            return stripped
        value = stripped
