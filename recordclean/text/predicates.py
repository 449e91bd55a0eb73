"""Reusable boolean tests over candidate strings.

Responsibilities:
- Provide pure predicates used to gate conditional edge stripping.
- Accept caller-bound arguments after the candidate string.
- Compare strings for approximate alphanumeric equivalence.

Every predicate is total over strings and returns a plain `bool`.
"""

from __future__ import annotations

import math
import re
from typing import Iterable, Union

from rapidfuzz.distance import Levenshtein

Needles = Union[str, Iterable[str], re.Pattern[str]]

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]")


def _as_tokens(tokens: str | Iterable[str]) -> tuple[str, ...]:
    """Return tokens as a tuple, treating a bare string as one token."""

    if isinstance(tokens, str):
        return (tokens,)
    return tuple(tokens)


def trailing_word(candidate: str) -> str:
    """Return the text after the last whitespace run, ignoring trailing whitespace."""

    words = candidate.split()
    if not words:
        return ""
    return words[-1]


def ends_with_known_abbreviation(
    candidate: str,
    tokens: str | Iterable[str],
    ignore_case: bool = False,
) -> bool:
    """Return whether the trailing word of `candidate` is one of `tokens`.

    The abbreviation's own closing period is ignored, so `"Acme Inc."` ends with
    the token `"Inc"`. Tokens are compared whole, never as suffixes of a longer
    word (`"Zinc."` does not end with `"Inc"`).
    """

    word = trailing_word(candidate)
    if word.endswith("."):
        word = word[:-1]
    if not word:
        return False
    known = _as_tokens(tokens)
    if ignore_case:
        folded = word.casefold()
        return any(folded == token.casefold() for token in known)
    return word in known


def does_not_end_with_known_abbreviation(
    candidate: str,
    tokens: str | Iterable[str],
    ignore_case: bool = False,
) -> bool:
    """Return whether `candidate` does not end with a known abbreviation token."""

    return not ends_with_known_abbreviation(candidate, tokens, ignore_case)


def _compile_needles(
    needles: Needles, template: str, ignore_case: bool
) -> re.Pattern[str] | None:
    """Build an anchored alternation pattern from literal needles or a pattern."""

    flags = re.IGNORECASE if ignore_case else 0
    if isinstance(needles, re.Pattern):
        return re.compile(template.format(needles.pattern), needles.flags | flags)
    literals = [token for token in _as_tokens(needles) if token]
    if not literals:
        return None
    alternation = "|".join(re.escape(token) for token in literals)
    return re.compile(template.format(alternation), flags)


def ends_with_any_of(candidate: str, suffixes: Needles, ignore_case: bool = False) -> bool:
    """Return whether `candidate` ends with any suffix, allowing trailing whitespace."""

    if not candidate:
        return False
    pattern = _compile_needles(suffixes, r"(?:{})\s*\Z", ignore_case)
    return pattern is not None and pattern.search(candidate) is not None


def starts_with_any_of(candidate: str, prefixes: Needles, ignore_case: bool = False) -> bool:
    """Return whether `candidate` starts with any prefix, allowing leading whitespace."""

    if not candidate:
        return False
    pattern = _compile_needles(prefixes, r"\A\s*(?:{})", ignore_case)
    return pattern is not None and pattern.search(candidate) is not None


def contains_any_of(candidate: str, substrings: Needles, ignore_case: bool = False) -> bool:
    """Return whether `candidate` contains any of `substrings`."""

    if not candidate:
        return False
    pattern = _compile_needles(substrings, r"(?:{})", ignore_case)
    return pattern is not None and pattern.search(candidate) is not None


def _sorted_alphanumerics(value: str) -> str:
    """Return the lowercase ASCII letters and digits of `value`, sorted."""

    return "".join(sorted(_NON_ALPHANUMERIC.sub("", value.lower())))


def equivalent_alphanumeric_strings(
    candidate: str,
    other: str,
    tolerance: float = 0.90,
) -> bool:
    """Return whether two strings hold roughly the same letters and digits.

    Both strings are lowercased, reduced to `[a-z0-9]`, and their characters
    sorted, so word order and punctuation do not matter. The strings are
    equivalent when:

    - the sorted forms are equal;
    - the edit distance of either the raw or the sorted forms is at most
      `floor(len * (1 - tolerance))` for the longer sorted form; or
    - one sorted form contains the other and the shorter holds at least
      `tolerance` of the longer's length.

    Empty input, or input without letters or digits, is never equivalent.
    """

    if not candidate or not other:
        return False
    left = _sorted_alphanumerics(candidate)
    right = _sorted_alphanumerics(other)
    if not left or not right:
        return False
    if left == right:
        return True

    max_distance = max(
        math.floor(len(left) * (1 - tolerance)),
        math.floor(len(right) * (1 - tolerance)),
    )
    if (
        Levenshtein.distance(candidate, other) <= max_distance
        or Levenshtein.distance(left, right) <= max_distance
    ):
        return True

    shorter, longer = sorted((left, right), key=len)
    return len(shorter) / len(longer) >= tolerance and shorter in longer
