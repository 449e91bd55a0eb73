"""Text normalization components.

This package provides predicates, conditional edge stripping, ordered
replacement pipelines, composed field cleaning, and the shared named rules.
"""

from .cleaning import CaseOptions, CleanStringOptions, PadOptions, clean_many, clean_string
from .predicates import (
    contains_any_of,
    does_not_end_with_known_abbreviation,
    ends_with_any_of,
    ends_with_known_abbreviation,
    equivalent_alphanumeric_strings,
    starts_with_any_of,
)
from .replace import ReplaceRule, apply_replacements
from .strip import BoundPredicate, StripOptions, strip_char, strip_char_fully

__all__ = [
    "BoundPredicate",
    "CaseOptions",
    "CleanStringOptions",
    "PadOptions",
    "ReplaceRule",
    "StripOptions",
    "apply_replacements",
    "clean_many",
    "clean_string",
    "contains_any_of",
    "does_not_end_with_known_abbreviation",
    "ends_with_any_of",
    "ends_with_known_abbreviation",
    "equivalent_alphanumeric_strings",
    "starts_with_any_of",
    "strip_char",
    "strip_char_fully",
]
