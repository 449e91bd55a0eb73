"""Top-level package for recordclean.

This package normalizes free-text record fields (names, descriptions,
addresses) exchanged with a record-management API. The main entry points are
`strip_char`, `apply_replacements`, `clean_string`, and the named presets in
`recordclean.text.rules`.
"""

from .errors import ConfigurationError, PredicateError, RecordCleanError
from .records import standardize_response
from .text import (
    BoundPredicate,
    CleanStringOptions,
    ReplaceRule,
    StripOptions,
    apply_replacements,
    clean_string,
    strip_char,
)

__all__ = [
    "BoundPredicate",
    "CleanStringOptions",
    "ConfigurationError",
    "PredicateError",
    "RecordCleanError",
    "ReplaceRule",
    "StripOptions",
    "apply_replacements",
    "clean_string",
    "standardize_response",
    "strip_char",
    "__version__",
]

__version__ = "0.1.0"
