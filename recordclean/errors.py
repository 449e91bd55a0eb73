"""Domain exceptions for normalization rules and CLI diagnostics."""

from __future__ import annotations


class RecordCleanError(Exception):
    """Base class for recordclean failures."""


class ConfigurationError(RecordCleanError, ValueError):
    """Raised when a rule, preset, or configuration value is structurally invalid."""


class PredicateError(RecordCleanError, TypeError):
    """Raised when a strip predicate returns a non-boolean result."""


class CommandStageError(RuntimeError):
    """Raised when a specific CLI command stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
