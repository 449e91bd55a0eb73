"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
normalized values, and preset listings.
"""

from __future__ import annotations

from typing import Iterable, NoReturn

import typer

from .errors import CommandStageError
from .text.rules import RulePreset


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_values(values: Iterable[str]) -> None:
    """Print one normalized value per line."""

    for value in values:
        typer.echo(value)


def echo_preset_list(presets: list[RulePreset]) -> None:
    """Print aligned preset name/summary rows in registration order."""

    if not presets:
        return
    width = max(len(preset.name) for preset in presets)
    for preset in presets:
        typer.echo(f"{preset.name.ljust(width)}  {preset.summary}")
