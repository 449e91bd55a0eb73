"""Command-line interface for recordclean.

Responsibilities:
- Expose named normalization presets to shell pipelines.
- Resolve configuration from a YAML file or the environment.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_preset_list, echo_values, exit_with_command_error
from .config import ConfigLoader
from .errors import CommandStageError, RecordCleanError
from .settings import NormalizationConfig
from .telemetry.logger import RunLogger
from .text.rules import RuleRegistry

app = typer.Typer(
    name="recordclean",
    no_args_is_help=True,
    help="recordclean CLI.",
)


def _load_config(config_path: Path | None) -> NormalizationConfig:
    """Load YAML config when requested, else environment config, as stage errors."""

    if config_path is None:
        try:
            return ConfigLoader.from_env()
        except RecordCleanError as exc:
            raise CommandStageError(
                stage="config",
                detail=f"Invalid environment configuration: {exc}",
                hint="Fix `RECORDCLEAN_*` variables and rerun.",
            ) from exc

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except RecordCleanError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except OSError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Failed to read config file `{config_path}`: {exc}",
            hint="Verify file permissions.",
        ) from exc


def _read_input_lines(input_file: Path) -> list[str]:
    """Read newline-separated values from a UTF-8 text file."""

    try:
        return input_file.read_text(encoding="utf-8").splitlines()
    except OSError as exc:
        raise CommandStageError(
            stage="input",
            detail=f"Failed to read input file `{input_file}`: {exc}",
            hint="Pass an existing UTF-8 text file via `--input`.",
        ) from exc


@app.command("clean")
def clean_command(
    preset: Annotated[str, typer.Argument(help="Rule preset name (see `presets`).")],
    values: Annotated[
        list[str] | None,
        typer.Argument(help="Values to normalize. Ignored when `--input` is given."),
    ] = None,
    input_file: Annotated[
        Path | None,
        typer.Option("--input", help="Text file with one value per line."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with abbreviation settings."),
    ] = None,
) -> None:
    """Normalize values with a named preset, printing one result per line."""

    run_logger = RunLogger()
    try:
        run_logger.log_stage_start("config")
        registry = RuleRegistry.from_config(_load_config(config_file))
        run_logger.log_stage_complete("config", presets=len(registry.names()))

        raw_values = (
            _read_input_lines(input_file) if input_file is not None else list(values or [])
        )

        run_logger.log_stage_start("normalize", preset=preset)
        try:
            selected = registry.get(preset)
            normalized = [selected.apply(value) for value in raw_values]
        except RecordCleanError as exc:
            raise CommandStageError(
                stage="normalize",
                detail=str(exc),
                hint="Run `recordclean presets` to list available presets.",
            ) from exc
        run_logger.log_stage_complete("normalize", preset=preset, values=len(normalized))
    except Exception as exc:
        stage = exc.stage if isinstance(exc, CommandStageError) else "clean"
        run_logger.log_stage_failure(stage, type(exc).__name__)
        exit_with_command_error("clean", exc)

    echo_values(normalized)


@app.command("presets")
def presets_command(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with abbreviation settings."),
    ] = None,
) -> None:
    """List available rule presets."""

    try:
        registry = RuleRegistry.from_config(_load_config(config_file))
    except Exception as exc:
        exit_with_command_error("presets", exc)

    echo_preset_list(registry.presets())


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
