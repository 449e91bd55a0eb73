"""CLI error-handling tests for concise stage diagnostics."""

from __future__ import annotations

from pathlib import Path

from pytest import MonkeyPatch
from typer.testing import CliRunner

from recordclean.cli import app


def test_clean_command_reports_unknown_preset() -> None:
    """Unknown presets fail at the normalize stage with a listing hint."""

    runner = CliRunner()

    result = runner.invoke(app, ["clean", "nope", "value"])

    assert result.exit_code == 1
    assert "clean failed at stage `normalize`: Unknown rule preset `nope`" in result.output
    assert "Hint: Run `recordclean presets` to list available presets." in result.output


def test_clean_command_reports_missing_config_file(tmp_path: Path) -> None:
    """A missing `--config` path fails at the config stage."""

    runner = CliRunner()

    result = runner.invoke(
        app,
        ["clean", "entity-name", "x", "--config", str(tmp_path / "missing.yml")],
    )

    assert result.exit_code == 1
    assert "clean failed at stage `config`: Config file not found" in result.output
    assert "Hint: Provide an existing path via `--config <path.yaml>`." in result.output


def test_clean_command_reports_invalid_config_file(tmp_path: Path) -> None:
    """Schema errors in the config file fail at the config stage."""

    config_path = tmp_path / "bad.yml"
    config_path.write_text("unknown_field: 1\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(app, ["clean", "entity-name", "x", "--config", str(config_path)])

    assert result.exit_code == 1
    assert "clean failed at stage `config`: Invalid config file" in result.output
    assert "unsupported key(s): unknown_field" in result.output


def test_clean_command_reports_invalid_environment(monkeypatch: MonkeyPatch) -> None:
    """Invalid environment values fail at the config stage."""

    monkeypatch.setenv("RECORDCLEAN_IGNORE_CASE", "maybe")
    runner = CliRunner()

    result = runner.invoke(app, ["clean", "entity-name", "x"])

    assert result.exit_code == 1
    assert "clean failed at stage `config`: Invalid environment configuration" in result.output


def test_clean_command_reports_unreadable_input(tmp_path: Path) -> None:
    """A missing `--input` file fails at the input stage."""

    runner = CliRunner()

    result = runner.invoke(
        app,
        ["clean", "entity-name", "--input", str(tmp_path / "absent.txt")],
    )

    assert result.exit_code == 1
    assert "clean failed at stage `input`" in result.output
