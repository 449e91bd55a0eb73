"""Shared pytest fixtures for the recordclean test suite."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _isolate_recordclean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop ambient `RECORDCLEAN_*` variables so CLI tests see default config."""

    monkeypatch.delenv("RECORDCLEAN_ABBREVIATIONS", raising=False)
    monkeypatch.delenv("RECORDCLEAN_IGNORE_CASE", raising=False)
