"""Shared pytest fixtures for daytime tests."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

import pytest
from click.testing import CliRunner

from daytime.config.settings import DayTimeSettings


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def noon() -> datetime:
    """A fixed reference moment: 2024-05-10 12:00:00 UTC."""
    return datetime(2024, 5, 10, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> DayTimeSettings:
    """Default settings isolated from any daytime.toml or DAYTIME_* env var."""
    monkeypatch.delenv("DAYTIME_CONFIG", raising=False)
    monkeypatch.delenv("DAYTIME_ANCHOR__ROLLOVER", raising=False)
    return DayTimeSettings.from_cli(start=tmp_path)
