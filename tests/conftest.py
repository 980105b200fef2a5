"""Shared pytest fixtures for commacalc tests."""

import pytest
from typer.testing import CliRunner


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep COMMACALC_* settings from the developer's shell out of tests."""
    monkeypatch.delenv("COMMACALC_LOG_LEVEL", raising=False)
    monkeypatch.delenv("COMMACALC_CARET", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a CLI test runner."""
    return CliRunner()
