"""Shared pytest fixtures for typedenv tests."""

from __future__ import annotations

import os

import pytest
from click.testing import CliRunner

from typedenv.environment import Environment


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def store() -> dict[str, str]:
    """An empty in-memory environment store."""
    return {}


@pytest.fixture
def env(store: dict[str, str]) -> Environment:
    """Environment accessor over the in-memory ``store`` fixture."""
    return Environment(store)


@pytest.fixture
def _clean_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove ``TYPEDENV_*`` variables so CLI settings use code defaults.

    Use via ``@pytest.mark.usefixtures("_clean_settings_env")``.
    """
    for name in list(os.environ):
        if name.startswith("TYPEDENV_"):
            monkeypatch.delenv(name)
