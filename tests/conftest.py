"""Shared test fixtures for confsplit tests."""

from __future__ import annotations

import os

import pytest

from confsplit.config import Config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep CONFSPLIT_* variables from the outer environment out of tests."""
    for key in list(os.environ):
        if key.startswith("CONFSPLIT_"):
            monkeypatch.delenv(key)


@pytest.fixture
def config() -> Config:
    """Provide a default Config instance."""
    return Config()


@pytest.fixture
def recording_runner():
    """Provide a command runner that upper-cases commands and records them."""
    calls: list[str] = []

    def run(command: str) -> str:
        calls.append(command)
        return command.upper() + "\n"

    run.calls = calls  # type: ignore[attr-defined]
    return run
