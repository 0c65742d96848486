"""Shared pytest fixtures for the caesar engine tests."""

import pytest

import caesar_engine


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """main() flips the module-level verbose flag; restore it after each test."""
    monkeypatch.setattr(caesar_engine, "VERBOSE", False)
