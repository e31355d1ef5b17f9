"""Pytest configuration and fixtures for Traycer Lite tests."""

import pytest

from traycer_lite.settings.storage import API_KEY_ENV, ENV_OVERRIDES


@pytest.fixture(autouse=True)
def isolated_env(tmp_path_factory, monkeypatch):
    """Keep the real home directory and credentials out of every test."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv(API_KEY_ENV, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    for var in ENV_OVERRIDES.values():
        monkeypatch.delenv(var, raising=False)
    return home


@pytest.fixture
def prime_prompt():
    """The canonical end-to-end example prompt."""
    return "write a function to check prime numbers"
