"""Pytest configuration and shared fixtures."""

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from CHATMARKUP_* variables and any .env in the cwd."""
    import os

    for key in list(os.environ):
        if key.startswith("CHATMARKUP_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    yield
