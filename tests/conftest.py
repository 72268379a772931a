"""Global pytest fixtures and configuration.

Every test runs with:
- no PATHGUARD_* variables inherited from the calling shell
- a fresh settings cache and unconfigured logging
- the working directory set to a temporary path, so no stray .env is read
"""
from __future__ import annotations

import os

import pytest

from pathguard.config.settings import reset_settings
from pathguard.utils.logging_factory import LoggingFactory


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Isolate settings, logging and the working directory per test."""
    for name in list(os.environ):
        if name.startswith("PATHGUARD_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    LoggingFactory.reset()
    yield
    LoggingFactory.reset()
    reset_settings()
