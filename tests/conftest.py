"""Shared test fixtures for the testgate test suite.

Settings and logging are process-wide once configured, so every test
starts from a clean environment and leaves no handlers behind.
"""

import logging
import os

import pytest
import structlog

from testgate.core.logging import HANDLER_NAME


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch, tmp_path_factory):
    """Strip TESTGATE_* variables and keep stray .env files out of reach."""
    for key in list(os.environ):
        if key.upper().startswith("TESTGATE_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    root = logging.getLogger()
    for handler in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)
    structlog.reset_defaults()
