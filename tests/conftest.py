"""Pytest fixtures for dschannel tests."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

_TEST_CONFIG_DIR = Path(tempfile.mkdtemp(prefix="dschannel-test-config-"))
os.environ.setdefault("DSCHANNEL_CONFIG_DIR", str(_TEST_CONFIG_DIR))


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch):
    """Keep developer overrides out of the tests."""
    for name in ("DSCHANNEL_SETTINGS_PATH", "DSCHANNEL_FANOUT_WORKERS", "DSCHANNEL_CONNECT_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_shared_executor():
    """Each test starts without a shared fan-out pool."""
    from dschannel.providers.fanout import shutdown_shared_executor

    shutdown_shared_executor()
    yield
    shutdown_shared_executor()
