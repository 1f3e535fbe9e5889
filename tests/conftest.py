"""Shared pytest fixtures."""

import os
import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture(autouse=True)
def mock_notifier_dir(temp_dir, monkeypatch):
    """Point CLAUDE_NOTIFIER_DIR at a temp dir so tests never touch ~/.config."""
    from claude_notifier.utils.debug import reload_config

    notifier_dir = temp_dir / ".claude-notifier"
    notifier_dir.mkdir()
    monkeypatch.setenv("CLAUDE_NOTIFIER_DIR", str(notifier_dir))
    for key in list(os.environ):
        if key.startswith("CLAUDE_NOTIFIER_") and key != "CLAUDE_NOTIFIER_DIR":
            monkeypatch.delenv(key)
    reload_config()
    yield notifier_dir
    reload_config()


@pytest.fixture
def pty_pair():
    """A pseudo-terminal: (master_fd, slave_fd)."""
    master, slave = os.openpty()
    yield master, slave
    os.close(master)
    os.close(slave)
