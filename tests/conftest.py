"""Pytest configuration and fixtures."""

import io
import logging
import os
from datetime import datetime, timezone

import pytest
from rich.console import Console

# Configure logging for tests
logging.basicConfig(level=logging.DEBUG)


@pytest.fixture
def console():
    """Console writing plain text into a buffer."""
    return Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)


@pytest.fixture
def sample_dir(tmp_path):
    """Directory with two files and one subdirectory."""
    small = tmp_path / "small.txt"
    small.write_bytes(b"a" * 500)
    small.chmod(0o644)

    medium = tmp_path / "medium.bin"
    medium.write_bytes(b"b" * 2048)
    medium.chmod(0o600)

    sub = tmp_path / "subdir"
    sub.mkdir()
    sub.chmod(0o755)

    stamp = datetime(2024, 6, 14, 9, 32, tzinfo=timezone.utc).timestamp()
    for path in (small, medium, sub):
        os.utime(path, (stamp, stamp))

    return tmp_path


@pytest.fixture
def fake_lookup():
    """Owner lookup that knows a single user."""

    def lookup(uid):
        return "alice" if uid == os.getuid() else None

    return lookup
