"""Pytest fixtures for tests."""

from pathlib import Path

import pytest

from ledcube.cube import Cube
from ledcube.transport import MemoryTransport, memory_opener


@pytest.fixture
def transport():
    """In-memory transport that records every write."""
    return MemoryTransport(port="test-port")


@pytest.fixture
def cube(transport):
    """Cube connected to the in-memory transport."""
    return Cube("test-port", opener=memory_opener(transport))


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Config file location inside a temporary directory."""
    return tmp_path / "ledcube" / "config.json"
