"""Shared fixtures for fanlog test suite."""
import tempfile

import pytest

from fanlog.errors import WriteError
from fanlog.transports import MemoryTransport, Transport


class FailingTransport(Transport):
    """Transport whose every write fails."""

    def __init__(self, name: str = "broken", interactive: bool = False):
        self.name = name
        self._interactive = interactive
        self.attempts = 0

    @property
    def is_interactive(self) -> bool:
        return self._interactive

    def write(self, data: str) -> None:
        self.attempts += 1
        raise WriteError(self.name, BrokenPipeError("broken pipe"))


@pytest.fixture(autouse=True)
def plain_environment(monkeypatch):
    """Keep terminal detection independent of the CI environment."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("TTY_COMPATIBLE", raising=False)
    monkeypatch.delenv("FANLOG_CONFIG", raising=False)


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory, cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def plain():
    """A recording transport that receives raw text."""
    return MemoryTransport(name="plain", interactive=False)


@pytest.fixture
def tty():
    """A recording transport that receives pretty output."""
    return MemoryTransport(name="tty", interactive=True)


@pytest.fixture
def failing():
    return FailingTransport()
