"""
Pytest configuration and shared fixtures.
"""

import os
from unittest.mock import MagicMock

import pytest

from pmsh.builtin import ShellState
from pmsh.history import HistoryManager
from pmsh.line_source import LineEvent


@pytest.fixture(autouse=True)
def no_color(monkeypatch):
    """Keep prompts and messages free of escape codes."""
    monkeypatch.setenv("NO_COLOR", "1")


@pytest.fixture
def home(tmp_path, monkeypatch):
    """
    Point HOME at an empty temporary directory.

    Returns:
        Path of the fake home directory
    """
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    return str(home_dir)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """
    Run the test inside tmp_path; the previous cwd comes back afterwards.

    Returns:
        Real path of the working directory
    """
    monkeypatch.chdir(tmp_path)
    return os.path.realpath(str(tmp_path))


@pytest.fixture
def mock_logger():
    return MagicMock()


@pytest.fixture
def history_mgr(home, mock_logger):
    return HistoryManager(logger=mock_logger)


@pytest.fixture
def state():
    return ShellState()


class FakeLineSource:
    """Replays scripted events and records what the shell asked of it."""

    def __init__(self, events):
        self._events = [
            LineEvent.line(e) if isinstance(e, str) else e for e in events
        ]
        self.prompts = []
        self.recalled = []

    def read_line(self, prompt):
        self.prompts.append(prompt)
        if not self._events:
            return LineEvent.eof()
        return self._events.pop(0)

    def add_history(self, line):
        self.recalled.append(line)


class FakeLauncher:
    """Records argv lists; answers with a fixed status or raises."""

    def __init__(self, status=0, error=None):
        self.status = status
        self.error = error
        self.calls = []

    def launch(self, argv):
        self.calls.append(list(argv))
        if self.error is not None:
            raise self.error
        return self.status


@pytest.fixture
def fake_line_source():
    return FakeLineSource


@pytest.fixture
def fake_launcher():
    return FakeLauncher
