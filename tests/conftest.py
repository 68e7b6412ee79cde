"""Shared pytest fixtures for gitlog-tui tests."""

import pytest

from gitlog_tui.clients import ClipboardError, MockGitClient
from gitlog_tui.models import Commit


class FakeClipboard:
    """Clipboard that records copies instead of touching the system."""

    def __init__(self, error: str | None = None):
        self.copied: list[str] = []
        self._error = error

    def copy(self, text: str) -> None:
        if self._error:
            raise ClipboardError(self._error)
        self.copied.append(text)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep GITLOG_TUI_* variables from the developer's shell out of tests."""
    monkeypatch.delenv("GITLOG_TUI_REPO", raising=False)
    monkeypatch.delenv("GITLOG_TUI_LIMIT", raising=False)


@pytest.fixture
def sample_commits():
    """Two commits used throughout the matcher tests."""
    return [
        Commit(hash="abc123", message="Fix bug"),
        Commit(hash="def456", message="Add feature"),
    ]


@pytest.fixture
def history():
    """A longer history, most recent first."""
    return [
        Commit(hash="a1b2c3d4e5f60718293a4b5c6d7e8f9012345678", message="Fix login redirect"),
        Commit(hash="b2c3d4e5f60718293a4b5c6d7e8f9012345678a1", message="Add fuzzy search"),
        Commit(hash="c3d4e5f60718293a4b5c6d7e8f9012345678a1b2", message="Refactor config loading"),
        Commit(hash="d4e5f60718293a4b5c6d7e8f9012345678a1b2c3", message=""),
        Commit(hash="e5f60718293a4b5c6d7e8f9012345678a1b2c3d4", message="Update README | docs"),
        Commit(hash="f60718293a4b5c6d7e8f9012345678a1b2c3d4e5", message="Initial commit"),
    ]


@pytest.fixture
def mock_source(history):
    """Mock commit source serving the history fixture."""
    return MockGitClient(commits=history)


@pytest.fixture
def fake_clipboard():
    return FakeClipboard()


@pytest.fixture
def failing_clipboard():
    return FakeClipboard(error="no clipboard tool found")
