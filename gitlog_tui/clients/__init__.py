"""Clients for commit history and the clipboard."""

from .clipboard import ClipboardError, SystemClipboard
from .git_client import GitClient, GitClientError
from .mock_git_client import MockGitClient
from .protocols import ClipboardProtocol, CommitSourceProtocol

__all__ = [
    # Git
    "GitClient",
    "GitClientError",
    "MockGitClient",
    "CommitSourceProtocol",
    # Clipboard
    "ClipboardError",
    "ClipboardProtocol",
    "SystemClipboard",
]
