"""Protocol definitions for client interfaces.

These protocols define the expected interface for real and mock clients,
so the TUI can run against either.
"""

from typing import Protocol

from ..models import Commit


class CommitSourceProtocol(Protocol):
    """Protocol defining the commit history source interface."""

    def get_commits(self) -> list[Commit]:
        """Fetch commits, most recent first."""
        ...

    def describe(self) -> str:
        """Short human-readable name of the source for the header."""
        ...


class ClipboardProtocol(Protocol):
    """Protocol defining the clipboard interface."""

    def copy(self, text: str) -> None:
        """Write text to the clipboard."""
        ...
