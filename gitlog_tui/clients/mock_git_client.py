"""Mock commit source for offline use and tests."""

from typing import Optional

from ..models import Commit

_SAMPLE_MESSAGES = [
    "Fix off-by-one in pagination",
    "Add fuzzy search to commit list",
    "Refactor config loading",
    "Update README with keybindings",
    "Handle empty repositories gracefully",
    "Bump textual to latest release",
    "Copy commit hash to clipboard",
    "Clamp cursor after filtering",
    "Support narrow terminals",
    "Initial commit",
]


def _fake_hash(index: int) -> str:
    return f"{index * 2654435761 % 2**32:08x}".ljust(40, "0")


class MockGitClient:
    """Serves a fixed list of commits instead of running git."""

    def __init__(
        self,
        commits: Optional[list[Commit]] = None,
        max_commits: Optional[int] = None,
    ):
        """Initialize the mock client.

        Args:
            commits: Commits to serve. Defaults to generated sample commits.
            max_commits: Optional cap on the number of commits returned.
        """
        if commits is None:
            commits = [
                Commit(hash=_fake_hash(i + 1), message=msg)
                for i, msg in enumerate(_SAMPLE_MESSAGES)
            ]
        self._commits = list(commits)
        self._max_commits = max_commits
        self.call_count = 0

    def describe(self) -> str:
        return "mock"

    def get_commits(self) -> list[Commit]:
        self.call_count += 1
        if self._max_commits is not None:
            return self._commits[: self._max_commits]
        return list(self._commits)
