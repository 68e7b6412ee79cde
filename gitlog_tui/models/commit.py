"""Commit record and the strings derived from it."""

from dataclasses import dataclass
from typing import Optional

# Separator used in the git log pretty format (%H|%s)
LOG_FIELD_SEPARATOR = "|"


@dataclass(frozen=True)
class Commit:
    """A single commit from the repository history."""

    hash: str
    message: str = ""

    def __post_init__(self) -> None:
        if not self.hash:
            raise ValueError("Commit hash must not be empty")


def searchable_text(commit: Commit) -> str:
    """Text a search query is matched against: hash and message."""
    return f"{commit.hash} {commit.message}"


def display_hash(commit: Commit, length: Optional[int] = None) -> str:
    """Hash for display, abbreviated to length when given."""
    if length is None or length <= 0:
        return commit.hash
    return commit.hash[:length]


def display_message(commit: Commit) -> str:
    """Message for display, with a placeholder for empty messages."""
    return commit.message or "(no message)"


def parse_log_line(line: str) -> Optional[Commit]:
    """Parse one ``%H|%s`` line of git log output.

    Only the first separator splits, so messages may contain ``|``.

    Returns:
        Commit, or None for blank or malformed lines.
    """
    parts = line.rstrip("\r").split(LOG_FIELD_SEPARATOR, 1)
    if len(parts) != 2 or not parts[0].strip():
        return None
    return Commit(hash=parts[0].strip(), message=parts[1])
