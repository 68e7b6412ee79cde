"""Data models for gitlog-tui."""

from .commit import Commit, display_hash, display_message, parse_log_line, searchable_text

__all__ = [
    "Commit",
    "display_hash",
    "display_message",
    "parse_log_line",
    "searchable_text",
]
