"""Layout constants and row formatting for the commit list.

Column widths follow the terminal width; below the minimum usable width the
minimums are used and text is truncated instead of failing.
"""

from dataclasses import dataclass
from typing import Optional

from rich.markup import escape

from ..models import Commit, display_hash, display_message

FULL_HASH_LENGTH = 40
MIN_HASH = 7
MIN_MESSAGE = 10
ELLIPSIS = "…"


@dataclass(frozen=True)
class ColumnWidths:
    """Column widths for commit rows."""

    hash: int = FULL_HASH_LENGTH
    message: int = 60

    # Spacing between columns
    col_spacing: int = 2

    @property
    def total_width(self) -> int:
        """Total width of all columns including spacing."""
        return self.hash + self.col_spacing + self.message


def calculate_column_widths(terminal_width: int, hash_length: Optional[int] = None) -> ColumnWidths:
    """Calculate column widths based on terminal width.

    Args:
        terminal_width: Available terminal width in characters.
        hash_length: Preferred hash width, None for the full hash.

    Returns:
        ColumnWidths fitting the terminal, or minimum widths if it is too narrow.
    """
    # Account for list border and item padding (2 chars on each side)
    available = terminal_width - 4
    hash_width = min(hash_length or FULL_HASH_LENGTH, FULL_HASH_LENGTH)
    spacing = ColumnWidths.col_spacing

    remaining = available - hash_width - spacing
    if remaining >= MIN_MESSAGE:
        return ColumnWidths(hash=hash_width, message=remaining)

    # Too narrow - shrink the hash first, then fall back to minimums
    hash_width = max(MIN_HASH, available - spacing - MIN_MESSAGE)
    hash_width = min(hash_width, FULL_HASH_LENGTH)
    return ColumnWidths(hash=hash_width, message=MIN_MESSAGE)


def truncate(text: str, width: int) -> str:
    """Cut text to width, marking the cut with an ellipsis."""
    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    if width == 1:
        return text[:1]
    return text[: width - 1] + ELLIPSIS


def format_commit_row(commit: Commit, widths: ColumnWidths) -> str:
    """Format a commit as a single list row (Rich markup).

    Args:
        commit: Commit to format.
        widths: Column widths to use.

    Returns:
        Row text with the message escaped for markup.
    """
    sp = " " * widths.col_spacing
    hash_text = display_hash(commit, widths.hash).ljust(widths.hash)
    message = truncate(display_message(commit), widths.message)
    if not commit.message:
        return f"[b]{hash_text}[/b]{sp}[dim]{escape(message)}[/dim]"
    return f"[b]{hash_text}[/b]{sp}{escape(message)}"


def format_header_row(widths: ColumnWidths) -> str:
    """Format the column header row."""
    sp = " " * widths.col_spacing
    return f"{'Hash':<{widths.hash}}{sp}{'Message':<{widths.message}}"
