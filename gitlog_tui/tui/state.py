"""Pure state for the commit browser.

State objects are immutable; managers return new instances. ``reduce`` maps
an input event onto a new state plus an optional effect for the shell to
carry out, so the whole browser can be driven without a terminal.
"""

from dataclasses import dataclass, replace
from typing import Optional, Sequence, Union

from ..models import Commit
from ..utils.fuzzy import fuzzy_filter


@dataclass(frozen=True)
class SelectionState:
    """Commit list, current filter result and cursor.

    Attributes:
        all_records: Every commit read from the source.
        visible_records: Commits currently shown (after filtering).
        cursor_index: Highlighted row, None when nothing is visible.
        query: Text currently typed in the search box.
        filters: Queries applied so far, oldest first.
        status_message: Transient message for the status bar.
        error: Source error shown instead of the list.
        quitting: Set once the user quits; later events are ignored.
    """

    all_records: tuple[Commit, ...] = ()
    visible_records: tuple[Commit, ...] = ()
    cursor_index: Optional[int] = None
    query: str = ""
    filters: tuple[str, ...] = ()
    status_message: Optional[str] = None
    error: Optional[str] = None
    quitting: bool = False

    def __post_init__(self) -> None:
        count = len(self.visible_records)
        if count == 0 and self.cursor_index is not None:
            raise ValueError("cursor_index must be None for an empty list")
        if count and (self.cursor_index is None or not 0 <= self.cursor_index < count):
            raise ValueError(f"cursor_index {self.cursor_index} out of range for {count} rows")

    @property
    def is_filtered(self) -> bool:
        """True when at least one search has narrowed the list."""
        return bool(self.filters)

    @property
    def visible_count(self) -> int:
        return len(self.visible_records)

    @property
    def total_count(self) -> int:
        return len(self.all_records)


def _first_index(records: Sequence[Commit]) -> Optional[int]:
    return 0 if records else None


class SelectionManager:
    """Transitions on SelectionState."""

    @staticmethod
    def reset(state: SelectionState, records: Sequence[Commit]) -> SelectionState:
        """Replace the full record set and show all of it."""
        records = tuple(records)
        return replace(
            state,
            all_records=records,
            visible_records=records,
            cursor_index=_first_index(records),
            error=None,
            filters=(),
        )

    @staticmethod
    def filter(state: SelectionState, query: str) -> SelectionState:
        """Narrow the visible commits to those matching query.

        The search box is always cleared afterwards.
        """
        matches = tuple(fuzzy_filter(state.visible_records, query))
        return replace(
            state,
            visible_records=matches,
            cursor_index=_first_index(matches),
            query="",
            filters=(*state.filters, query),
            status_message=f"{len(matches)} matching commit(s) for '{query}'",
        )

    @staticmethod
    def clear_filter(state: SelectionState) -> SelectionState:
        """Show the full history again."""
        return replace(
            state,
            visible_records=state.all_records,
            cursor_index=_first_index(state.all_records),
            filters=(),
            status_message=None,
        )

    @staticmethod
    def move_cursor(state: SelectionState, delta: int) -> SelectionState:
        """Move the cursor by delta rows, clamped to the list bounds."""
        if state.cursor_index is None:
            return state
        return SelectionManager.move_to(state, state.cursor_index + delta)

    @staticmethod
    def move_to(state: SelectionState, index: int) -> SelectionState:
        """Jump to an absolute row, clamped to the list bounds."""
        if not state.visible_records:
            return state
        index = max(0, min(index, len(state.visible_records) - 1))
        if index == state.cursor_index:
            return state
        return replace(state, cursor_index=index)

    @staticmethod
    def selected(state: SelectionState) -> Optional[Commit]:
        """Commit under the cursor, or None if the list is empty."""
        if state.cursor_index is None:
            return None
        return state.visible_records[state.cursor_index]

    @staticmethod
    def fail(state: SelectionState, message: str) -> SelectionState:
        """Record a commit source failure."""
        return replace(
            state,
            all_records=(),
            visible_records=(),
            cursor_index=None,
            filters=(),
            error=message,
        )

    @staticmethod
    def set_status(state: SelectionState, message: Optional[str]) -> SelectionState:
        return replace(state, status_message=message)


# =============================================================================
# Events
# =============================================================================


@dataclass(frozen=True)
class Reset:
    """Commits were (re)loaded from the source."""

    records: tuple[Commit, ...] = ()


@dataclass(frozen=True)
class SourceFailed:
    """Commits could not be loaded."""

    message: str


@dataclass(frozen=True)
class QueryChanged:
    """The search box text changed."""

    text: str


@dataclass(frozen=True)
class Submit:
    """Enter: search when a query is typed, otherwise select."""


@dataclass(frozen=True)
class Select:
    """Select the commit under the cursor."""


@dataclass(frozen=True)
class MoveCursor:
    delta: int


@dataclass(frozen=True)
class Page:
    """Move one page up (direction -1) or down (direction 1)."""

    direction: int
    page_size: int


@dataclass(frozen=True)
class JumpTo:
    """Jump to the first (position 0) or last (position -1) row."""

    position: int


@dataclass(frozen=True)
class ClearFilter:
    pass


@dataclass(frozen=True)
class CopyHash:
    pass


@dataclass(frozen=True)
class CopySucceeded:
    hash: str


@dataclass(frozen=True)
class CopyFailed:
    message: str


@dataclass(frozen=True)
class Quit:
    pass


Event = Union[
    Reset,
    SourceFailed,
    QueryChanged,
    Submit,
    Select,
    MoveCursor,
    Page,
    JumpTo,
    ClearFilter,
    CopyHash,
    CopySucceeded,
    CopyFailed,
    Quit,
]


# =============================================================================
# Effects
# =============================================================================


@dataclass(frozen=True)
class QuitEffect:
    """Shell should exit."""


@dataclass(frozen=True)
class CopyEffect:
    """Shell should write text to the clipboard and report back."""

    text: str


@dataclass(frozen=True)
class ClearInputEffect:
    """Shell should empty the search box."""


Effect = Union[QuitEffect, CopyEffect, ClearInputEffect]


@dataclass(frozen=True)
class Transition:
    """Result of reducing one event."""

    state: SelectionState
    effect: Optional[Effect] = None


def reduce(state: SelectionState, event: Event) -> Transition:
    """Apply one input event to the browser state.

    Args:
        state: Current state.
        event: Input event from the shell.

    Returns:
        Transition with the new state and an optional effect.
    """
    if state.quitting:
        return Transition(state)

    if isinstance(event, Quit):
        return Transition(replace(state, quitting=True), QuitEffect())

    if isinstance(event, Reset):
        return Transition(SelectionManager.reset(state, event.records))

    if isinstance(event, SourceFailed):
        return Transition(SelectionManager.fail(state, event.message))

    if isinstance(event, QueryChanged):
        return Transition(replace(state, query=event.text))

    if isinstance(event, Submit):
        # Whitespace is part of the query
        if state.query:
            return Transition(SelectionManager.filter(state, state.query), ClearInputEffect())
        return reduce(state, Select())

    if isinstance(event, Select):
        commit = SelectionManager.selected(state)
        if commit is None:
            return Transition(state)
        return Transition(SelectionManager.set_status(state, f"Selected commit: {commit.hash}"))

    if isinstance(event, MoveCursor):
        return Transition(SelectionManager.move_cursor(state, event.delta))

    if isinstance(event, Page):
        step = max(1, event.page_size)
        return Transition(SelectionManager.move_cursor(state, step * event.direction))

    if isinstance(event, JumpTo):
        if event.position < 0:
            return Transition(SelectionManager.move_to(state, len(state.visible_records) - 1))
        return Transition(SelectionManager.move_to(state, event.position))

    if isinstance(event, ClearFilter):
        if not state.is_filtered:
            return Transition(state)
        return Transition(SelectionManager.clear_filter(state))

    if isinstance(event, CopyHash):
        commit = SelectionManager.selected(state)
        if commit is None:
            return Transition(state)
        return Transition(state, CopyEffect(commit.hash))

    if isinstance(event, CopySucceeded):
        return Transition(
            SelectionManager.set_status(state, f"Copied commit hash to clipboard: {event.hash}")
        )

    if isinstance(event, CopyFailed):
        return Transition(
            SelectionManager.set_status(state, f"Error copying to clipboard: {event.message}")
        )

    raise TypeError(f"Unknown event: {event!r}")
