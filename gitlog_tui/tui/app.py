"""Main TUI application for gitlog-tui.

Built with Textual. Key presses and worker results become events for the
pure reducer in ``state``; this module only carries out the resulting effects
and keeps the widgets in step with the state.
"""

import logging
from typing import Optional

from rich.markup import escape
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.css.query import NoMatches
from textual.widgets import Footer, Input, ListItem, ListView, Static

from .. import __version__
from ..clients import ClipboardError, ClipboardProtocol, GitClientError, SystemClipboard
from ..clients.protocols import CommitSourceProtocol
from ..config import DisplayConfig
from ..models import Commit
from .constants import NAVIGATION_BINDINGS
from .layout import ColumnWidths, calculate_column_widths, format_commit_row, format_header_row
from .screens import HelpScreen
from .state import (
    ClearFilter,
    ClearInputEffect,
    CopyEffect,
    CopyFailed,
    CopyHash,
    CopySucceeded,
    Event,
    JumpTo,
    MoveCursor,
    Page,
    QueryChanged,
    Quit,
    QuitEffect,
    Reset,
    Select,
    SelectionManager,
    SelectionState,
    SourceFailed,
    Submit,
    reduce,
)

logger = logging.getLogger(__name__)


class CommitListItem(ListItem):
    """A list item displaying one commit row."""

    def __init__(self, commit: Commit, column_widths: ColumnWidths | None = None) -> None:
        """Initialize with a commit.

        Args:
            commit: The commit to display.
            column_widths: Column width configuration for formatting.
        """
        super().__init__()
        self.commit = commit
        self._column_widths = column_widths if column_widths is not None else ColumnWidths()
        if not commit.message:
            self.add_class("-empty-message")

    def compose(self) -> ComposeResult:
        yield Static(format_commit_row(self.commit, self._column_widths), id="row-content")

    def set_column_widths(self, column_widths: ColumnWidths) -> None:
        """Re-format the row for new column widths."""
        self._column_widths = column_widths
        try:
            self.query_one("#row-content", Static).update(
                format_commit_row(self.commit, column_widths)
            )
        except NoMatches:
            pass  # Not composed yet; compose uses the new widths


class GitLogApp(App):
    """Interactive commit history browser."""

    TITLE = "gitlog-tui"
    ENABLE_COMMAND_PALETTE = False
    CSS = """
    Screen {
        background: $surface;
    }

    #app-header {
        dock: top;
        height: 1;
        padding: 0 1;
        text-style: bold;
    }

    #search-input {
        height: 3;
        margin: 0 0;
    }

    #main-container {
        width: 100%;
        height: 1fr;
        padding: 0;
    }

    #commit-list {
        height: 1fr;
        border: solid $primary;
    }

    .commit-header {
        height: 1;
        padding: 0 1;
        background: $primary-background;
        text-style: bold;
    }

    CommitListItem {
        height: 1;
        padding: 0 1;
        background: $surface;
    }

    CommitListItem.-highlight {
        background: $primary-background;
    }

    CommitListItem.-empty-message {
        color: $text-muted;
    }

    #error-message, #empty-message, #loading-indicator {
        width: 100%;
        height: 100%;
        content-align: center middle;
    }

    #error-message {
        color: $error;
    }

    #status-bar {
        height: 1;
        background: $primary-background;
        padding: 0 1;
    }
    """

    BINDINGS = [
        *NAVIGATION_BINDINGS,
        Binding("ctrl+y", "copy_hash", "Copy hash", priority=True),
        Binding("escape", "clear_filter", "Clear filter"),
        Binding("f1", "show_help", "Help"),
        Binding("f5", "refresh", "Reload"),
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
    ]

    def __init__(
        self,
        source: CommitSourceProtocol,
        display: Optional[DisplayConfig] = None,
        clipboard: Optional[ClipboardProtocol] = None,
        is_mock: bool = False,
    ):
        """Initialize the app.

        Args:
            source: Where commits are read from.
            display: Title, colors and labels.
            clipboard: Clipboard used by the copy action.
            is_mock: Whether running against the mock commit source.
        """
        super().__init__()
        self._source = source
        self._display_config = display or DisplayConfig()
        self._clipboard = clipboard if clipboard is not None else SystemClipboard()
        self._is_mock = is_mock
        # Browser state (immutable - replaced on every event)
        self._state = SelectionState()
        self._loading = True
        self._rendered = False
        self._column_widths = ColumnWidths()
        self._styled_item: Optional[CommitListItem] = None

    @property
    def state(self) -> SelectionState:
        """Current browser state."""
        return self._state

    # -------------------------------------------------------------------------
    # Layout
    # -------------------------------------------------------------------------

    def _build_header_text(self) -> str:
        """Build the header text with title, version and repository."""
        return (
            f"{escape(self._display_config.title)} v{__version__} │ "
            f"[cyan]{escape(self._source.describe())}[/cyan]"
        )

    def _build_status_bar_text(self) -> str:
        """Build the status bar text with counts, filters and last message."""
        state = self._state
        parts = []

        if self._is_mock:
            parts.append("[yellow]MOCK[/yellow]")

        if self._loading:
            parts.append("Loading...")
        elif state.is_filtered:
            parts.append(f"[b]{state.visible_count}[/b] / {state.total_count} commits")
            parts.append("Filter: " + " › ".join(escape(q) for q in state.filters))
        else:
            parts.append(f"[b]{state.total_count}[/b] commits")

        if state.status_message:
            parts.append(escape(state.status_message))

        return " │ ".join(parts)

    def compose(self) -> ComposeResult:
        yield Static(self._build_header_text(), id="app-header")
        yield Input(placeholder=self._display_config.placeholder, id="search-input")
        yield Container(
            Static("Loading commits...", id="loading-indicator"),
            id="main-container",
        )
        yield Static(self._build_status_bar_text(), id="status-bar")
        yield Footer()

    async def on_mount(self) -> None:
        """Handle app mount - style the header and load commits."""
        header = self.query_one("#app-header", Static)
        header.styles.color = self._display_config.title_color
        header.styles.background = self._display_config.title_background
        self._column_widths = calculate_column_widths(
            self.size.width, self._display_config.hash_length
        )
        self.query_one("#search-input", Input).focus()
        self.run_worker(self._load_commits(), exclusive=True, group="load")

    def on_resize(self, event) -> None:
        """Handle terminal resize - recalculate column widths."""
        new_widths = calculate_column_widths(event.size.width, self._display_config.hash_length)
        if new_widths == self._column_widths:
            return
        self._column_widths = new_widths
        try:
            self.query_one(".commit-header", Static).update(format_header_row(new_widths))
        except NoMatches:
            pass  # List not rendered
        list_view = self._get_list_view()
        if list_view is not None:
            for child in list_view.children:
                if isinstance(child, CommitListItem):
                    child.set_column_widths(new_widths)

    def _get_list_view(self) -> ListView | None:
        """Get the commit ListView if it exists."""
        try:
            return self.query_one("#commit-list", ListView)
        except NoMatches:
            return None

    def _page_size(self) -> int:
        list_view = self._get_list_view()
        if list_view is None:
            return 1
        return max(1, list_view.content_size.height)

    # -------------------------------------------------------------------------
    # State plumbing
    # -------------------------------------------------------------------------

    def apply_event(self, event: Event) -> None:
        """Reduce an event, carry out its effect and refresh the widgets."""
        previous = self._state
        transition = reduce(previous, event)
        self._state = transition.state
        logger.debug(
            "%s -> cursor=%s visible=%d", event, self._state.cursor_index, self._state.visible_count
        )
        self._sync_view(previous)

        effect = transition.effect
        if isinstance(effect, QuitEffect):
            self.exit()
        elif isinstance(effect, ClearInputEffect):
            self.query_one("#search-input", Input).value = ""
        elif isinstance(effect, CopyEffect):
            self._copy_to_clipboard(effect.text)

    def _sync_view(self, previous: SelectionState) -> None:
        state = self._state
        if self._loading:
            self._update_status_bar()
            return
        if (
            not self._rendered
            or state.visible_records is not previous.visible_records
            or state.error != previous.error
        ):
            self._rendered = True
            self.run_worker(self._render_commits(), exclusive=True, group="render")
        elif state.cursor_index != previous.cursor_index:
            list_view = self._get_list_view()
            if list_view is not None:
                list_view.index = state.cursor_index
                self._apply_selection_style()
        self._update_status_bar()

    def _apply_selection_style(self) -> None:
        """Color the highlighted row with the configured selection color."""
        list_view = self._get_list_view()
        if self._styled_item is not None:
            self._styled_item.styles.color = None
            self._styled_item = None
        if list_view is None:
            return
        item = list_view.highlighted_child
        if isinstance(item, CommitListItem):
            item.styles.color = self._display_config.selected_color
            self._styled_item = item

    def _update_status_bar(self) -> None:
        try:
            self.query_one("#status-bar", Static).update(self._build_status_bar_text())
        except NoMatches:
            pass  # Status bar might not be mounted yet

    async def _load_commits(self) -> None:
        """Read commits from the source once."""
        self._loading = True
        self._rendered = False
        self._update_status_bar()
        try:
            commits = self._source.get_commits()
        except GitClientError as e:
            logger.exception("Failed to read commit history")
            self._loading = False
            self.apply_event(SourceFailed(str(e)))
            return
        self._loading = False
        self.apply_event(Reset(tuple(commits)))

    async def _render_commits(self) -> None:
        """Rebuild the list (or error/empty message) from the state."""
        container = self.query_one("#main-container")
        await container.remove_children()
        self._styled_item = None
        state = self._state

        if state.error:
            await container.mount(
                Static(f"Error: {escape(state.error)}", id="error-message")
            )
            return

        if not state.visible_records:
            text = "No matching commits" if state.is_filtered else "No commits"
            await container.mount(Static(text, id="empty-message"))
            return

        items = [CommitListItem(commit, self._column_widths) for commit in state.visible_records]
        list_view = ListView(*items, initial_index=state.cursor_index, id="commit-list")
        # Keys stay with the search input; the list only mirrors the cursor
        list_view.can_focus = False
        header = Static(format_header_row(self._column_widths), classes="commit-header")
        await container.mount(header, list_view)
        self._apply_selection_style()

    def _copy_to_clipboard(self, text: str) -> None:
        try:
            self._clipboard.copy(text)
        except ClipboardError as e:
            logger.warning("Clipboard copy failed: %s", e)
            self.apply_event(CopyFailed(str(e)))
            self.notify(f"Error copying to clipboard: {e}", severity="error", timeout=3)
            return
        self.apply_event(CopySucceeded(text))
        self.notify("Copied commit hash to clipboard", timeout=2)

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------

    def on_input_changed(self, event: Input.Changed) -> None:
        self.apply_event(QueryChanged(event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.apply_event(Submit())

    def on_list_view_highlighted(self, event: ListView.Highlighted) -> None:
        self._apply_selection_style()

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Handle a click on a row - move the cursor there and select it."""
        if event.list_view.index is not None:
            self.apply_event(JumpTo(event.list_view.index))
        self.apply_event(Select())

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def action_cursor_down(self) -> None:
        self.apply_event(MoveCursor(1))

    def action_cursor_up(self) -> None:
        self.apply_event(MoveCursor(-1))

    def action_page_down(self) -> None:
        self.apply_event(Page(1, self._page_size()))

    def action_page_up(self) -> None:
        self.apply_event(Page(-1, self._page_size()))

    def action_first(self) -> None:
        self.apply_event(JumpTo(0))

    def action_last(self) -> None:
        self.apply_event(JumpTo(-1))

    def action_copy_hash(self) -> None:
        """Copy the selected commit hash to the clipboard."""
        if SelectionManager.selected(self._state) is None:
            self.notify("No commit selected", severity="warning", timeout=2)
            return
        self.apply_event(CopyHash())

    def action_clear_filter(self) -> None:
        """Empty the search box, else clear filters, else quit."""
        if self._state.query:
            self.query_one("#search-input", Input).value = ""
            self.apply_event(QueryChanged(""))
        elif self._state.is_filtered:
            self.apply_event(ClearFilter())
            self.notify("Filter cleared", timeout=2)
        else:
            self.apply_event(Quit())

    async def action_quit(self) -> None:
        """Handle quit action."""
        self.apply_event(Quit())

    def action_refresh(self) -> None:
        """Reload commit history from the source."""
        self.run_worker(self._load_commits(), exclusive=True, group="load")

    def action_show_help(self) -> None:
        """Show help screen."""
        self.push_screen(HelpScreen())
