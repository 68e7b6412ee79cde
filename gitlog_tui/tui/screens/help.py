"""Help screen for displaying keyboard shortcuts."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

HELP_TEXT = """\
[b]Searching:[/b]
  (type)       Edit the search query
  Enter        Filter commits by the query (fuzzy, case-insensitive)
               With an empty query, select the highlighted commit
  Esc          Clear the search box, then all filters, then quit

  Each search narrows the current list; Esc brings the full history back.
  A query matches when its characters appear in order in
  "<hash> <message>", e.g. [cyan]fb[/cyan] matches "abc123 [cyan]F[/cyan]ix [cyan]b[/cyan]ug".

[b]Navigation:[/b]
  Down/Ctrl+n      Move down
  Up/Ctrl+p        Move up
  PageDown         Page down
  PageUp           Page up
  Ctrl+Home        Go to top
  Ctrl+End         Go to bottom

[b]Other Actions:[/b]
  Ctrl+y       Copy commit hash to clipboard
  F5           Reload history
  F1           This help
  Ctrl+q       Quit
"""


class HelpScreen(Screen):
    """Screen for displaying keyboard shortcuts and help information."""

    CSS = """
    HelpScreen {
        background: $surface;
    }

    #help-container {
        width: 100%;
        height: 100%;
        padding: 1;
    }

    #help-box {
        height: 1fr;
        padding: 1 2;
        border: solid $primary;
    }

    #help-title {
        text-style: bold;
        color: $primary;
        margin-bottom: 1;
    }

    #help-hint {
        dock: bottom;
        height: 1;
        background: $primary-background;
        padding: 0 1;
        text-align: center;
    }
    """

    BINDINGS = [
        Binding("f1", "close", "Close", show=False),
        Binding("escape", "close", "Close"),
        Binding("q", "close", "Close", show=False),
    ]

    def compose(self) -> ComposeResult:
        yield Header()
        yield Container(
            VerticalScroll(
                Static("[b]Keyboard Shortcuts[/b]\n", id="help-title"),
                Static(HELP_TEXT),
                id="help-box",
            ),
            Static("[dim]Press F1 or Esc to close[/dim]", id="help-hint"),
            id="help-container",
        )
        yield Footer()

    def action_close(self) -> None:
        """Close the help screen."""
        self.app.pop_screen()
