"""Shared key bindings for the commit browser."""

from textual.binding import Binding

# Navigation keys must not collide with the search input's own bindings,
# which keeps focus the whole time.
NAVIGATION_BINDINGS = [
    Binding("down", "cursor_down", "Down", show=False),
    Binding("up", "cursor_up", "Up", show=False),
    Binding("ctrl+n", "cursor_down", "Down", show=False),
    Binding("ctrl+p", "cursor_up", "Up", show=False),
    Binding("pagedown", "page_down", "Page Down", show=False),
    Binding("pageup", "page_up", "Page Up", show=False),
    Binding("ctrl+home", "first", "Top", show=False),
    Binding("ctrl+end", "last", "Bottom", show=False),
]
