"""TUI screens for gitlog-tui."""

from .help import HelpScreen

__all__ = ["HelpScreen"]
