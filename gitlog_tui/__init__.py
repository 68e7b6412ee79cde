"""Interactive terminal browser for git commit history."""

__version__ = "0.1.0"
