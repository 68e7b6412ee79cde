"""CLI helpers for gitlog-tui."""
