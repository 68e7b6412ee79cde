"""Shared utilities for gitlog-tui."""

from .fuzzy import fuzzy_filter, fuzzy_match

__all__ = ["fuzzy_filter", "fuzzy_match"]
