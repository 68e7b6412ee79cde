"""Fuzzy matching utilities."""

from typing import Sequence

from ..models import Commit, searchable_text


def fuzzy_match(query: str, text: str) -> bool:
    """Fuzzy match: all query chars must appear in text in order (fzf-style).

    Both sides are case-folded first, so the comparison is case-insensitive
    and works on code points rather than bytes.

    Args:
        query: Characters to search for.
        text: Text to search in.

    Returns:
        True if all query chars appear in text in order.
    """
    query = query.casefold()
    text = text.casefold()
    query_idx = 0
    for char in text:
        if query_idx < len(query) and char == query[query_idx]:
            query_idx += 1
    return query_idx == len(query)


def fuzzy_filter(commits: Sequence[Commit], query: str) -> list[Commit]:
    """Keep the commits whose searchable text fuzzy-matches the query.

    Matches keep their original relative order (most recent first for
    ``git log`` output); nothing is re-ranked.

    Args:
        commits: Commits to filter.
        query: Search query. Empty matches everything.

    Returns:
        New list of matching commits.
    """
    if not query:
        return list(commits)
    return [commit for commit in commits if fuzzy_match(query, searchable_text(commit))]
