"""CLI output formatters."""

from __future__ import annotations

from typing import Optional

import click

from ..models import Commit, display_hash


def format_commit_line(commit: Commit, hash_length: Optional[int] = None) -> str:
    """Format a commit for plain CLI output: ``<hash>  <message>``."""
    return f"{click.style(display_hash(commit, hash_length), fg='yellow')}  {commit.message}"


def echo_success(message: str) -> None:
    """Echo a success message in green."""
    click.echo(click.style(f"✓ {message}", fg="green"))


def echo_error(message: str) -> None:
    """Echo an error message in red."""
    click.echo(click.style(f"✗ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    """Echo a warning message in yellow."""
    click.echo(click.style(f"⚠ {message}", fg="yellow"))


def echo_commits(commits: list[Commit], hash_length: Optional[int] = None) -> None:
    """Echo commits one per line."""
    for commit in commits:
        click.echo(format_commit_line(commit, hash_length))
