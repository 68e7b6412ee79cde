"""Command line entry point for gitlog-tui."""

import logging
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .cli.formatters import echo_commits, echo_error, echo_success, echo_warning
from .clients import GitClient, GitClientError, MockGitClient
from .config import Config, ConfigError, load_config
from .utils.fuzzy import fuzzy_filter

logger = logging.getLogger(__name__)


def _setup_logging(log_path: Path) -> None:
    """Send DEBUG logs to a file so they do not corrupt the terminal UI."""
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=log_path,
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def get_source(ctx: click.Context):
    """Lazily create the commit source.

    Args:
        ctx: Click context with config and mock flags.

    Returns:
        GitClient, or MockGitClient in mock mode.
    """
    if "source" not in ctx.obj:
        cfg: Config = ctx.obj["config"]
        if ctx.obj.get("mock", False):
            ctx.obj["source"] = MockGitClient(max_commits=cfg.git.limit)
        else:
            ctx.obj["source"] = GitClient(cfg.git)
    return ctx.obj["source"]


@click.group(invoke_without_command=True)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config TOML file.",
)
@click.option(
    "--repo",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Repository directory (default: current directory).",
)
@click.option("-n", "--limit", type=click.IntRange(min=1), default=None, help="Max commits to load.")
@click.option("--mock", is_flag=True, help="Use sample commits instead of running git.")
@click.option("-v", "--verbose", is_flag=True, help="Write debug logs to the log file.")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Log file used with --verbose.",
)
@click.version_option(__version__, prog_name="gitlog-tui")
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Optional[Path],
    repo: Optional[Path],
    limit: Optional[int],
    mock: bool,
    verbose: bool,
    log_file: Optional[Path],
) -> None:
    """gitlog-tui - browse and fuzzy-search git commit history.

    Run without a command to open the interactive browser.
    """
    try:
        cfg = load_config(config_path)
    except ConfigError as e:
        echo_error(str(e))
        ctx.exit(1)

    if repo is not None:
        cfg.git.repo_path = repo
    if limit is not None:
        cfg.git.limit = limit
    if verbose:
        _setup_logging(log_file or cfg.log_path)
        logger.debug("Starting gitlog-tui %s with repo=%s", __version__, cfg.git.repo_path)

    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg
    ctx.obj["mock"] = mock

    if ctx.invoked_subcommand is None:
        ctx.invoke(browse)


@main.command()
@click.pass_context
def browse(ctx: click.Context) -> None:
    """Open the interactive commit browser."""
    from .tui.app import GitLogApp

    cfg: Config = ctx.obj["config"]
    app = GitLogApp(
        source=get_source(ctx),
        display=cfg.display,
        is_mock=ctx.obj.get("mock", False),
    )
    app.run()


@main.command("log")
@click.option("-q", "--query", default="", help="Fuzzy filter applied to '<hash> <message>'.")
@click.pass_context
def log_cmd(ctx: click.Context, query: str) -> None:
    """Print commit history, optionally fuzzy-filtered, without the TUI."""
    cfg: Config = ctx.obj["config"]
    try:
        commits = get_source(ctx).get_commits()
    except GitClientError as e:
        echo_error(f"Error: {e}")
        ctx.exit(1)

    matches = fuzzy_filter(commits, query)
    if not matches:
        echo_warning("No matching commits" if query else "No commits")
        return
    echo_commits(matches, cfg.display.hash_length)
    if query:
        echo_success(f"{len(matches)} of {len(commits)} commits match '{query}'")


if __name__ == "__main__":
    main()
