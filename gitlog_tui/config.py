"""Configuration loading for gitlog-tui.

Settings come from a TOML file, then environment variables, then CLI options
(applied by the caller), each layer overriding the previous one.
"""

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "gitlog-tui"
DEFAULT_CONFIG_PATH = CONFIG_DIR / "config.toml"
DEFAULT_LOG_PATH = CONFIG_DIR / "gitlog-tui.log"


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or is invalid."""


@dataclass
class GitConfig:
    """Where and how commit history is read."""

    repo_path: Path = field(default_factory=lambda: Path("."))
    limit: Optional[int] = None
    executable: str = "git"


@dataclass
class DisplayConfig:
    """Colors and labels used when rendering the browser."""

    title: str = "Git commit browser"
    title_color: str = "#FAFAFA"
    title_background: str = "#8f157b"
    selected_color: str = "#FF7F50"
    placeholder: str = "Search commits..."
    # None shows the full 40-char hash
    hash_length: Optional[int] = None


@dataclass
class Config:
    """Top-level configuration."""

    git: GitConfig = field(default_factory=GitConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    log_path: Path = DEFAULT_LOG_PATH


def _parse_limit(value: Any, source: str) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        limit = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid limit in {source}: {value!r}") from e
    if limit < 1:
        raise ConfigError(f"Limit in {source} must be positive, got {limit}")
    return limit


def _build_git_config(data: dict[str, Any]) -> GitConfig:
    cfg = GitConfig()
    if "repo_path" in data:
        cfg.repo_path = Path(data["repo_path"]).expanduser()
    if "limit" in data:
        cfg.limit = _parse_limit(data["limit"], "[git] limit")
    if "executable" in data:
        cfg.executable = str(data["executable"])
    return cfg


def _build_display_config(data: dict[str, Any]) -> DisplayConfig:
    cfg = DisplayConfig()
    for name in ("title", "title_color", "title_background", "selected_color", "placeholder"):
        if name in data:
            setattr(cfg, name, str(data[name]))
    if "hash_length" in data:
        hash_length = data["hash_length"]
        if hash_length is not None and (not isinstance(hash_length, int) or hash_length < 4):
            raise ConfigError(f"[display] hash_length must be an integer >= 4, got {hash_length!r}")
        cfg.hash_length = hash_length
    return cfg


def _apply_env_overrides(config: Config) -> None:
    """Apply GITLOG_TUI_* environment variables on top of file settings."""
    repo = os.environ.get("GITLOG_TUI_REPO")
    if repo:
        config.git.repo_path = Path(repo).expanduser()
    limit = os.environ.get("GITLOG_TUI_LIMIT")
    if limit:
        config.git.limit = _parse_limit(limit, "GITLOG_TUI_LIMIT")


def load_config(path: Optional[Path] = None) -> Config:
    """Load configuration from a TOML file and the environment.

    Args:
        path: Config file path. Defaults to ~/.config/gitlog-tui/config.toml.
            A missing default file is not an error; a missing explicit file is.

    Returns:
        Loaded Config.

    Raises:
        ConfigError: If the file is unreadable or contains invalid values.
    """
    explicit = path is not None
    path = Path(path) if path is not None else DEFAULT_CONFIG_PATH

    data: dict[str, Any] = {}
    if path.exists():
        try:
            with path.open("rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        logger.debug("Loaded config from %s", path)
    elif explicit:
        raise ConfigError(f"Config file not found: {path}")

    config = Config(
        git=_build_git_config(data.get("git", {})),
        display=_build_display_config(data.get("display", {})),
    )
    if "log_path" in data:
        config.log_path = Path(data["log_path"]).expanduser()

    _apply_env_overrides(config)
    return config
