"""Git client that reads commit history by running ``git log``."""

import logging
import subprocess
from pathlib import Path
from typing import Optional

from ..config import GitConfig
from ..models import Commit, parse_log_line

logger = logging.getLogger(__name__)

LOG_FORMAT = "--pretty=format:%H|%s"


class GitClientError(Exception):
    """Raised when commit history cannot be read."""


class GitClient:
    """Reads commit history from a local repository."""

    def __init__(self, config: Optional[GitConfig] = None):
        """Initialize the client.

        Args:
            config: Git configuration (repository path, limit, executable).
        """
        self._config = config or GitConfig()

    @property
    def repo_path(self) -> Path:
        return self._config.repo_path

    def describe(self) -> str:
        """Repository directory name, for the header."""
        return self.repo_path.resolve().name or str(self.repo_path)

    def _build_command(self) -> list[str]:
        cmd = [self._config.executable, "log", LOG_FORMAT]
        if self._config.limit is not None:
            cmd.extend(["-n", str(self._config.limit)])
        return cmd

    def get_commits(self) -> list[Commit]:
        """Run ``git log`` once and parse its output.

        Returns:
            Commits, most recent first.

        Raises:
            GitClientError: If git is missing, the path is not a repository,
                or the command fails.
        """
        cmd = self._build_command()
        logger.debug("Running %s in %s", cmd, self.repo_path)
        try:
            result = subprocess.run(
                cmd,
                cwd=self.repo_path,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=True,
            )
        except (FileNotFoundError, NotADirectoryError) as e:
            if not self.repo_path.is_dir():
                raise GitClientError(f"Repository path does not exist: {self.repo_path}") from e
            raise GitClientError(f"git executable not found: {self._config.executable}") from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            raise GitClientError(stderr or f"git log failed with exit code {e.returncode}") from e

        commits = []
        for line in result.stdout.splitlines():
            commit = parse_log_line(line)
            if commit is not None:
                commits.append(commit)
        logger.debug("Read %d commits from %s", len(commits), self.repo_path)
        return commits
