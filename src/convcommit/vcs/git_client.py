"""
Git client implementation for convcommit.

Reads raw commit messages out of a Git repository so they can be
handed to the parser. All subprocess calls go through
:meth:`GitClient._run` so that unit tests can mock them easily.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional


logger = logging.getLogger(__name__)
# Null handler only; messages propagate once the CLI configures logging.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


class GitError(Exception):
    """Raised when a Git command fails."""

    pass


class GitClient:
    """Client for reading commit messages from a Git repository."""

    def __init__(self, repo_root: Path) -> None:
        self.repo_root = repo_root

    # ------------------------------------------------------------------
    # Static helpers
    # ------------------------------------------------------------------
    @staticmethod
    def is_repo(path: Path) -> bool:
        """Return True if ``path`` is the root of a Git repository."""
        return (path / ".git").exists()

    @staticmethod
    def find_repo_root(start: Path) -> Optional[Path]:
        """Find the root of the Git repository starting from ``start``.

        Walk upwards until a ``.git`` entry is found or the filesystem
        root is reached.
        """
        current = start.resolve()
        while True:
            if GitClient.is_repo(current):
                return current
            if current.parent == current:
                return None
            current = current.parent

    # ------------------------------------------------------------------
    # Git commands
    # ------------------------------------------------------------------
    def _run(self, args: List[str]) -> subprocess.CompletedProcess:
        """Run a Git command in the repository root.

        Raises
        ------
        GitError
            If git cannot be started or the command exits with a
            non-zero status.
        """
        full_cmd = ["git"] + args
        logger.debug("Executing Git command: %s", " ".join(full_cmd))
        try:
            result = subprocess.run(
                full_cmd,
                cwd=self.repo_root,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            logger.error("Failed to run git: %s", e)
            raise GitError(f"Failed to run git: {e}") from e

        if result.returncode != 0:
            logger.error(
                "Git command failed: %s\nSTDOUT: %s\nSTDERR: %s",
                " ".join(full_cmd),
                result.stdout,
                result.stderr,
            )
            raise GitError(result.stderr.strip() or result.stdout.strip())
        return result

    def get_commit_message(self, rev: str = "HEAD") -> str:
        """Return the raw message of the commit ``rev``.

        Parameters
        ----------
        rev : str
            Any revision understood by ``git log`` (defaults to HEAD).

        Raises
        ------
        GitError
            If ``rev`` looks like an option or cannot be resolved.
        """
        if rev.startswith("-"):
            raise GitError(f"Invalid revision {rev!r}: must not start with '-'")
        result = self._run(["log", "-1", "--format=%B", rev, "--"])
        return result.stdout
