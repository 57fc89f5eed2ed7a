"""
Version control integration for convcommit.

Provides :class:`GitClient` for reading commit messages out of a Git
repository.
"""

from .git_client import GitClient, GitError  # noqa: F401
