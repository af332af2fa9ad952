"""
Version control system (VCS) integration.

This package contains the Git client used to locate the repository and
its hooks directory, list staged files and create commits.
"""

from .git_client import CommitResult, GitClient, GitError  # noqa: F401
