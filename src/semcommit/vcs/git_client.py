"""
Git client implementation for semcommit.

This module wraps the few Git operations the tool needs: locating the
repository and its hooks directory, listing staged files and creating a
commit. All subprocess calls go through :meth:`GitClient._run` so that
unit tests can mock them easily.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional


logger = logging.getLogger(__name__)
# Attach a null handler to avoid logging errors when the root logger is not
# configured. Logs will propagate to the root when configured by the CLI.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class CommitResult:
    """Outcome of a ``git commit`` attempt."""

    success: bool
    stderr: str = ""


class GitError(Exception):
    """Raised when a Git command fails."""

    pass


class GitClient:
    """Client for interacting with a Git repository."""

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
            if (current / ".git").exists():
                return current
            if current.parent == current:
                # reached filesystem root
                return None
            current = current.parent

    def hooks_dir(self) -> Path:
        """Return the directory Git reads hook scripts from.

        Asks Git rather than assuming ``.git/hooks`` so that linked
        worktrees, submodules (where ``.git`` is a file) and
        ``core.hooksPath`` resolve to the directory Git actually uses.

        Raises
        ------
        GitError
            If ``git rev-parse`` fails.
        """
        result = self._run(["rev-parse", "--git-path", "hooks"], check=True)
        path = Path(result.stdout.strip())
        if not path.is_absolute():
            path = self.repo_root / path
        return path

    # ------------------------------------------------------------------
    # Basic Git commands
    # ------------------------------------------------------------------
    def _run(self, args: List[str], check: bool = True) -> subprocess.CompletedProcess:
        """Run a Git command in the repository root.

        Raises
        ------
        GitError
            If the command exits with a non-zero status when ``check`` is
            True, or if the ``git`` executable cannot be started.
        """
        full_cmd = ["git"] + args
        logger.debug("Executing Git command: %s", " ".join(full_cmd[:2]))
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
            logger.error("Could not execute git: %s", e)
            raise GitError(f"Could not execute git: {e}") from e

        if check and result.returncode != 0:
            logger.error(
                "Git command failed: %s\nSTDOUT: %s\nSTDERR: %s",
                " ".join(full_cmd[:2]),
                result.stdout,
                result.stderr,
            )
            raise GitError(result.stderr.strip() or result.stdout.strip())
        return result

    # ------------------------------------------------------------------
    # Staging and committing
    # ------------------------------------------------------------------
    def staged_files(self) -> List[str]:
        """Return paths of added, copied or modified files in the index.

        Raises
        ------
        GitError
            If ``git diff --cached`` fails.
        """
        result = self._run(["diff", "--cached", "--name-only", "--diff-filter=ACM"], check=True)
        return [line for line in result.stdout.splitlines() if line.strip()]

    def commit(self, message: str) -> CommitResult:
        """Create a commit from the staged changes with ``message``.

        The message is passed as a single ``-m`` argument and is not
        validated here; the installed ``commit-msg`` hook does that as
        part of ``git commit``. Failures are reported in the result
        rather than raised so the caller can show Git's own diagnostics.
        """
        try:
            result = self._run(["commit", "-m", message], check=False)
        except GitError as exc:
            return CommitResult(success=False, stderr=str(exc))
        if result.returncode == 0:
            logger.debug("Commit created: %s", result.stdout.strip())
            return CommitResult(success=True, stderr=result.stderr)
        # "nothing to commit" and similar are reported on stdout.
        diagnostics = result.stderr or result.stdout
        return CommitResult(success=False, stderr=diagnostics)
