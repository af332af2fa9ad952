import shutil
import subprocess
from pathlib import Path

import pytest


@pytest.fixture
def fake_repo(tmp_path: Path) -> Path:
    """A directory that looks like a repository root (has ``.git/hooks``)."""
    (tmp_path / ".git" / "hooks").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """A real, empty git repository with a committer identity configured.

    Skips the test when ``git`` is not installed.
    """
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    repo = tmp_path / "repo"
    repo.mkdir()
    for args in (
        ["init", "-q"],
        ["config", "user.email", "test@example.com"],
        ["config", "user.name", "Test User"],
        ["config", "commit.gpgsign", "false"],
    ):
        subprocess.run(["git"] + args, cwd=repo, check=True, capture_output=True)
    return repo


@pytest.fixture
def no_editor(monkeypatch):
    """Make sure no editor is configured for the test."""
    monkeypatch.delenv("VISUAL", raising=False)
    monkeypatch.delenv("EDITOR", raising=False)
