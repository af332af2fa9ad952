"""
Installation of the generated hooks into a repository.

:func:`install_hooks` writes the ``pre-commit`` and ``commit-msg``
scripts into the hooks directory, replacing any existing hooks of the
same name, and marks them executable where the platform has an
executable bit.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, List

from semcommit.config.loader import GateSettings
from semcommit.hooks.templates import render_commit_msg, render_pre_commit


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


PRE_COMMIT = "pre-commit"
COMMIT_MSG = "commit-msg"
EXECUTABLE_MODE = 0o755


class HookInstallError(Exception):
    """Raised when a hook script cannot be written."""

    pass


def render_hooks(settings: GateSettings) -> Dict[str, str]:
    """Return a mapping of hook file name to script contents."""
    return {
        PRE_COMMIT: render_pre_commit(settings),
        COMMIT_MSG: render_commit_msg(),
    }


def make_executable(path: Path) -> None:
    """Set ``rwxr-xr-x`` on ``path``. Does nothing on Windows."""
    if os.name == "nt":
        return
    os.chmod(path, EXECUTABLE_MODE)


def install_hooks(hooks_dir: Path, settings: GateSettings) -> List[Path]:
    """Write both hook scripts into ``hooks_dir``.

    Parameters
    ----------
    hooks_dir : Path
        Target directory, usually ``<repo>/.git/hooks``. It is created if
        missing.
    settings : GateSettings
        Checks run by the pre-commit hook.

    Returns
    -------
    List[Path]
        Paths of the written scripts, ``pre-commit`` first.

    Raises
    ------
    HookInstallError
        If the directory or a script cannot be written.
    """
    written: List[Path] = []
    try:
        hooks_dir.mkdir(parents=True, exist_ok=True)
        for name, script in render_hooks(settings).items():
            path = hooks_dir / name
            if path.exists() and path.read_text(encoding="utf-8", errors="replace") != script:
                logger.info("Replacing existing %s hook", name)
            # Always LF, also on Windows.
            with open(path, "w", encoding="utf-8", newline="\n") as f:
                f.write(script)
            make_executable(path)
            logger.debug("Installed %s", path)
            written.append(path)
    except OSError as exc:
        logger.error("Failed to install hooks into %s: %s", hooks_dir, exc)
        raise HookInstallError(f"Could not write hooks to {hooks_dir}: {exc}") from exc
    return written
