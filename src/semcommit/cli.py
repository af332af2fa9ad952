"""
Command line interface for semcommit.

This module defines the two entry points of the tool:

``semcommit`` (:func:`main`)
    Walks the user through composing a Conventional Commits message,
    shows a preview, asks for confirmation and creates the commit.

``semcommit-setup`` (:func:`setup`)
    Installs the ``pre-commit`` and ``commit-msg`` gate scripts into the
    current repository.

Exit codes are defined below; everything else in the package raises
exceptions that are translated here.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import click

from semcommit import __version__
from semcommit.compose.composer import compose
from semcommit.compose.prompts import ClickPromptProvider, PromptAborted
from semcommit.config.loader import PRESETS, ConfigError, load_gate_settings
from semcommit.hooks.installer import HookInstallError, install_hooks
from semcommit.message.serializer import serialize
from semcommit.vcs.git_client import GitClient, GitError

# Create a module-level logger with a null handler so that importing the
# CLI never emits "no handler" warnings. The commands configure logging.
logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------
EXIT_SUCCESS = 0
EXIT_GENERIC_ERROR = 1
EXIT_NO_REPO = 3
EXIT_CONFIG_ERROR = 5
EXIT_VCS_FAILURE = 6
EXIT_CANCELLED = 130


# ---------------------------------------------------------------------------
# Status display utilities
# ---------------------------------------------------------------------------

def print_info(message: str, indent: int = 0):
    """Print an info message."""
    prefix = "  " * indent
    click.echo(f"{prefix}ℹ {message}", err=False)


def print_success(message: str, indent: int = 0):
    """Print a success message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✅ {message}", err=False)


def print_warning(message: str, indent: int = 0):
    """Print a warning message."""
    prefix = "  " * indent
    click.echo(f"{prefix}⚠ {message}", err=False)


def print_error(message: str, indent: int = 0):
    """Print an error message."""
    prefix = "  " * indent
    click.echo(f"{prefix}❌ {message}", err=True)


def print_message_preview(message: str):
    """Print the commit message between two rules."""
    rule = "─" * 37
    click.echo("\n📝 Commit Message Preview:\n")
    click.echo(rule)
    click.echo(message.rstrip("\n"))
    click.echo(rule + "\n")


def configure_logging(verbose: bool) -> None:
    # force=True so repeated invocations (tests) reconfigure handlers.
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        force=True,
    )


# ---------------------------------------------------------------------------
# Core functionality
# ---------------------------------------------------------------------------

def detect_repo(start_dir: Path) -> Path:
    """Return the root of the Git repository containing ``start_dir``.

    Raises
    ------
    click.exceptions.Exit
        With code EXIT_NO_REPO if no repository is found.
    """
    repo_root = GitClient.find_repo_root(start_dir)
    if repo_root is None:
        print_error("Not a git repository!")
        print_error("Run this from inside your project.", indent=1)
        raise click.exceptions.Exit(EXIT_NO_REPO)
    logger.debug("Repository root: %s", repo_root)
    return repo_root


def warn_if_nothing_staged(client: GitClient) -> None:
    """Warn early when the index is empty; git has the final word."""
    try:
        staged = client.staged_files()
    except GitError as exc:
        logger.debug("Could not list staged files: %s", exc)
        return
    if not staged:
        print_warning("No files staged for commit. Stage them first with: git add <files>")
        click.echo("")


@click.command()
@click.option("--verbose", is_flag=True, help="Enable verbose (debug) output.")
@click.version_option(version=__version__, prog_name="semcommit")
def main(verbose: bool) -> None:
    """🚀 Compose a Conventional Commits message and create the commit."""
    configure_logging(verbose)

    click.echo("🚀 Semantic Commit Generator\n")

    ctx = click.get_current_context(silent=True)

    try:
        repo_root = detect_repo(Path.cwd())
        client = GitClient(repo_root)
        warn_if_nothing_staged(client)

        try:
            record = compose(ClickPromptProvider())
        except PromptAborted:
            click.echo("")
            print_warning("Cancelled, no commit message was created.")
            raise click.exceptions.Exit(EXIT_CANCELLED)

        message = serialize(record)
        print_message_preview(message)

        try:
            confirmed = click.confirm("Create commit?", default=True)
        except click.Abort:
            click.echo("")
            print_warning("Cancelled, no commit was created.")
            raise click.exceptions.Exit(EXIT_CANCELLED)

        if not confirmed:
            click.echo("Aborted")
            raise click.exceptions.Exit(EXIT_SUCCESS)

        result = client.commit(message)
        if not result.success:
            print_error(f"Git error:\n{result.stderr}")
            raise click.exceptions.Exit(EXIT_VCS_FAILURE)

        print_success("Commit created successfully!")
        raise click.exceptions.Exit(EXIT_SUCCESS)

    except click.exceptions.Exit:
        # Click uses its own Exit exception; re-raise to let Click handle it
        raise
    except Exception as exc:
        logging.exception("Unhandled error: %s", exc)
        print_error(f"Unexpected error: {exc}")
        ctx.exit(EXIT_GENERIC_ERROR)


@click.command()
@click.option(
    "--preset",
    type=click.Choice(sorted(PRESETS)),
    default=None,
    help="Checks run by the pre-commit hook (default: from .semcommit.json, else python).",
)
@click.option("--verbose", is_flag=True, help="Enable verbose (debug) output.")
@click.version_option(version=__version__, prog_name="semcommit-setup")
def setup(preset: Optional[str], verbose: bool) -> None:
    """📦 Install the pre-commit and commit-msg hooks into this repository."""
    configure_logging(verbose)

    click.echo("📦 Installing git hooks...\n")

    repo_root = detect_repo(Path.cwd())

    try:
        settings = load_gate_settings(repo_root, preset)
    except ConfigError as exc:
        print_error(f"Configuration error: {exc}")
        raise click.exceptions.Exit(EXIT_CONFIG_ERROR)

    try:
        hooks_dir = GitClient(repo_root).hooks_dir()
    except GitError as exc:
        print_error(f"Could not locate the hooks directory: {exc}")
        raise click.exceptions.Exit(EXIT_GENERIC_ERROR)
    print_info(f"Target: {hooks_dir}", indent=1)

    try:
        written: List[Path] = install_hooks(hooks_dir, settings)
    except HookInstallError as exc:
        print_error(str(exc))
        raise click.exceptions.Exit(EXIT_GENERIC_ERROR)

    print_success("Git hooks installed!")
    click.echo("")
    click.echo("Hooks:")
    click.echo(f"  • pre-commit:  checks staged files, {settings.language} format & lint")
    click.echo("  • commit-msg:  validates semantic commit format")
    for path in written:
        logger.debug("Wrote %s", path)
    click.echo("")
    click.echo("To skip hooks: git commit --no-verify")


if __name__ == "__main__":
    main()
