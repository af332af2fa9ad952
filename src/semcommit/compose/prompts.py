"""
Interactive input collection for the commit composer.

The composer only talks to the :class:`PromptProvider` protocol, so tests
can drive it with a scripted fake. :class:`ClickPromptProvider` is the
terminal implementation used by the ``semcommit`` command.
"""

from __future__ import annotations

import logging
import os
from typing import List, Optional, Protocol, Sequence

import click


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


class PromptAborted(Exception):
    """Raised when the user cancels a prompt (Ctrl-C or end of input)."""

    pass


class PromptProvider(Protocol):
    """Capabilities the composer needs from an interactive front end.

    Every method may raise :class:`PromptAborted`.
    """

    def select_one(self, prompt: str, items: Sequence[str], default: int = 0) -> int:
        """Let the user pick one of ``items`` and return its index."""
        ...

    def input_line(self, prompt: str, allow_empty: bool = False) -> str:
        """Read a single line of text."""
        ...

    def confirm(self, prompt: str, default: bool = False) -> bool:
        """Ask a yes/no question."""
        ...

    def edit_multiline(self) -> Optional[str]:
        """Collect multi-line text, or ``None`` if the user gave up."""
        ...


class ClickPromptProvider:
    """Prompt provider backed by :mod:`click` terminal prompts."""

    END_MARKER = "."

    def select_one(self, prompt: str, items: Sequence[str], default: int = 0) -> int:
        click.echo(f"\n{prompt}:")
        for idx, item in enumerate(items, start=1):
            click.echo(f"  {idx:>2}) {item}")
        try:
            choice = click.prompt(
                "   Choose",
                type=click.IntRange(1, len(items)),
                default=default + 1,
                show_default=True,
            )
        except click.Abort as exc:
            raise PromptAborted(prompt) from exc
        return choice - 1

    def input_line(self, prompt: str, allow_empty: bool = False) -> str:
        try:
            if allow_empty:
                value = click.prompt(prompt, default="", show_default=False, type=str)
            else:
                value = click.prompt(prompt, type=str)
        except click.Abort as exc:
            raise PromptAborted(prompt) from exc
        return value

    def confirm(self, prompt: str, default: bool = False) -> bool:
        try:
            return click.confirm(prompt, default=default)
        except click.Abort as exc:
            raise PromptAborted(prompt) from exc

    def edit_multiline(self) -> Optional[str]:
        """Open the configured editor, or read lines until a lone ``.``.

        Returns ``None`` when the editor is closed without saving or when
        nothing was typed in the line-by-line fallback.
        """
        editor = os.environ.get("VISUAL") or os.environ.get("EDITOR")
        if editor:
            logger.debug("Opening editor %s for the message body", editor)
            try:
                return click.edit("", editor=editor, require_save=True)
            except click.ClickException as exc:
                # Editor could not be launched; fall back to typing inline.
                logger.warning("Editor failed: %s", exc.format_message())

        click.echo("\n   💡 No editor available.")
        click.echo(f"   Enter the description below. End with a line containing only '{self.END_MARKER}'")
        lines: List[str] = []
        try:
            while True:
                line = click.prompt("   ", default="", show_default=False, prompt_suffix="")
                if line.strip() == self.END_MARKER:
                    break
                lines.append(line)
        except click.Abort as exc:
            raise PromptAborted("body") from exc

        text = "\n".join(lines)
        return text if text.strip() else None
