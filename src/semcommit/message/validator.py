"""
Conventional Commits header validation.

:func:`validate` is the acceptance rule applied to every commit message,
whether it was built by the composer or typed by hand. Only the first
line is examined. The same rule is exported as a POSIX extended regular
expression by :func:`header_pattern` so the generated ``commit-msg`` hook
checks messages with exactly the grammar used here.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from semcommit.message.commit_types import TYPE_TAGS


MAX_DESCRIPTION_LENGTH = 100
MERGE_PREFIX = "Merge"
SCOPE_CHARACTERS = "a-z0-9-"

EXAMPLE_HEADERS = (
    "feat: add user authentication",
    "fix(api): handle null pointer",
)

HEADER_RE = re.compile(
    rf"(?P<type>{'|'.join(re.escape(tag) for tag in TYPE_TAGS)})"
    rf"(?:\((?P<scope>[{SCOPE_CHARACTERS}]+)\))?"
    r"(?P<breaking>!)?"
    r": "
    rf"(?P<description>.{{1,{MAX_DESCRIPTION_LENGTH}}})"
)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of :func:`validate`.

    ``reason`` is ``None`` for accepted messages and holds display-ready
    text for rejected ones.
    """

    accepted: bool
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.accepted


def first_line(message: str) -> str:
    """Return the header line of ``message`` (without its newline)."""
    return message.split("\n", 1)[0]


def header_pattern() -> str:
    """Return the header grammar as a ``grep -E`` compatible expression."""
    types = "|".join(TYPE_TAGS)
    return (
        f"^({types})"
        f"(\\([{SCOPE_CHARACTERS}]+\\))?"
        "!?"
        ": "
        f".{{1,{MAX_DESCRIPTION_LENGTH}}}$"
    )


def rejection_reason() -> str:
    """Return the message shown to the user when a header is rejected."""
    lines = [
        "❌ Invalid commit message format!",
        "",
        "Format: <type>[optional scope][!]: <description>",
        "",
        f"Types: {', '.join(TYPE_TAGS)}",
        "",
        "Examples:",
    ]
    lines.extend(f"  {example}" for example in EXAMPLE_HEADERS)
    return "\n".join(lines)


def validate(candidate: str) -> ValidationResult:
    """Decide whether ``candidate`` has a valid Conventional Commits header.

    Parameters
    ----------
    candidate : str
        The full commit message or just its first line. Lines after the
        first are ignored.

    Returns
    -------
    ValidationResult
        Accepted when the first line starts with ``Merge`` or matches the
        grammar ``type(scope)!: description`` with a description of 1 to
        :data:`MAX_DESCRIPTION_LENGTH` characters.
    """
    header = first_line(candidate)
    if header.startswith(MERGE_PREFIX):
        return ValidationResult(accepted=True)
    if HEADER_RE.fullmatch(header):
        return ValidationResult(accepted=True)
    return ValidationResult(accepted=False, reason=rejection_reason())
