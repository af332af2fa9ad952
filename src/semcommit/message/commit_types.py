"""
The closed set of Conventional Commit types.

:data:`COMMIT_TYPES` is the one ordered table both the interactive
composer and the grammar validator read from. The composer offers the
entries in table order and the validator builds its alternation from the
same tags, so the two can never disagree about which types exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class CommitType:
    """A single Conventional Commit type.

    Attributes
    ----------
    tag : str
        The token written into the header line (``feat``, ``fix``, ...).
    label : str
        Human readable description shown in the selection menu.
    """

    tag: str
    label: str

    def __str__(self) -> str:
        return self.tag


COMMIT_TYPES: Tuple[CommitType, ...] = (
    CommitType("feat", "✨ New feature"),
    CommitType("fix", "🐛 Bug fix"),
    CommitType("docs", "📚 Documentation"),
    CommitType("style", "💄 Code style (formatting)"),
    CommitType("refactor", "♻️  Code refactoring"),
    CommitType("perf", "⚡ Performance improvement"),
    CommitType("test", "✅ Add or update tests"),
    CommitType("build", "🔧 Build system or dependencies"),
    CommitType("ci", "👷 CI/CD changes"),
    CommitType("chore", "🔨 Maintenance tasks"),
    CommitType("revert", "⏪ Revert a commit"),
)

TYPE_TAGS: Tuple[str, ...] = tuple(commit_type.tag for commit_type in COMMIT_TYPES)


def get_commit_type(tag: str) -> Optional[CommitType]:
    """Return the :class:`CommitType` for ``tag`` or ``None`` if unknown."""
    for commit_type in COMMIT_TYPES:
        if commit_type.tag == tag:
            return commit_type
    return None
