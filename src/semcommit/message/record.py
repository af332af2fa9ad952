"""
Data model for a composed commit message.

The :class:`CommitRecord` holds the structured fields collected by the
composer before they are rendered into the canonical message text by
:func:`semcommit.message.serializer.serialize`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from semcommit.message.commit_types import CommitType


@dataclass(frozen=True)
class CommitRecord:
    """Representation of a commit message before serialization.

    Attributes
    ----------
    type : CommitType
        The Conventional Commit type of the change.
    description : str
        Imperative one-line summary written after ``": "``.
    scope : Optional[str]
        Short identifier rendered in parentheses after the type. The
        record does not check its characters; the grammar does.
    body : Optional[str]
        Free-form longer description. Whitespace-only bodies are dropped
        when the message is serialized.
    breaking : bool
        Whether the change breaks compatibility.
    issues : List[str]
        Issue identifiers (without ``#``) in the order they were entered.
        Duplicates are kept.
    """

    type: CommitType
    description: str
    scope: Optional[str] = None
    body: Optional[str] = None
    breaking: bool = False
    issues: List[str] = field(default_factory=list)
