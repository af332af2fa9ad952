"""
Step-by-step composition of a :class:`CommitRecord`.

Composition is an ordered pipeline of steps. Each step receives the
current :class:`CommitDraft` and a prompt provider, asks its questions and
returns a new draft with its field filled in. The order of
:data:`COMPOSE_STEPS` is fixed: later steps rely on earlier answers (the
breaking flag and issues come after the description they refer to).

If the provider raises :class:`~semcommit.compose.prompts.PromptAborted`
the exception propagates out of :func:`compose` and no record exists.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Callable, Optional, Tuple

from semcommit.compose.prompts import PromptProvider
from semcommit.message.commit_types import COMMIT_TYPES, CommitType
from semcommit.message.record import CommitRecord


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


ISSUE_MARKER = "#"


@dataclass(frozen=True)
class CommitDraft:
    """Partially composed commit, filled in one step at a time."""

    type: Optional[CommitType] = None
    scope: Optional[str] = None
    description: str = ""
    body: Optional[str] = None
    breaking: bool = False
    issues: Tuple[str, ...] = field(default_factory=tuple)

    def to_record(self) -> CommitRecord:
        if self.type is None:
            raise ValueError("Commit type was never selected")
        return CommitRecord(
            type=self.type,
            scope=self.scope,
            description=self.description,
            body=self.body,
            breaking=self.breaking,
            issues=list(self.issues),
        )


Step = Callable[[CommitDraft, PromptProvider], CommitDraft]


def select_type(draft: CommitDraft, provider: PromptProvider) -> CommitDraft:
    index = provider.select_one("Commit type", [t.label for t in COMMIT_TYPES], default=0)
    return replace(draft, type=COMMIT_TYPES[index])


def ask_scope(draft: CommitDraft, provider: PromptProvider) -> CommitDraft:
    scope = provider.input_line("Scope (optional, e.g. api, auth, ui)", allow_empty=True)
    return replace(draft, scope=scope.strip() or None)


def ask_description(draft: CommitDraft, provider: PromptProvider) -> CommitDraft:
    description = provider.input_line("Short description (imperative mood)", allow_empty=False)
    return replace(draft, description=description)


def ask_body(draft: CommitDraft, provider: PromptProvider) -> CommitDraft:
    if not provider.confirm("Add a longer description?", default=False):
        return draft
    # Stored untrimmed; the serializer trims.
    return replace(draft, body=provider.edit_multiline())


def ask_breaking(draft: CommitDraft, provider: PromptProvider) -> CommitDraft:
    return replace(draft, breaking=provider.confirm("Is this a breaking change?", default=False))


def normalize_issue(raw: str) -> str:
    """Strip surrounding whitespace and any leading ``#`` from ``raw``."""
    return raw.strip().lstrip(ISSUE_MARKER)


def ask_issues(draft: CommitDraft, provider: PromptProvider) -> CommitDraft:
    if not provider.confirm("Add issue references?", default=False):
        return draft

    issues = list(draft.issues)
    while True:
        raw = provider.input_line("Issue number (empty to finish)", allow_empty=True)
        if not raw.strip():
            break
        issues.append(normalize_issue(raw))
        if not provider.confirm("Add another issue?", default=False):
            break
    return replace(draft, issues=tuple(issues))


COMPOSE_STEPS: Tuple[Step, ...] = (
    select_type,
    ask_scope,
    ask_description,
    ask_body,
    ask_breaking,
    ask_issues,
)


def compose(provider: PromptProvider) -> CommitRecord:
    """Run every composition step against ``provider`` and build the record.

    Raises
    ------
    PromptAborted
        If the user cancels any prompt.
    """
    draft = CommitDraft()
    for step in COMPOSE_STEPS:
        logger.debug("Running composition step %s", step.__name__)
        draft = step(draft, provider)
    return draft.to_record()
