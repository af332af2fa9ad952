"""
Rendering of :class:`CommitRecord` objects into commit message text.

The output layout is::

    type(scope)!: description

    body

    BREAKING CHANGE: description

    Closes #12
    Closes #7

Every section after the header is optional. Serialization never fails and
never validates: a record with a malformed scope or an empty description
simply produces a message the commit-msg gate will reject.
"""

from __future__ import annotations

from typing import List

from semcommit.message.record import CommitRecord


BREAKING_CHANGE_PREFIX = "BREAKING CHANGE: "
CLOSES_PREFIX = "Closes #"


def format_header(record: CommitRecord) -> str:
    """Return the first line of the message for ``record``."""
    header = record.type.tag
    if record.scope is not None:
        header += f"({record.scope})"
    if record.breaking:
        header += "!"
    return f"{header}: {record.description}"


def serialize(record: CommitRecord) -> str:
    """Render ``record`` into the canonical commit message string.

    Parameters
    ----------
    record : CommitRecord
        The composed record.

    Returns
    -------
    str
        The message text. When issues are present the message ends with
        the newline of the last ``Closes`` line; otherwise it ends with
        the last character of the final section.
    """
    parts: List[str] = [format_header(record)]

    if record.body is not None and record.body.strip():
        parts.append("\n\n")
        parts.append(record.body.strip())

    # The notice restates the summary rather than carrying its own text.
    if record.breaking:
        parts.append("\n\n")
        parts.append(f"{BREAKING_CHANGE_PREFIX}{record.description}")

    if record.issues:
        parts.append("\n\n")
        for issue in record.issues:
            parts.append(f"{CLOSES_PREFIX}{issue}\n")

    return "".join(parts)
