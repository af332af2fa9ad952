"""
Commit message model, rendering and grammar.

See :mod:`semcommit.message.commit_types` for the shared type table,
:mod:`semcommit.message.serializer` for rendering records and
:mod:`semcommit.message.validator` for the header grammar.
"""

from .commit_types import COMMIT_TYPES, CommitType  # noqa: F401
from .record import CommitRecord  # noqa: F401
from .serializer import serialize  # noqa: F401
from .validator import ValidationResult, validate  # noqa: F401
