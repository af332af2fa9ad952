"""
Interactive composition of commit messages.

:func:`compose` drives a :class:`PromptProvider` through the fixed
sequence of questions and returns a :class:`~semcommit.message.CommitRecord`.
"""

from .composer import COMPOSE_STEPS, compose  # noqa: F401
from .prompts import ClickPromptProvider, PromptAborted, PromptProvider  # noqa: F401
