"""
Top-level package for semcommit.

The command line entry points live in :mod:`semcommit.cli`: ``semcommit``
composes and creates a commit, ``semcommit-setup`` installs the git hooks.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
