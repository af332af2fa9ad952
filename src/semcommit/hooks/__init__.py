"""
Git hook generation and installation.

See :mod:`semcommit.hooks.templates` for the script contents and
:mod:`semcommit.hooks.installer` for writing them to disk.
"""

from .installer import HookInstallError, install_hooks  # noqa: F401
