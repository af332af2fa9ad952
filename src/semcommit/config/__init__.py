"""
Configuration loading for semcommit.

Resolves the checks run by the generated pre-commit gate. See
:mod:`semcommit.config.loader` for implementation details.
"""

from .loader import ConfigError, GateSettings, load_gate_settings  # noqa: F401
