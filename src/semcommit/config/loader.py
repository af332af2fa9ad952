"""
Configuration loader for the generated pre-commit gate.

The pre-commit hook runs a format check and a lint command when files of
the project's source language are staged. Which commands run is decided
by a preset (``python`` or ``rust``) whose values can be overridden per
repository with an optional, hand-written ``.semcommit.json`` file in the
repository root::

    {
        "preset": "rust",
        "source_extensions": [".rs"],
        "format_command": "cargo fmt -- --check",
        "lint_command": "cargo clippy --all-targets --all-features -- -D warnings"
    }

The file is only ever read. A malformed file, an unknown preset or values
of the wrong type raise :class:`ConfigError`.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional


logger = logging.getLogger(__name__)
# Attach a null handler to avoid "No handler" warnings in environments
# where logging was never configured.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


CONFIG_FILE_NAME = ".semcommit.json"
DEFAULT_PRESET = "python"


class ConfigError(Exception):
    """Raised when the gate configuration is missing or invalid."""

    pass


@dataclass(frozen=True)
class GateSettings:
    """Checks run by the pre-commit gate.

    Attributes
    ----------
    language : str
        Display name of the checked language, used in hook output.
    source_extensions : List[str]
        File suffixes (with leading dot) that trigger the checks.
    format_command : str
        Shell command that exits non-zero when formatting is off.
    lint_command : str
        Shell command that exits non-zero on lint findings.
    """

    language: str
    source_extensions: List[str] = field(default_factory=list)
    format_command: str = ""
    lint_command: str = ""


PRESETS: Dict[str, GateSettings] = {
    "python": GateSettings(
        language="Python",
        source_extensions=[".py"],
        format_command="ruff format --check .",
        lint_command="ruff check .",
    ),
    "rust": GateSettings(
        language="Rust",
        source_extensions=[".rs"],
        format_command="cargo fmt -- --check",
        lint_command="cargo clippy --all-targets --all-features -- -D warnings",
    ),
}


def _read_config_file(config_path: Path) -> Dict[str, Any]:
    try:
        content = config_path.read_text(encoding="utf-8")
        data = json.loads(content)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Failed to read or parse configuration file: %s", exc)
        raise ConfigError(f"Invalid JSON in {config_path.name}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path.name} must contain a JSON object")
    return data


def _validate_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}

    if "source_extensions" in data:
        extensions = data["source_extensions"]
        if not isinstance(extensions, list) or not all(isinstance(e, str) and e for e in extensions):
            raise ConfigError("'source_extensions' must be a list of non-empty strings")
        overrides["source_extensions"] = [e if e.startswith(".") else f".{e}" for e in extensions]

    for key in ("format_command", "lint_command", "language"):
        if key in data:
            if not isinstance(data[key], str):
                raise ConfigError(f"'{key}' must be a string")
            overrides[key] = data[key]

    unknown = sorted(set(data) - {"preset", "source_extensions", "format_command", "lint_command", "language"})
    if unknown:
        logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
    return overrides


def get_preset(name: str) -> GateSettings:
    """Return the built-in settings called ``name``.

    Raises
    ------
    ConfigError
        If no such preset exists.
    """
    try:
        return PRESETS[name]
    except KeyError:
        raise ConfigError(
            f"Unknown preset '{name}'. Available presets: {', '.join(sorted(PRESETS))}"
        ) from None


def load_gate_settings(repo_root: Path, preset: Optional[str] = None) -> GateSettings:
    """Resolve the pre-commit gate settings for ``repo_root``.

    The preset named on the command line wins over the one in the
    configuration file, which wins over :data:`DEFAULT_PRESET`. Keys
    present in the file then override the preset's values.

    Args:
        repo_root: Root of the Git repository.
        preset: Preset requested by the caller, if any.

    Returns:
        The effective :class:`GateSettings`.

    Raises:
        ConfigError: If the configuration file is malformed or names an
            unknown preset.
    """
    config_path = repo_root / CONFIG_FILE_NAME
    data: Dict[str, Any] = {}
    if config_path.exists():
        data = _read_config_file(config_path)
        logger.debug("Loaded gate configuration from: %s", config_path)

    file_preset = data.get("preset")
    if file_preset is not None and not isinstance(file_preset, str):
        raise ConfigError("'preset' must be a string")

    settings = get_preset(preset or file_preset or DEFAULT_PRESET)
    overrides = _validate_overrides(data)
    if overrides:
        settings = replace(settings, **overrides)

    logger.debug("Gate settings: %s", settings)
    return settings
