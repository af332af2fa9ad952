"""
Rendering of the Git hook scripts.

Both hooks are plain bash so they run without semcommit installed. They
are generated rather than shipped as static files: the ``commit-msg``
script embeds :func:`semcommit.message.validator.header_pattern` and
prints :func:`semcommit.message.validator.rejection_reason`, and the
``pre-commit`` script runs the commands from a
:class:`~semcommit.config.loader.GateSettings`.
"""

from __future__ import annotations

import re
import shlex
from typing import Iterable, List

from semcommit.config.loader import GateSettings
from semcommit.message.validator import MERGE_PREFIX, header_pattern, rejection_reason


GENERATED_NOTICE = "# Generated by semcommit-setup. Re-run it to update this hook."

_COLORS = r"""RED='\033[0;31m'
GREEN='\033[0;32m'
YELLOW='\033[1;33m'
BLUE='\033[0;34m'
NC='\033[0m'"""

_ERE_SPECIAL = re.compile(r"([.^$*+?()\[\]{}|\\])")


def _echo_lines(lines: Iterable[str]) -> List[str]:
    return [f"    echo {shlex.quote(line)}" for line in lines]


def extension_pattern(extensions: Iterable[str]) -> str:
    """Return a ``grep -E`` expression matching paths ending in ``extensions``."""
    alternatives = [_ERE_SPECIAL.sub(r"\\\1", ext.lstrip(".")) for ext in extensions]
    return rf"\.({'|'.join(alternatives)})$"


def render_pre_commit(settings: GateSettings) -> str:
    """Return the ``pre-commit`` hook script for ``settings``.

    The hook refuses commits with nothing staged, and runs the format and
    lint commands only when a staged path has one of the configured
    source extensions. An empty command disables that check.
    """
    language = settings.language
    lines = [
        "#!/bin/bash",
        GENERATED_NOTICE,
        "set -e",
        "",
        _COLORS,
        "",
        "# Get staged files",
        "STAGED=$(git diff --cached --name-only --diff-filter=ACM)",
        "",
        'if [ -z "$STAGED" ]; then',
        '    echo -e "${RED}❌ No files staged for commit!${NC}"',
        '    echo ""',
        '    echo "You have unstaged changes. Stage them first:"',
        '    echo -e "  ${YELLOW}git add <files>${NC}"',
        '    echo ""',
        '    echo "Current status:"',
        "    git status --short",
        "    exit 1",
        "fi",
        "",
        'echo -e "${BLUE}📦 Staged files:${NC}"',
        "echo \"$STAGED\" | sed 's/^/  /'",
        'echo ""',
        "",
    ]

    if not settings.source_extensions:
        lines += ['echo -e "${GREEN}✅ No source checks configured${NC}"', "exit 0", ""]
        return "\n".join(lines)

    pattern = shlex.quote(extension_pattern(settings.source_extensions))
    lines += [
        f'SOURCE_FILES=$(echo "$STAGED" | grep -E {pattern} || true)',
        "",
        'if [ -z "$SOURCE_FILES" ]; then',
        f'    echo -e "${{YELLOW}}⚠️  No {language} files staged, skipping checks${{NC}}"',
        "    exit 0",
        "fi",
        "",
        f'echo -e "${{BLUE}}🔍 Running checks on staged {language} files...${{NC}}"',
        'echo ""',
        "",
    ]

    if settings.format_command:
        lines += [
            "# Format check",
            'echo -e "${YELLOW}📝 Format check...${NC}"',
            f"if ! {settings.format_command} >/dev/null 2>&1; then",
            '    echo -e "${RED}❌ Format check failed!${NC}"',
            f"    echo {shlex.quote('Command: ' + settings.format_command)}",
            "    exit 1",
            "fi",
            'echo -e "${GREEN}✅ Format OK${NC}"',
            "",
        ]

    if settings.lint_command:
        lines += [
            "# Lint",
            'echo -e "${YELLOW}🔍 Lint...${NC}"',
            f"if ! {settings.lint_command}; then",
            '    echo -e "${RED}❌ Lint failed!${NC}"',
            "    exit 1",
            "fi",
            'echo -e "${GREEN}✅ Lint OK${NC}"',
            "",
        ]

    lines += ['echo ""', 'echo -e "${GREEN}✅ All checks passed!${NC}"', ""]
    return "\n".join(lines)


def render_commit_msg() -> str:
    """Return the ``commit-msg`` hook script.

    Git passes the path of the message file as ``$1``. Only its first
    line is checked; lines starting with ``Merge`` pass unconditionally.
    """
    lines = [
        "#!/bin/bash",
        GENERATED_NOTICE,
        "",
        'COMMIT_MSG_FILE="$1"',
        'COMMIT_MSG=$(cat "$COMMIT_MSG_FILE")',
        'FIRST_LINE=$(head -n 1 "$COMMIT_MSG_FILE")',
        "",
        "# Skip merge commits",
        'case "$FIRST_LINE" in',
        f"    {MERGE_PREFIX}*) exit 0 ;;",
        "esac",
        "",
        "# Semantic commit pattern",
        f"PATTERN={shlex.quote(header_pattern())}",
        "",
        "# grep must count characters, not bytes, whatever locale git runs us in",
        "UTF8_LOCALE=$(locale -a 2>/dev/null | grep -iE '^(c|en_us)\\.utf-?8$' | head -n 1)",
        "",
        "if ! printf '%s\\n' \"$FIRST_LINE\" | LC_ALL=\"${UTF8_LOCALE:-C.UTF-8}\" grep -qE \"$PATTERN\"; then",
    ]
    lines += _echo_lines(rejection_reason().splitlines())
    lines += [
        '    echo ""',
        '    echo "Your message:"',
        '    echo "  $COMMIT_MSG"',
        "    exit 1",
        "fi",
        "",
        "exit 0",
        "",
    ]
    return "\n".join(lines)
