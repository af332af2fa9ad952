import os
import shlex
import shutil
import subprocess
from pathlib import Path

import pytest

from semcommit.config.loader import PRESETS, GateSettings
from semcommit.hooks.templates import extension_pattern, render_commit_msg, render_pre_commit
from semcommit.message.validator import header_pattern, rejection_reason, validate


requires_bash = pytest.mark.skipif(shutil.which("bash") is None, reason="bash is not installed")


def test_extension_pattern():
    assert extension_pattern([".py"]) == r"\.(py)$"
    assert extension_pattern([".py", ".pyi"]) == r"\.(py|pyi)$"
    assert extension_pattern([".c++"]) == r"\.(c\+\+)$"


def test_commit_msg_embeds_validator_rule():
    script = render_commit_msg()
    assert script.startswith("#!/bin/bash\n")
    assert f"PATTERN={shlex.quote(header_pattern())}" in script
    for line in rejection_reason().splitlines():
        assert f"echo {shlex.quote(line)}" in script
    assert "Merge*) exit 0 ;;" in script
    assert "LC_ALL=\"${UTF8_LOCALE:-C.UTF-8}\" grep -qE" in script


def test_pre_commit_uses_preset_commands():
    script = render_pre_commit(PRESETS["rust"])
    assert script.startswith("#!/bin/bash\n")
    assert "git diff --cached --name-only --diff-filter=ACM" in script
    assert "if ! cargo fmt -- --check >/dev/null 2>&1; then" in script
    assert "if ! cargo clippy --all-targets --all-features -- -D warnings; then" in script
    assert "No Rust files staged, skipping checks" in script


def test_pre_commit_skips_empty_commands():
    settings = GateSettings(language="Python", source_extensions=[".py"], format_command="", lint_command="ruff check .")
    script = render_pre_commit(settings)
    assert "Format check" not in script
    assert "if ! ruff check .; then" in script


def test_pre_commit_without_extensions_has_no_checks():
    script = render_pre_commit(GateSettings(language="Docs"))
    assert "SOURCE_FILES" not in script
    assert "No files staged for commit" in script


def _write_script(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def _run_commit_msg(script: Path, tmp_path: Path, message: str, env=None) -> subprocess.CompletedProcess:
    msg_file = tmp_path / "COMMIT_EDITMSG"
    msg_file.write_text(message, encoding="utf-8")
    return subprocess.run(["bash", str(script), str(msg_file)], capture_output=True, text=True, encoding="utf-8", env=env)


@requires_bash
@pytest.mark.parametrize(
    "message",
    [
        "feat: add login",
        "fix(api): handle null pointer\n\nlonger body\n",
        "feat!: drop legacy API\n\nBREAKING CHANGE: drop legacy API",
        "refactor(core-2)!: split module",
        "Merge branch 'main'",
        "feat: " + "a" * 100,
        "feat: " + "a" * 101,
        "feat: ",
        "feat:missing space",
        "feature: add login",
        "Feat: add login",
        "feat(API): add login",
        "feat(a_b): add login",
        "update stuff",
        "",
    ],
)
def test_commit_msg_gate_agrees_with_validator(tmp_path, message):
    script = _write_script(tmp_path, "commit-msg", render_commit_msg())
    result = _run_commit_msg(script, tmp_path, message)
    assert (result.returncode == 0) == validate(message).accepted, result.stdout


@requires_bash
@pytest.mark.parametrize(
    "message",
    [
        "feat: " + "ä" * 60,
        "feat: " + "ä" * 100,
        "feat: " + "ä" * 101,
        "fix(ui): zeige Größe für Übersicht",
        "docs: 日本語のドキュメントを追加",
    ],
)
def test_commit_msg_gate_counts_characters_in_c_locale(tmp_path, message):
    script = _write_script(tmp_path, "commit-msg", render_commit_msg())
    env = dict(os.environ, LC_ALL="C", LANG="C")
    result = _run_commit_msg(script, tmp_path, message, env=env)
    assert (result.returncode == 0) == validate(message).accepted, result.stdout


@requires_bash
def test_commit_msg_gate_prints_reason(tmp_path):
    script = _write_script(tmp_path, "commit-msg", render_commit_msg())
    result = _run_commit_msg(script, tmp_path, "wip")
    assert result.returncode == 1
    assert "Invalid commit message format!" in result.stdout
    assert "Types: feat, fix, docs" in result.stdout
    assert "Your message:" in result.stdout
    assert "  wip" in result.stdout


def _stage(repo: Path, name: str) -> None:
    (repo / name).write_text("content\n", encoding="utf-8")
    subprocess.run(["git", "add", name], cwd=repo, check=True, capture_output=True)


def _run_pre_commit(repo: Path, settings: GateSettings) -> subprocess.CompletedProcess:
    script = _write_script(repo.parent, "pre-commit", render_pre_commit(settings))
    return subprocess.run(["bash", str(script)], cwd=repo, capture_output=True, text=True)


CHECKS = GateSettings(language="Python", source_extensions=[".py"], format_command="true", lint_command="true")


@requires_bash
def test_pre_commit_rejects_empty_index(git_repo):
    result = _run_pre_commit(git_repo, CHECKS)
    assert result.returncode == 1
    assert "No files staged for commit!" in result.stdout


@requires_bash
def test_pre_commit_skips_checks_without_source_files(git_repo):
    _stage(git_repo, "README.md")
    failing = GateSettings(language="Python", source_extensions=[".py"], format_command="false", lint_command="false")
    result = _run_pre_commit(git_repo, failing)
    assert result.returncode == 0
    assert "No Python files staged, skipping checks" in result.stdout


@requires_bash
def test_pre_commit_passes_when_checks_pass(git_repo):
    _stage(git_repo, "app.py")
    result = _run_pre_commit(git_repo, CHECKS)
    assert result.returncode == 0
    assert "All checks passed!" in result.stdout


@requires_bash
def test_pre_commit_fails_on_format(git_repo):
    _stage(git_repo, "app.py")
    settings = GateSettings(language="Python", source_extensions=[".py"], format_command="false", lint_command="true")
    result = _run_pre_commit(git_repo, settings)
    assert result.returncode == 1
    assert "Format check failed!" in result.stdout


@requires_bash
def test_pre_commit_fails_on_lint(git_repo):
    _stage(git_repo, "app.py")
    settings = GateSettings(language="Python", source_extensions=[".py"], format_command="true", lint_command="false")
    result = _run_pre_commit(git_repo, settings)
    assert result.returncode == 1
    assert "Lint failed!" in result.stdout
