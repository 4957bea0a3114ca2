# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for hook installation utilities."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from typer.testing import CliRunner

from critgate.cli.app import app
from critgate.hooks import HOOK_NAME, install_hook, render_hook_script


def _make_repo(root: Path) -> Path:
    hooks_dir = root / ".git" / "hooks"
    hooks_dir.mkdir(parents=True, exist_ok=True)
    return hooks_dir


def test_render_hook_script_passes_message_file() -> None:
    script = render_hook_script(Path("/srv/repo/critgate.toml"))

    assert script.startswith("#!/bin/sh\n")
    assert 'check --config /srv/repo/critgate.toml --message-file "$1"' in script


def test_install_hook_writes_executable_script(tmp_path: Path) -> None:
    hooks_dir = _make_repo(tmp_path)
    config = tmp_path / "critgate.toml"

    result = install_hook(tmp_path, config, use_emoji=False)

    destination = hooks_dir / HOOK_NAME
    assert result.installed == destination
    assert result.backup is None
    assert os.access(destination, os.X_OK)
    assert str(config.resolve()) in destination.read_text(encoding="utf-8")


def test_install_hook_backs_up_existing_hook(tmp_path: Path) -> None:
    hooks_dir = _make_repo(tmp_path)
    existing = hooks_dir / HOOK_NAME
    existing.write_text("#!/bin/sh\necho old\n", encoding="utf-8")

    result = install_hook(tmp_path, tmp_path / "critgate.toml", use_emoji=False)

    assert result.backup is not None
    assert result.backup.read_text(encoding="utf-8") == "#!/bin/sh\necho old\n"
    assert "critgate" in existing.read_text(encoding="utf-8")


def test_install_hook_dry_run_touches_nothing(tmp_path: Path) -> None:
    hooks_dir = _make_repo(tmp_path)

    result = install_hook(tmp_path, tmp_path / "critgate.toml", dry_run=True, use_emoji=False)

    assert result.dry_run
    assert not (hooks_dir / HOOK_NAME).exists()


def test_install_hook_requires_git(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        install_hook(tmp_path, tmp_path / "critgate.toml", use_emoji=False)


def test_cli_dry_run(tmp_path: Path) -> None:
    _make_repo(tmp_path)
    runner = CliRunner()
    result = runner.invoke(
        app,
        [
            "install-hook",
            "--config",
            str(tmp_path / "critgate.toml"),
            "--root",
            str(tmp_path),
            "--dry-run",
            "--no-emoji",
        ],
    )
    assert result.exit_code == 0
    assert "Dry run" in result.stderr


def test_cli_outside_repository(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["install-hook", "--config", str(tmp_path / "critgate.toml"), "--root", str(tmp_path), "--no-emoji"],
    )
    assert result.exit_code == 255
    assert "Not a git repository" in result.stderr
