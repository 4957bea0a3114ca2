# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Utilities for installing the critgate git hook."""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Final

from .core.logging import info, ok

HOOK_NAME: Final[str] = "commit-msg"
HOOK_MODE: Final[int] = 0o755


@dataclass
class InstallResult:
    installed: Path
    backup: Path | None
    dry_run: bool


def render_hook_script(config: Path, *, executable: str = "critgate") -> str:
    """Return the shell script run by git before recording a commit.

    ``commit-msg`` is used instead of ``pre-commit`` because the emergency
    bypass needs the commit message.

    Args:
        config: Gate configuration file.
        executable: Command used to invoke critgate.

    Returns:
        str: Hook script contents.
    """

    return (
        "#!/bin/sh\n"
        "# Installed by critgate: deny commits that introduce perlcritic violations.\n"
        f'exec {shlex.quote(executable)} check --config {shlex.quote(str(config))} --message-file "$1"\n'
    )


def install_hook(
    root: Path,
    config: Path,
    *,
    hooks_dir: Path | None = None,
    dry_run: bool = False,
    use_emoji: bool = True,
) -> InstallResult:
    """Install the critgate ``commit-msg`` hook into ``.git/hooks``.

    An existing hook that is not a symlink is renamed to a timestamped backup.

    Args:
        root: Repository root.
        config: Gate configuration the hook passes to ``critgate check``.
        hooks_dir: Optional hooks directory overriding ``.git/hooks``.
        dry_run: Report what would happen without touching the filesystem.
        use_emoji: Whether progress messages may include emoji.

    Returns:
        InstallResult: Installed hook path and optional backup.

    Raises:
        FileNotFoundError: If ``root`` is not a git repository.
    """

    project_root = root.resolve()
    git_dir = project_root / ".git"
    if not git_dir.exists():
        raise FileNotFoundError("Not a git repository (missing .git directory)")

    target_dir = hooks_dir or git_dir / "hooks"
    destination = target_dir / HOOK_NAME
    backup_path: Path | None = None

    if destination.exists() and not destination.is_symlink():
        timestamp = datetime.now(UTC).strftime("%Y%m%d_%H%M%S")
        backup_path = destination.with_name(f"{HOOK_NAME}.backup.{timestamp}")
        info(f"Backing up existing {HOOK_NAME} hook to {backup_path}", use_emoji=use_emoji)
        if not dry_run:
            destination.rename(backup_path)

    info(f"Installing {HOOK_NAME} hook", use_emoji=use_emoji)
    if dry_run:
        ok(f"Dry run complete: would install {destination}", use_emoji=use_emoji)
        return InstallResult(installed=destination, backup=backup_path, dry_run=True)

    target_dir.mkdir(parents=True, exist_ok=True)
    if destination.is_symlink():
        destination.unlink()
    destination.write_text(render_hook_script(config.resolve()), encoding="utf-8")
    destination.chmod(HOOK_MODE)
    ok(f"Installed {HOOK_NAME} hook at {destination}", use_emoji=use_emoji)
    return InstallResult(installed=destination, backup=backup_path, dry_run=False)


__all__ = ["HOOK_NAME", "InstallResult", "install_hook", "render_hook_script"]
