# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command for installing the git hook."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ....hooks import install_hook
from ...core.shared import EXIT_ERROR, build_cli_logger


def install_hook_command(
    config: Annotated[
        Path,
        typer.Option("--config", "-c", help="Gate configuration the hook should use.", dir_okay=False),
    ],
    root: Annotated[Path, typer.Option("--root", help="Repository root.")] = Path("."),
    hooks_dir: Annotated[
        Path | None,
        typer.Option("--hooks-dir", help="Install into this directory instead of .git/hooks."),
    ] = None,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Show what would be installed.")] = False,
    emoji: Annotated[bool, typer.Option("--emoji/--no-emoji", help="Toggle emoji in status output.")] = True,
) -> None:
    """Install a git commit-msg hook running ``critgate check``."""

    logger = build_cli_logger(emoji=emoji)
    try:
        install_hook(root, config, hooks_dir=hooks_dir, dry_run=dry_run, use_emoji=emoji)
    except OSError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=EXIT_ERROR) from exc
    raise typer.Exit(code=0)


__all__ = ["install_hook_command"]
