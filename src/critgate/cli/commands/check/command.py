# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI entry point evaluating a change against the gate."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ...core.shared import build_cli_logger
from .models import CheckCLIOptions, VcsKind
from .services import run_check


def check_command(
    config: Annotated[
        Path,
        typer.Option("--config", "-c", help="Gate configuration file (TOML).", dir_okay=False),
    ],
    vcs: Annotated[VcsKind, typer.Option("--vcs", help="Version-control system holding the change.")] = VcsKind.GIT,
    repository: Annotated[
        Path,
        typer.Option("--repository", "-p", help="Repository path (git work tree or svn repository)."),
    ] = Path("."),
    transaction: Annotated[
        str | None,
        typer.Option("--transaction", "-t", help="Subversion transaction ID."),
    ] = None,
    revision: Annotated[
        str | None,
        typer.Option("--revision", "-r", help="Revision to inspect instead of the pending change."),
    ] = None,
    message_file: Annotated[
        Path | None,
        typer.Option("--message-file", "-m", help="Commit message file (git commit-msg hook argument)."),
    ] = None,
    emoji: Annotated[bool, typer.Option("--emoji/--no-emoji", help="Toggle emoji in status output.")] = True,
    debug: Annotated[bool, typer.Option("--debug", help="Show per-file evaluation details.")] = False,
) -> None:
    """Deny the change when it introduces perlcritic violations.

    Exit status is 0 when the change may proceed, 1 when it is denied and 255
    when the gate could not run.
    """

    options = CheckCLIOptions(
        config=config,
        vcs=vcs,
        repository=repository,
        transaction=transaction,
        revision=revision,
        message_file=message_file,
        emoji=emoji,
        debug=debug,
    )
    logger = build_cli_logger(emoji=options.emoji, debug=options.debug)
    raise typer.Exit(code=run_check(options, logger=logger))


__all__ = ["check_command"]
