# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Git hook installation CLI command package."""

from __future__ import annotations

import typer

from .command import install_hook_command

__all__ = ["register"]


def register(app: typer.Typer) -> None:
    """Register the ``install-hook`` command on the Typer application."""

    app.command("install-hook")(install_hook_command)
