# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Gate check CLI command package."""

from __future__ import annotations

import typer

from .command import check_command

__all__ = ["register"]


def register(app: typer.Typer) -> None:
    """Register the ``check`` command on the Typer application."""

    app.command("check")(check_command)
