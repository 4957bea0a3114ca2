# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer application factory with consistent defaults."""

from __future__ import annotations

from dataclasses import dataclass

import typer


@dataclass(slots=True, frozen=True)
class TyperAppConfig:
    """Describe the Typer application to build."""

    help_text: str
    name: str | None = None
    invoke_without_command: bool = False


def create_typer(*, config: TyperAppConfig) -> typer.Typer:
    """Return a Typer application configured from ``config``.

    Args:
        config: Application metadata.

    Returns:
        typer.Typer: Application with completion disabled and rich markup off.
    """

    return typer.Typer(
        name=config.name,
        help=config.help_text,
        invoke_without_command=config.invoke_without_command,
        add_completion=False,
        no_args_is_help=not config.invoke_without_command,
        rich_markup_mode=None,
        pretty_exceptions_enable=False,
    )


__all__ = ["TyperAppConfig", "create_typer"]
