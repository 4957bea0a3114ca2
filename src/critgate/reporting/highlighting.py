# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Severity colour bands rendered as ANSI escape sequences."""

from __future__ import annotations

from typing import Final

from rich.color import ColorSystem
from rich.style import Style

from ..core.severity import Severity

NEUTRAL_STYLE: Final[str] = ""
REGRESSION_STYLE: Final[str] = "blue on white"

_SEVERITY_STYLES: Final[dict[int, str]] = {
    Severity.BRUTAL: "red",
    Severity.CRUEL: "yellow",
    Severity.HARSH: "magenta",
    Severity.STERN: "cyan",
    Severity.GENTLE: "green",
}


def severity_style(severity: int) -> str:
    """Return the colour band for ``severity``.

    Args:
        severity: Severity rank; anything outside ``1..5`` is accepted.

    Returns:
        str: Rich style name, :data:`NEUTRAL_STYLE` for unknown severities.
    """

    return _SEVERITY_STYLES.get(severity, NEUTRAL_STYLE)


def colorize(text: str, style: str) -> str:
    """Wrap ``text`` in the ANSI sequence for ``style``.

    Args:
        text: Plain text to decorate.
        style: Rich style definition such as ``"red"`` or ``"blue on white"``.

    Returns:
        str: Decorated text, or ``text`` unchanged for the neutral style.
    """

    if not style:
        return text
    return Style.parse(style).render(text, color_system=ColorSystem.STANDARD)


__all__ = ["NEUTRAL_STYLE", "REGRESSION_STYLE", "colorize", "severity_style"]
