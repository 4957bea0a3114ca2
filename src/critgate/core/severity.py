# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import IntEnum
from typing import Final

UNKNOWN_SEVERITY: Final[int] = 0


class Severity(IntEnum):
    """Severity ranks reported by the analyzer, ``BRUTAL`` being the most severe."""

    GENTLE = 1
    STERN = 2
    HARSH = 3
    CRUEL = 4
    BRUTAL = 5


_SEVERITY_NAMES: Final[dict[str, Severity]] = {member.name.lower(): member for member in Severity}


def coerce_severity(value: object) -> int:
    """Return ``value`` as a severity rank, mapping anything unknown to ``0``.

    The analyzer owns the notion of severity, so values outside ``1..5`` are
    not rejected. They rank below every known severity instead.

    Args:
        value: Raw severity emitted by the analyzer (rank, digit string or
            level name such as ``"brutal"``).

    Returns:
        int: Severity rank in ``1..5`` or :data:`UNKNOWN_SEVERITY`.
    """

    if isinstance(value, bool) or value is None:
        return UNKNOWN_SEVERITY
    if isinstance(value, int):
        return int(value) if Severity.GENTLE <= value <= Severity.BRUTAL else UNKNOWN_SEVERITY
    if isinstance(value, str):
        token = value.strip().lower()
        if token in _SEVERITY_NAMES:
            return int(_SEVERITY_NAMES[token])
        if token.isdigit():
            return coerce_severity(int(token))
    return UNKNOWN_SEVERITY


__all__ = ["Severity", "UNKNOWN_SEVERITY", "coerce_severity"]
