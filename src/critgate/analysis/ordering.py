# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Deterministic orderings for violations and regressed rules.

Two distinct orderings live here. :func:`sort_violations` orders individual
findings for strict-mode listings, while :func:`sort_regressions` orders rule
classes that grew between two snapshots. Both are total: ties are resolved by
the rule identifier and never by the order of the input.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeAlias

from ..core.models import RegressionEntry, Violation

ViolationKey: TypeAlias = tuple[int, str, int, int]
RegressionKey: TypeAlias = tuple[int, int, str]


def violation_sort_key(violation: Violation) -> ViolationKey:
    """Return the strict-mode sort key for ``violation``.

    Severity sorts descending, then rule, line and column ascending. Missing
    values already default to ``0``/``""`` on :class:`Violation`, so unknown
    locations land at the front of their rule bucket rather than being dropped.

    Args:
        violation: Finding to rank.

    Returns:
        ViolationKey: Tuple suitable for :func:`sorted`.
    """

    return (-violation.severity, violation.rule, violation.line, violation.column)


def sort_violations(violations: Iterable[Violation]) -> list[Violation]:
    """Return ``violations`` ordered most severe first.

    Args:
        violations: Findings in any order.

    Returns:
        list[Violation]: New list sorted by :func:`violation_sort_key`.
    """

    return sorted(violations, key=violation_sort_key)


def regression_sort_key(entry: RegressionEntry) -> RegressionKey:
    """Return the progressive-mode sort key for ``entry``.

    Severity sorts descending, then the smallest number of required fixes
    first, then the rule identifier.

    Args:
        entry: Regressed rule to rank.

    Returns:
        RegressionKey: Tuple suitable for :func:`sorted`.
    """

    return (-entry.severity, entry.min_fixes, entry.rule)


def sort_regressions(entries: Iterable[RegressionEntry]) -> list[RegressionEntry]:
    """Return regressed rules ordered for display.

    Args:
        entries: Regression entries in any order.

    Returns:
        list[RegressionEntry]: New list sorted by :func:`regression_sort_key`.
    """

    return sorted(entries, key=regression_sort_key)


__all__ = [
    "RegressionKey",
    "ViolationKey",
    "regression_sort_key",
    "sort_regressions",
    "sort_violations",
    "violation_sort_key",
]
