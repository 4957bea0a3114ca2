# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Per-rule counting and before/after regression diffing."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping, Sequence

from ..core.models import RegressionEntry, RuleCount, Violation
from ..core.severity import UNKNOWN_SEVERITY
from .ordering import sort_regressions


def count_by_rule(violations: Iterable[Violation]) -> RuleCount:
    """Tally findings per rule.

    Rules without findings are absent from the result; callers treat a
    missing key and ``0`` alike.

    Args:
        violations: Findings from a single snapshot.

    Returns:
        RuleCount: Mapping of rule identifier to occurrence count.
    """

    return dict(Counter(violation.rule for violation in violations))


def min_fixes_required(before: Mapping[str, int], after: Mapping[str, int]) -> dict[str, int]:
    """Return how many findings per rule must be fixed to get back to ``before``.

    Only the rules present in ``after`` are considered: a rule fixed entirely
    cannot regress, whatever ``before`` says about it. Rules whose count
    decreased or stayed equal are omitted.

    Args:
        before: Per-rule counts of the baseline snapshot.
        after: Per-rule counts of the proposed snapshot.

    Returns:
        dict[str, int]: ``rule -> after - before`` for every rule that grew.
    """

    required: dict[str, int] = {}
    for rule, now in after.items():
        was = before.get(rule, 0)
        if now > was:
            required[rule] = now - was
    return required


def severity_lookup(violations: Iterable[Violation]) -> dict[str, int]:
    """Build a ``rule -> severity`` table from a snapshot.

    When a rule is reported with differing severities the highest one wins,
    which keeps the table independent of the order of ``violations``.

    Args:
        violations: Findings of the proposed snapshot.

    Returns:
        dict[str, int]: Severity rank per rule.
    """

    lookup: dict[str, int] = {}
    for violation in violations:
        lookup[violation.rule] = max(lookup.get(violation.rule, UNKNOWN_SEVERITY), violation.severity)
    return lookup


def collect_regressions(
    before: Sequence[Violation],
    after: Sequence[Violation],
) -> list[RegressionEntry]:
    """Return the rules that regressed between two snapshots, ordered for display.

    Args:
        before: Findings of the baseline snapshot.
        after: Findings of the proposed snapshot.

    Returns:
        list[RegressionEntry]: Regressed rules sorted by severity, required fixes and rule.
    """

    counts_before = count_by_rule(before)
    counts_after = count_by_rule(after)
    severities = severity_lookup(after)
    entries = (
        RegressionEntry(
            rule=rule,
            severity=severities.get(rule, UNKNOWN_SEVERITY),
            min_fixes=fixes,
            before=counts_before.get(rule, 0),
            after=counts_after[rule],
        )
        for rule, fixes in min_fixes_required(counts_before, counts_after).items()
    )
    return sort_regressions(entries)


__all__ = [
    "collect_regressions",
    "count_by_rule",
    "min_fixes_required",
    "severity_lookup",
]
