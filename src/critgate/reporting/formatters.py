# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render strict and progressive reports as plain (optionally coloured) text.

Rendering never raises: unknown severities fall into the neutral colour band
and a template that cannot format a value falls back to
:data:`~critgate.core.models.DEFAULT_TEMPLATE`.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from ..analysis.ordering import sort_violations
from ..analysis.regressions import collect_regressions
from ..core.models import DEFAULT_TEMPLATE, RegressionEntry, ReportConfig, Violation
from .highlighting import REGRESSION_STYLE, colorize, severity_style

POLICY_NAMESPACE: Final[str] = "Perl::Critic::Policy::"


@dataclass(slots=True, frozen=True)
class ViolationTemplate:
    """Format single violations with a validated ``str.format`` template."""

    template: str = DEFAULT_TEMPLATE

    def render(self, violation: Violation, path: str) -> str:
        """Return ``violation`` rendered for ``path``.

        Args:
            violation: Finding to render.
            path: Repository path of the file the finding belongs to.

        Returns:
            str: Rendered line without a trailing newline.
        """

        values = {
            "file": path,
            "line": violation.line,
            "column": violation.column,
            "rule": violation.rule,
            "severity": violation.severity,
            "message": violation.message,
        }
        try:
            return self.template.format_map(values)
        except (KeyError, IndexError, TypeError, ValueError):
            return DEFAULT_TEMPLATE.format_map(values)


def short_rule_name(rule: str) -> str:
    """Drop the perlcritic policy namespace from ``rule``.

    Args:
        rule: Fully qualified rule identifier.

    Returns:
        str: Rule name relative to ``Perl::Critic::Policy``.
    """

    return rule.removeprefix(POLICY_NAMESPACE)


def truncation_notice(shown: int, total: int) -> str:
    """Return the notice appended to a truncated strict listing."""

    return f"Only {shown}/{total} most severe violations are shown"


def too_many_violations_notice(path: str, total: int) -> str:
    """Return the notice replacing the listing of an oversized progressive report."""

    return (
        f"{path}: Too many violations ({total}). Please run perlcritic locally, e.g.: "
        f"perlcritic --single-policy PolicyNameFromBelow {path}"
    )


def render_strict(violations: Sequence[Violation], path: str, config: ReportConfig) -> str:
    """Render every violation of ``path``, most severe first.

    The full list is sorted before the display cap applies, so the dropped
    entries are always the least severe ones.

    Args:
        violations: Findings for the file.
        path: Repository path of the file.
        config: Run-wide reporting options.

    Returns:
        str: Newline-terminated report lines, empty when there are no findings.
    """

    ordered = sort_violations(violations)
    total = len(ordered)
    cap = config.max_violations
    truncated = cap is not None and total > cap
    if truncated:
        ordered = ordered[:cap]

    template = ViolationTemplate(config.template)
    lines: list[str] = []
    for violation in ordered:
        line = template.render(violation, path)
        if config.highlight_by_severity:
            line = colorize(line, severity_style(violation.severity))
        lines.append(line)
    if truncated:
        lines.append(truncation_notice(len(ordered), total))
    return "".join(f"{line}\n" for line in lines)


def render_regression(entry: RegressionEntry, path: str) -> str:
    """Render the summary line of one regressed rule.

    Args:
        entry: Regressed rule.
        path: Repository path of the file.

    Returns:
        str: Report line without a trailing newline.
    """

    return (
        f"{path}: [{short_rule_name(entry.rule)}] You should fix at least {entry.min_fixes} violation(s) "
        f"of this type (was: {entry.before}, now: {entry.after}) (Severity: {entry.severity})"
    )


def render_progressive(
    before: Sequence[Violation],
    after: Sequence[Violation],
    path: str,
    config: ReportConfig,
) -> str:
    """Render the report for a file evaluated against its previous snapshot.

    The report is empty unless at least one rule regressed. Otherwise it holds
    the strict listing of ``after`` (or a single "run it locally" notice when
    ``after`` exceeds the display cap) followed by one line per regressed rule.

    Args:
        before: Findings of the baseline snapshot.
        after: Findings of the proposed snapshot.
        path: Repository path of the file.
        config: Run-wide reporting options.

    Returns:
        str: Newline-terminated report text, empty when nothing regressed.
    """

    regressions = collect_regressions(before, after)
    if not regressions:
        return ""

    total = len(after)
    cap = config.max_violations
    if cap is not None and total > cap:
        report = f"{too_many_violations_notice(path, total)}\n"
    else:
        report = render_strict(after, path, config)

    for entry in regressions:
        line = render_regression(entry, path)
        if config.highlight_by_severity:
            line = colorize(line, REGRESSION_STYLE)
        report += f"{line}\n"
    return report


def render_bypass_hint(prefix: str, *, commit_command: str = "git commit") -> str:
    """Return the hint explaining how to bypass the gate in an emergency.

    Args:
        prefix: Magic commit message prefix enabling the bypass.
        commit_command: Command committing a change in the repository's VCS.

    Returns:
        str: Newline-terminated hint text.
    """

    return (
        "---\n"
        f"You can bypass all checks by placing '{prefix}' at the beginning of the commit message,\n"
        f'e.g.: {commit_command} -m "{prefix}: emergency hotfix"\n'
    )


__all__ = [
    "POLICY_NAMESPACE",
    "ViolationTemplate",
    "render_bypass_hint",
    "render_progressive",
    "render_regression",
    "render_strict",
    "short_rule_name",
    "too_many_violations_notice",
    "truncation_notice",
]
