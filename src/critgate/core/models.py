# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the critgate package."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from string import Formatter
from typing import Final, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .severity import UNKNOWN_SEVERITY, coerce_severity

RuleCount: TypeAlias = dict[str, int]

TEMPLATE_PLACEHOLDERS: Final[frozenset[str]] = frozenset({"file", "line", "column", "rule", "severity", "message"})
DEFAULT_TEMPLATE: Final[str] = "{file}:{line}:{column}: [{rule}] {message} (Severity: {severity})"
_FILE_PLACEHOLDER: Final[str] = "{file}"


class GateMode(str, Enum):
    """Evaluation modes supported by the gate."""

    STRICT = "strict"
    PROGRESSIVE = "progressive"


class Violation(BaseModel):
    """Single analyzer finding, immutable once produced."""

    model_config = ConfigDict(frozen=True)

    rule: str = ""
    severity: int = UNKNOWN_SEVERITY
    line: int = 0
    column: int = 0
    message: str = ""
    file: str | None = None

    @field_validator("rule", "message", mode="before")
    @classmethod
    def _coerce_text(cls, value: object) -> str:
        """Replace a missing rule or message with an empty string.

        Args:
            value: Raw value supplied by the analyzer.

        Returns:
            str: Text value, empty when the analyzer omitted it.
        """

        return "" if value is None else str(value)

    @field_validator("severity", mode="before")
    @classmethod
    def _coerce_severity(cls, value: object) -> int:
        """Map unknown severities to the lowest precedence rank.

        Args:
            value: Raw severity supplied by the analyzer.

        Returns:
            int: Severity rank in ``0..5``.
        """

        return coerce_severity(value)

    @field_validator("line", "column", mode="before")
    @classmethod
    def _coerce_location(cls, value: object) -> int:
        """Map missing or malformed locations to ``0``.

        Args:
            value: Raw line or column number.

        Returns:
            int: Non-negative location component.
        """

        if value is None or isinstance(value, bool):
            return 0
        try:
            number = int(value)  # type: ignore[call-overload]
        except (TypeError, ValueError):
            return 0
        return max(number, 0)


class RegressionEntry(BaseModel):
    """Rule whose occurrence count grew between the two snapshots."""

    model_config = ConfigDict(frozen=True)

    rule: str
    severity: int = UNKNOWN_SEVERITY
    min_fixes: int = Field(ge=1)
    before: int = Field(default=0, ge=0)
    after: int = Field(ge=1)


def normalise_template(template: str) -> str:
    """Validate a violation template and make sure it names the file.

    Args:
        template: ``str.format`` style template using the placeholders from
            :data:`TEMPLATE_PLACEHOLDERS`.

    Returns:
        str: Template with ``"{file}: "`` prepended when it lacks a file
        placeholder and trailing newlines removed.

    Raises:
        ValueError: If the template is malformed or uses unknown placeholders.
    """

    names: set[str] = set()
    for _, field_name, _, _ in Formatter().parse(template):
        if field_name is None:
            continue
        if not field_name:
            raise ValueError("positional placeholders are not supported")
        names.add(field_name)
    unknown = names - TEMPLATE_PLACEHOLDERS
    if unknown:
        raise ValueError(f"unknown placeholder(s): {', '.join(sorted(unknown))}")
    cleaned = template.rstrip("\n")
    if _FILE_PLACEHOLDER not in cleaned:
        cleaned = f"{_FILE_PLACEHOLDER}: {cleaned}"
    return cleaned


class ReportConfig(BaseModel):
    """Run-wide reporting options, constructed once and passed explicitly."""

    model_config = ConfigDict(frozen=True)

    mode: GateMode = GateMode.STRICT
    max_violations: int | None = Field(default=None, ge=1)
    highlight_by_severity: bool = False
    template: str = DEFAULT_TEMPLATE

    @field_validator("template")
    @classmethod
    def _validate_template(cls, value: str) -> str:
        return normalise_template(value)

    def for_mode(self, mode: GateMode) -> ReportConfig:
        """Return a copy of the configuration evaluating in ``mode``.

        Args:
            mode: Evaluation mode to apply.

        Returns:
            ReportConfig: ``self`` when the mode already matches, otherwise a copy.
        """

        if mode is self.mode:
            return self
        return self.model_copy(update={"mode": mode})


class FileReport(BaseModel):
    """Report text produced for a single evaluated file."""

    model_config = ConfigDict(frozen=True)

    path: str
    mode: GateMode
    text: str = ""

    @property
    def failed(self) -> bool:
        """Return whether the file blocks the change.

        Returns:
            bool: ``True`` when the evaluation produced report text.
        """

        return bool(self.text)


class GateVerdict(BaseModel):
    """Final allow/deny decision for a change."""

    model_config = ConfigDict(frozen=True)

    allowed: bool
    report_text: str = ""
    bypassed: bool = False
    files: tuple[FileReport, ...] = ()

    @classmethod
    def from_reports(cls, reports: Iterable[FileReport]) -> GateVerdict:
        """Combine per-file reports by logical AND and text concatenation.

        Args:
            reports: File reports in evaluation order.

        Returns:
            GateVerdict: Combined verdict for the change.
        """

        collected = tuple(reports)
        return cls(
            allowed=not any(report.failed for report in collected),
            report_text="".join(report.text for report in collected),
            files=collected,
        )

    def exit_code(self) -> int:
        """Return the process exit code implied by the verdict.

        Returns:
            int: ``0`` when the change is allowed; otherwise ``1``.
        """

        return 0 if self.allowed else 1


__all__ = [
    "DEFAULT_TEMPLATE",
    "FileReport",
    "GateMode",
    "GateVerdict",
    "RegressionEntry",
    "ReportConfig",
    "RuleCount",
    "TEMPLATE_PLACEHOLDERS",
    "Violation",
    "normalise_template",
]
