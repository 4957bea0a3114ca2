# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from critgate.core.models import Violation
from critgate.tools.perlcritic import AnalyzerError
from critgate.vcs.base import ChangeSet


@dataclass
class FakeAnalyzer:
    """Analyzer returning canned findings keyed by file content."""

    findings: dict[str, list[Violation]] = field(default_factory=dict)
    calls: list[tuple[str, Path]] = field(default_factory=list)
    failing: set[str] = field(default_factory=set)

    def critique(self, content: str, profile: Path) -> list[Violation]:
        self.calls.append((content, profile))
        if content in self.failing:
            raise AnalyzerError("perlcritic exited with status 1")
        return list(self.findings.get(content, []))


@dataclass
class FakeSnapshots:
    """Snapshot provider backed by dictionaries."""

    added: Sequence[str] = ()
    modified: Sequence[str] = ()
    message: str = ""
    current_content: dict[str, str] = field(default_factory=dict)
    previous_content: dict[str, str] = field(default_factory=dict)

    def changes(self) -> ChangeSet:
        return ChangeSet(added=self.added, modified=self.modified)

    def current(self, path: str) -> str:
        return self.current_content.get(path, f"after:{path}")

    def previous(self, path: str) -> str:
        return self.previous_content.get(path, f"before:{path}")

    def log_message(self) -> str:
        return self.message


ViolationFactory = Callable[..., Violation]


@pytest.fixture
def make_violation() -> ViolationFactory:
    """Return a factory building violations with sensible defaults."""

    def _make(
        rule: str = "Perl::Critic::Policy::TestingAndDebugging::RequireUseStrict",
        severity: int = 5,
        line: int = 1,
        column: int = 1,
        message: str = "Code before strictures are enabled",
    ) -> Violation:
        return Violation(rule=rule, severity=severity, line=line, column=column, message=message)

    return _make


@pytest.fixture
def fake_analyzer() -> FakeAnalyzer:
    return FakeAnalyzer()


@pytest.fixture
def make_snapshots() -> Callable[..., FakeSnapshots]:
    def _make(
        *,
        added: Sequence[str] = (),
        modified: Sequence[str] = (),
        message: str = "",
        current: Mapping[str, str] | None = None,
        previous: Mapping[str, str] | None = None,
    ) -> FakeSnapshots:
        return FakeSnapshots(
            added=added,
            modified=modified,
            message=message,
            current_content=dict(current or {}),
            previous_content=dict(previous or {}),
        )

    return _make
