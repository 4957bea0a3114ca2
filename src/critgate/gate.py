# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Turn a change into a single allow/deny verdict.

The gate moves from :attr:`GateState.EVALUATING` to :attr:`GateState.DECIDED`
exactly once per run. Added files are always evaluated strictly because they
have no baseline; modified files use the configured mode. Files without an
analyzer profile are skipped on purpose.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from pathlib import Path

from .bypass import BypassPredicate, never_bypass
from .core.models import FileReport, GateMode, GateVerdict, ReportConfig
from .profiles import ProfileResolver
from .reporting.formatters import render_progressive, render_strict
from .tools.perlcritic import Analyzer, AnalyzerError
from .vcs.base import SnapshotProvider

DebugSink = Callable[[str], None]


class GateState(str, Enum):
    """Lifecycle of a gate run."""

    EVALUATING = "evaluating"
    DECIDED = "decided"


def _discard(message: str) -> None:
    del message


def evaluate_file(
    path: str,
    *,
    mode: GateMode,
    profile: Path,
    snapshots: SnapshotProvider,
    analyzer: Analyzer,
    config: ReportConfig,
) -> FileReport:
    """Analyze one file and render its report.

    Args:
        path: Repository path of the file.
        mode: Evaluation mode for this file.
        profile: Analyzer profile resolved for the file.
        snapshots: Provider of the file's content.
        analyzer: Analyzer producing findings from content.
        config: Run-wide reporting options.

    Returns:
        FileReport: Report for the file; empty text means the file passes.

    Raises:
        AnalyzerError: If the analyzer fails on either snapshot.
    """

    file_config = config.for_mode(mode)
    try:
        after = analyzer.critique(snapshots.current(path), profile)
        if mode is GateMode.STRICT:
            return FileReport(path=path, mode=mode, text=render_strict(after, path, file_config))
        before = analyzer.critique(snapshots.previous(path), profile)
    except AnalyzerError as exc:
        raise AnalyzerError(f"{path}: {exc}") from exc
    return FileReport(path=path, mode=mode, text=render_progressive(before, after, path, file_config))


class Gate:
    """Evaluate every file of a change and decide whether it may proceed."""

    def __init__(
        self,
        config: ReportConfig,
        *,
        analyzer: Analyzer,
        resolver: ProfileResolver,
        bypass: BypassPredicate = never_bypass,
        debug: DebugSink | None = None,
    ) -> None:
        """Create a gate for a single run.

        Args:
            config: Run-wide reporting options; ``config.mode`` applies to modified files.
            analyzer: Analyzer producing findings from file content.
            resolver: Maps paths to analyzer profiles.
            bypass: Predicate deciding whether the commit message requests a bypass.
            debug: Optional sink for diagnostic messages.
        """

        self._config = config
        self._analyzer = analyzer
        self._resolver = resolver
        self._bypass = bypass
        self._debug = debug or _discard
        self._state = GateState.EVALUATING
        self._verdict: GateVerdict | None = None

    @property
    def state(self) -> GateState:
        return self._state

    @property
    def verdict(self) -> GateVerdict | None:
        """Return the decided verdict, ``None`` while still evaluating."""

        return self._verdict

    def evaluate(self, snapshots: SnapshotProvider) -> GateVerdict:
        """Decide whether the change exposed by ``snapshots`` may proceed.

        Calling this again after the gate has decided returns the same verdict.

        Args:
            snapshots: Provider of the change's files, content and message.

        Returns:
            GateVerdict: Combined verdict of every evaluated file.

        Raises:
            AnalyzerError: If the analyzer fails on any file.
            SnapshotError: If content or change metadata cannot be retrieved.
        """

        if self._verdict is not None:
            return self._verdict

        if self._bypass(snapshots.log_message()):
            self._debug("emergency bypass requested; skipping evaluation")
            return self._decide(GateVerdict(allowed=True, bypassed=True))

        changes = snapshots.changes()
        plan = [(path, GateMode.STRICT) for path in changes.added]
        plan.extend((path, self._config.mode) for path in changes.modified)

        reports: list[FileReport] = []
        for path, mode in plan:
            profile = self._resolver.resolve(path)
            if profile is None:
                self._debug(f"skipping path={path} reason=no-profile")
                continue
            self._debug(f"evaluating path={path} mode={mode.value} profile={profile}")
            reports.append(
                evaluate_file(
                    path,
                    mode=mode,
                    profile=profile,
                    snapshots=snapshots,
                    analyzer=self._analyzer,
                    config=self._config,
                ),
            )
        return self._decide(GateVerdict.from_reports(reports))

    def _decide(self, verdict: GateVerdict) -> GateVerdict:
        self._verdict = verdict
        self._state = GateState.DECIDED
        self._debug(f"decided allowed={verdict.allowed} files={len(verdict.files)}")
        return verdict


__all__ = ["Gate", "GateState", "evaluate_file"]
