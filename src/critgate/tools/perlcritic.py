# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run perlcritic on in-memory source text and parse its findings."""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from pathlib import Path
from subprocess import CompletedProcess
from typing import Final, Protocol

from ..core.models import Violation
from ..core.runtime.process import CommandOptions, run_command

# One finding per line: severity, policy, line, column, message.
PERLCRITIC_FORMAT: Final[str] = r"%s\t%p\t%l\t%c\t%m\n"
PERLCRITIC_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?P<severity>\d+)\t(?P<rule>[^\t]+)\t(?P<line>\d+)\t(?P<column>\d+)\t(?P<message>.*)$",
)
_CLEAN_EXIT: Final[int] = 0
_VIOLATIONS_EXIT: Final[int] = 2

CommandRunner = Callable[[Sequence[str], CommandOptions], CompletedProcess[str]]


class AnalyzerError(RuntimeError):
    """Raised when the analyzer cannot be run or fails to complete."""


class Analyzer(Protocol):
    """Turn source text into findings using a named configuration profile."""

    def critique(self, content: str, profile: Path) -> list[Violation]:
        """Return the findings for ``content`` under ``profile``."""
        ...


def parse_perlcritic(stdout: str) -> list[Violation]:
    """Parse perlcritic output produced with :data:`PERLCRITIC_FORMAT`.

    Args:
        stdout: Raw standard output of a perlcritic run.

    Returns:
        list[Violation]: Findings in output order; unrecognised lines are ignored.
    """

    results: list[Violation] = []
    for raw_line in stdout.splitlines():
        match = PERLCRITIC_PATTERN.match(raw_line.rstrip("\r"))
        if not match:
            continue
        results.append(
            Violation(
                rule=match.group("rule"),
                severity=int(match.group("severity")),
                line=int(match.group("line")),
                column=int(match.group("column")),
                message=match.group("message").strip(),
            ),
        )
    return results


def _default_runner(args: Sequence[str], options: CommandOptions) -> CompletedProcess[str]:
    return run_command(args, options=options)


class PerlCriticAnalyzer:
    """Analyzer backed by the ``perlcritic`` executable."""

    def __init__(
        self,
        *,
        executable: str = "perlcritic",
        runner: CommandRunner | None = None,
        timeout: float | None = None,
    ) -> None:
        """Create the analyzer.

        Args:
            executable: perlcritic binary name or absolute path.
            runner: Optional command runner, mainly for tests. Defaults to
                :func:`~critgate.core.runtime.process.run_command`.
            timeout: Optional per-invocation timeout in seconds.
        """

        self._executable = executable
        self._runner = runner or _default_runner
        self._options = CommandOptions(check=False, capture_output=True, timeout=timeout)

    def build_command(self, profile: Path) -> list[str]:
        """Return the perlcritic command line reading source from stdin.

        Args:
            profile: perlcritic profile (``perlcriticrc``) to apply.

        Returns:
            list[str]: Command arguments.
        """

        return [
            self._executable,
            "--profile",
            str(profile),
            "--nocolor",
            "--quiet",
            "--verbose",
            PERLCRITIC_FORMAT,
        ]

    def critique(self, content: str, profile: Path) -> list[Violation]:
        """Run perlcritic on ``content`` and return its findings.

        Args:
            content: Perl source text.
            profile: perlcritic profile to apply.

        Returns:
            list[Violation]: Findings reported by perlcritic.

        Raises:
            AnalyzerError: If perlcritic is missing or exits abnormally.
        """

        command = self.build_command(profile)
        try:
            completed = self._runner(command, self._options.with_input(content))
        except OSError as exc:
            raise AnalyzerError(f"Cannot run {self._executable}: {exc}") from exc
        if completed.returncode not in (_CLEAN_EXIT, _VIOLATIONS_EXIT):
            details = (completed.stderr or "").strip() or "<no output>"
            raise AnalyzerError(
                f"{self._executable} exited with status {completed.returncode} (profile {profile}): {details}",
            )
        return parse_perlcritic(completed.stdout or "")


__all__ = [
    "Analyzer",
    "AnalyzerError",
    "CommandRunner",
    "PERLCRITIC_FORMAT",
    "PERLCRITIC_PATTERN",
    "PerlCriticAnalyzer",
    "parse_perlcritic",
]
