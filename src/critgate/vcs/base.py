# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared snapshot provider contract."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel, ConfigDict, field_validator

from ..core.runtime.process import CommandOptions, SubprocessExecutionError, run_command

CommandRunner = Callable[[Sequence[str]], str]


class SnapshotError(RuntimeError):
    """Raised when file content or change metadata cannot be retrieved."""


class ChangeSet(BaseModel):
    """Paths touched by a change, split by whether a previous version exists."""

    model_config = ConfigDict(frozen=True)

    added: tuple[str, ...] = ()
    modified: tuple[str, ...] = ()

    @field_validator("added", "modified", mode="before")
    @classmethod
    def _normalise_paths(cls, value: Iterable[str]) -> tuple[str, ...]:
        """Drop directory entries and sort paths lexically.

        Args:
            value: Raw paths reported by the version-control system.

        Returns:
            tuple[str, ...]: Sorted, de-duplicated file paths.
        """

        return tuple(sorted({path for path in value if path and not path.endswith("/")}))


class SnapshotProvider(Protocol):
    """Expose the before/after content of the files touched by a change."""

    def changes(self) -> ChangeSet:
        """Return the added and modified paths of the change."""
        ...

    def current(self, path: str) -> str:
        """Return the content of ``path`` as proposed by the change."""
        ...

    def previous(self, path: str) -> str:
        """Return the content of ``path`` before the change."""
        ...

    def log_message(self) -> str:
        """Return the commit message of the change."""
        ...


@dataclass(slots=True, frozen=True)
class SubprocessRunner:
    """Execute version-control commands and return their standard output."""

    tool: str
    cwd: Path | None = None

    def __call__(self, args: Sequence[str]) -> str:
        """Run ``args`` and return stdout.

        Args:
            args: Command and arguments to execute.

        Returns:
            str: Captured standard output.

        Raises:
            SnapshotError: If the command is missing or exits with a non-zero status.
        """

        options = CommandOptions(cwd=self.cwd, check=True, capture_output=True)
        try:
            return run_command(args, options=options).stdout
        except SubprocessExecutionError as exc:
            raise SnapshotError(f"{self.tool} failed: {exc}") from exc
        except OSError as exc:
            raise SnapshotError(f"Cannot run {self.tool}: {exc}") from exc


__all__ = ["ChangeSet", "CommandRunner", "SnapshotError", "SnapshotProvider", "SubprocessRunner"]
