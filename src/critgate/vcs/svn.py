# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Subversion snapshot provider built on ``svnlook``."""

from __future__ import annotations

from pathlib import Path

from .base import ChangeSet, CommandRunner, SnapshotError, SubprocessRunner


class SvnLookSnapshotProvider:
    """Read a transaction or revision from a Subversion repository.

    A transaction (``pre-commit`` hook) is compared with the youngest
    revision; a revision is compared with the one before it.
    """

    def __init__(
        self,
        repository: Path,
        *,
        transaction: str | None = None,
        revision: int | None = None,
        runner: CommandRunner | None = None,
    ) -> None:
        """Create an svnlook snapshot provider.

        Args:
            repository: Path to the Subversion repository.
            transaction: Transaction identifier being committed.
            revision: Revision identifier, mainly for testing hooks after the fact.
            runner: Optional command runner returning stdout, mainly for tests.

        Raises:
            ValueError: Unless exactly one of ``transaction`` and ``revision`` is set.
        """

        if (transaction is None) == (revision is None):
            raise ValueError("exactly one of transaction or revision must be provided")
        self._repository = repository
        self._transaction = transaction
        self._revision = revision
        self._runner = runner or SubprocessRunner(tool="svnlook")
        self._previous_revision: int | None = None

    def _target(self) -> list[str]:
        if self._transaction is not None:
            return ["-t", self._transaction]
        return ["-r", str(self._revision)]

    def _look(self, subcommand: str, *args: str, target: list[str] | None = None) -> str:
        return self._runner(["svnlook", subcommand, *(target or self._target()), str(self._repository), *args])

    def changes(self) -> ChangeSet:
        """Return the added and updated paths of the change.

        Returns:
            ChangeSet: Paths grouped by change kind; property-only updates count as updates.
        """

        added: list[str] = []
        modified: list[str] = []
        for raw in self._look("changed").splitlines():
            if len(raw) < 5:
                continue
            status, path = raw[:4], raw[4:].strip()
            if status[0] == "A":
                added.append(path)
            elif status[0] == "U" or status[:2] == "_U":
                modified.append(path)
        return ChangeSet(added=added, modified=modified)

    def current(self, path: str) -> str:
        """Return the content of ``path`` in the transaction or revision."""

        return self._look("cat", path)

    def previous(self, path: str) -> str:
        """Return the content of ``path`` in the previous revision."""

        return self._look("cat", path, target=["-r", str(self.previous_revision())])

    def previous_revision(self) -> int:
        """Return the revision the change is compared with.

        Returns:
            int: Youngest revision for a transaction, ``revision - 1`` otherwise.

        Raises:
            SnapshotError: If ``svnlook youngest`` returns something unexpected.
        """

        if self._previous_revision is None:
            if self._revision is not None:
                self._previous_revision = max(self._revision - 1, 0)
            else:
                raw = self._runner(["svnlook", "youngest", str(self._repository)]).strip()
                try:
                    self._previous_revision = int(raw)
                except ValueError as exc:
                    raise SnapshotError(f"Cannot get youngest revision ID: {raw!r}") from exc
        return self._previous_revision

    def log_message(self) -> str:
        """Return the log message of the transaction or revision."""

        return self._look("log")


__all__ = ["SvnLookSnapshotProvider"]
