# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Git-backed snapshot provider."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from .base import ChangeSet, CommandRunner, SnapshotError, SubprocessRunner

_ADDED_STATUSES: Final[frozenset[str]] = frozenset({"A"})
_MODIFIED_STATUSES: Final[frozenset[str]] = frozenset({"M", "T"})


class GitSnapshotProvider:
    """Read a change from a git repository.

    Without a ``revision`` the change is the staged index compared with
    ``HEAD``, which is what a ``pre-commit``/``commit-msg`` hook sees. With a
    ``revision`` the change is that commit compared with its first parent.
    Renames are reported as an addition of the new path.
    """

    def __init__(
        self,
        root: Path,
        *,
        revision: str | None = None,
        message_file: Path | None = None,
        runner: CommandRunner | None = None,
    ) -> None:
        """Create a git snapshot provider.

        Args:
            root: Working tree root of the repository.
            revision: Optional commit to inspect instead of the staged index.
            message_file: Optional commit message file (as passed to ``commit-msg`` hooks).
            runner: Optional command runner returning stdout, mainly for tests.
        """

        self._root = root
        self._revision = revision
        self._message_file = message_file
        self._runner = runner or SubprocessRunner(tool="git", cwd=root)

    def changes(self) -> ChangeSet:
        """Return the added and modified paths of the change.

        Returns:
            ChangeSet: Paths grouped by change kind.
        """

        if self._revision is None:
            cmd = ["git", "diff", "--cached", "--name-status", "--no-renames"]
        else:
            cmd = self._revision_diff_command(self._revision)
        added: list[str] = []
        modified: list[str] = []
        for raw in self._runner(cmd).splitlines():
            status, _, path = raw.partition("\t")
            status = status.strip()[:1]
            path = path.strip()
            if not path:
                continue
            if status in _ADDED_STATUSES:
                added.append(path)
            elif status in _MODIFIED_STATUSES:
                modified.append(path)
        return ChangeSet(added=added, modified=modified)

    def _revision_diff_command(self, revision: str) -> list[str]:
        """Return the command listing the files ``revision`` changed against its first parent.

        Merge commits are diffed against their first parent; a root commit
        lists every file it introduced.
        """

        listing = self._runner(["git", "rev-list", "--parents", "-n", "1", revision]).split()
        if not listing:
            raise SnapshotError(f"Cannot resolve git revision {revision!r}")
        commit, *parents = listing
        if not parents:
            return ["git", "diff-tree", "-r", "--root", "--no-commit-id", "--name-status", "--no-renames", commit]
        return ["git", "diff", "--name-status", "--no-renames", parents[0], commit]

    def current(self, path: str) -> str:
        """Return the staged (or committed) content of ``path``."""

        object_name = f":{path}" if self._revision is None else f"{self._revision}:{path}"
        return self._runner(["git", "show", object_name])

    def previous(self, path: str) -> str:
        """Return the content of ``path`` in the parent snapshot."""

        parent = "HEAD" if self._revision is None else f"{self._revision}^"
        return self._runner(["git", "show", f"{parent}:{path}"])

    def log_message(self) -> str:
        """Return the commit message of the change.

        Returns:
            str: Message from the message file, the inspected revision, or an
            empty string when neither is available.

        Raises:
            SnapshotError: If the message file cannot be read.
        """

        if self._message_file is not None:
            try:
                return self._message_file.read_text(encoding="utf-8")
            except OSError as exc:
                raise SnapshotError(f"Cannot read commit message {self._message_file}: {exc}") from exc
        if self._revision is not None:
            return self._runner(["git", "log", "-1", "--format=%B", self._revision])
        return ""


__all__ = ["GitSnapshotProvider"]
