# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Option models for the ``check`` command."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class VcsKind(str, Enum):
    """Version-control systems the gate can read changes from."""

    GIT = "git"
    SVN = "svn"

    @property
    def commit_command(self) -> str:
        """Return the command users run to commit a change."""

        return "svn ci" if self is VcsKind.SVN else "git commit"


@dataclass(slots=True, frozen=True)
class CheckCLIOptions:
    """Normalised inputs of ``critgate check``."""

    config: Path
    vcs: VcsKind
    repository: Path
    transaction: str | None = None
    revision: str | None = None
    message_file: Path | None = None
    emoji: bool = True
    debug: bool = False
