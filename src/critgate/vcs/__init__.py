# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Version-control snapshot providers."""

from __future__ import annotations

from .base import ChangeSet, SnapshotError, SnapshotProvider
from .git import GitSnapshotProvider
from .svn import SvnLookSnapshotProvider

__all__ = [
    "ChangeSet",
    "GitSnapshotProvider",
    "SnapshotError",
    "SnapshotProvider",
    "SvnLookSnapshotProvider",
]
