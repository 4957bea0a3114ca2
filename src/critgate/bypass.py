# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Emergency bypass detection based on a magic commit message prefix."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

BypassPredicate = Callable[[str], bool]


@dataclass(slots=True, frozen=True)
class EmergencyBypass:
    """Report whether a commit message requests an emergency bypass."""

    enabled: bool
    prefix: str

    def __call__(self, log_message: str) -> bool:
        """Return ``True`` when bypass is enabled and ``log_message`` starts with the prefix.

        Args:
            log_message: Free-text commit message.

        Returns:
            bool: Whether the gate must let the change through unchecked.
        """

        if not self.enabled or not self.prefix:
            return False
        return re.match(re.escape(self.prefix), log_message) is not None


def never_bypass(log_message: str) -> bool:
    """Predicate used when emergency commits are not allowed."""

    del log_message
    return False


__all__ = ["BypassPredicate", "EmergencyBypass", "never_bypass"]
