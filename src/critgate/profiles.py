# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Map repository paths to analyzer profiles."""

from __future__ import annotations

import re
from collections.abc import Sequence
from pathlib import Path
from re import Pattern

from pydantic import BaseModel, ConfigDict, PrivateAttr, field_validator, model_validator


class ProfileRule(BaseModel):
    """Associate a path pattern with an analyzer profile.

    A rule without a profile excludes the matching paths from evaluation.
    """

    model_config = ConfigDict(frozen=True)

    pattern: str
    profile: str | None = None
    _compiled: Pattern[str] = PrivateAttr()

    @field_validator("pattern")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        """Reject patterns that do not compile.

        Args:
            value: Regular expression searched within repository paths.

        Returns:
            str: The unchanged pattern.

        Raises:
            ValueError: If ``value`` is not a valid regular expression.
        """

        try:
            re.compile(value)
        except re.error as exc:
            raise ValueError(f"invalid pattern {value!r}: {exc}") from exc
        return value

    @model_validator(mode="after")
    def _compile_pattern(self) -> ProfileRule:
        self._compiled = re.compile(self.pattern)
        return self

    def matches(self, path: str) -> bool:
        """Return whether the rule's pattern occurs anywhere in ``path``."""

        return self._compiled.search(path) is not None


class ProfileResolver:
    """Resolve the analyzer profile for a path; the last matching rule wins."""

    def __init__(self, rules: Sequence[ProfileRule], *, profile_dir: Path | None = None) -> None:
        """Initialise the resolver.

        Args:
            rules: Ordered rules; later rules override earlier ones.
            profile_dir: Directory anchoring relative profile paths. Relative
                profiles are returned unchanged when omitted.
        """

        self._rules = tuple(rules)
        self._profile_dir = profile_dir

    @property
    def rules(self) -> tuple[ProfileRule, ...]:
        return self._rules

    def resolve(self, path: str) -> Path | None:
        """Return the profile for ``path`` or ``None`` when it must be skipped.

        Args:
            path: Repository-relative path of a changed file.

        Returns:
            Path | None: Profile path, ``None`` when no rule matches or the
            last matching rule carries no profile.
        """

        last_match = next((rule for rule in reversed(self._rules) if rule.matches(path)), None)
        if last_match is None or last_match.profile is None:
            return None
        profile = Path(last_match.profile)
        if profile.is_absolute() or self._profile_dir is None:
            return profile
        return self._profile_dir / profile


__all__ = ["ProfileResolver", "ProfileRule"]
