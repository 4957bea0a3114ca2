# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for the commit gate."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..bypass import EmergencyBypass
from ..core.models import DEFAULT_TEMPLATE, GateMode, ReportConfig, normalise_template
from ..profiles import ProfileResolver, ProfileRule


class ConfigError(Exception):
    """Raised when configuration input is missing or invalid."""


class GateConfig(BaseModel):
    """Validated contents of a gate configuration file."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    mode: GateMode = GateMode.STRICT
    allow_emergency_commits: bool = False
    emergency_comment_prefix: str = "NO CRITIC"
    max_violations: int | None = Field(default=None, ge=1)
    highlight_by_severity: bool = False
    template: str = DEFAULT_TEMPLATE
    profile_dir: Path | None = None
    profiles: tuple[ProfileRule, ...] = ()
    perlcritic: str = "perlcritic"
    analyzer_timeout: float | None = Field(default=None, gt=0)

    @field_validator("template")
    @classmethod
    def _validate_template(cls, value: str) -> str:
        return normalise_template(value)

    @model_validator(mode="after")
    def _require_prefix(self) -> GateConfig:
        """Refuse an empty magic prefix, which would bypass every commit.

        Returns:
            GateConfig: The validated configuration.

        Raises:
            ValueError: When bypass is enabled with a blank prefix.
        """

        if self.allow_emergency_commits and not self.emergency_comment_prefix.strip():
            raise ValueError("emergency_comment_prefix must not be empty when emergency commits are allowed")
        return self

    def report_config(self) -> ReportConfig:
        """Return the immutable reporting options for a run.

        Returns:
            ReportConfig: Options shared by every evaluated file.
        """

        return ReportConfig(
            mode=self.mode,
            max_violations=self.max_violations,
            highlight_by_severity=self.highlight_by_severity,
            template=self.template,
        )

    def profile_resolver(self) -> ProfileResolver:
        """Return the resolver mapping paths to analyzer profiles."""

        return ProfileResolver(self.profiles, profile_dir=self.profile_dir)

    def bypass(self) -> EmergencyBypass:
        """Return the emergency bypass predicate."""

        return EmergencyBypass(enabled=self.allow_emergency_commits, prefix=self.emergency_comment_prefix)


__all__ = ["ConfigError", "GateConfig"]
