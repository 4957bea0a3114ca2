# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Violation counting, regression diffing and ordering."""

from __future__ import annotations

from .ordering import regression_sort_key, sort_regressions, sort_violations, violation_sort_key
from .regressions import collect_regressions, count_by_rule, min_fixes_required, severity_lookup

__all__ = [
    "collect_regressions",
    "count_by_rule",
    "min_fixes_required",
    "regression_sort_key",
    "severity_lookup",
    "sort_regressions",
    "sort_violations",
    "violation_sort_key",
]
