# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Report rendering for strict and progressive evaluations."""

from __future__ import annotations

from .formatters import (
    ViolationTemplate,
    render_bypass_hint,
    render_progressive,
    render_strict,
)
from .highlighting import REGRESSION_STYLE, colorize, severity_style

__all__ = [
    "REGRESSION_STYLE",
    "ViolationTemplate",
    "colorize",
    "render_bypass_hint",
    "render_progressive",
    "render_strict",
    "severity_style",
]
