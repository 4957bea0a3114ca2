# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Static analyzer integrations."""

from __future__ import annotations

from .perlcritic import Analyzer, AnalyzerError, PerlCriticAnalyzer, parse_perlcritic

__all__ = ["Analyzer", "AnalyzerError", "PerlCriticAnalyzer", "parse_perlcritic"]
