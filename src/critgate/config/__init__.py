# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Gate configuration models and loading."""

from __future__ import annotations

from .loader import DEFAULT_PROFILE_DIRNAME, load_config
from .models import ConfigError, GateConfig

__all__ = ["ConfigError", "DEFAULT_PROFILE_DIRNAME", "GateConfig", "load_config"]
