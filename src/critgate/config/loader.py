# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Load the gate configuration from a TOML document."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError

from .models import ConfigError, GateConfig

DEFAULT_PROFILE_DIRNAME: Final[str] = "perlcritic.d"
_PROFILE_DIR_KEY: Final[str] = "profile_dir"


def _format_validation_error(exc: ValidationError) -> str:
    """Return a compact, single-line summary of ``exc``."""

    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"]) or "<root>"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


def _resolve_profile_dir(data: Mapping[str, Any], base_dir: Path) -> Path:
    raw = data.get(_PROFILE_DIR_KEY)
    if raw is None:
        return base_dir / DEFAULT_PROFILE_DIRNAME
    candidate = Path(str(raw))
    return candidate if candidate.is_absolute() else base_dir / candidate


def load_config(path: Path) -> GateConfig:
    """Read and validate the configuration stored at ``path``.

    Relative ``profile_dir`` values are anchored at the directory holding the
    configuration file, which defaults to its ``perlcritic.d`` subdirectory.

    Args:
        path: TOML configuration file.

    Returns:
        GateConfig: Validated configuration.

    Raises:
        ConfigError: If the file cannot be read, cannot be parsed, or has the
            wrong shape. The message names which of the three happened.
    """

    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Cannot parse {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read {path}: {exc.strerror or exc}") from exc

    if not data:
        raise ConfigError(f"Bad file format: {path} - configuration is empty")

    document = dict(data)
    document[_PROFILE_DIR_KEY] = _resolve_profile_dir(document, path.resolve().parent)
    try:
        return GateConfig.model_validate(document)
    except ValidationError as exc:
        raise ConfigError(f"Bad file format: {path} - {_format_validation_error(exc)}") from exc


__all__ = ["DEFAULT_PROFILE_DIRNAME", "load_config"]
