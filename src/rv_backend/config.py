# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model for the rv backend."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .constants import (
    DEFAULT_EXECUTABLE,
    DEFAULT_VERSION_PREFIX,
    EXECUTABLE_ENV,
    TIMEOUT_ENV,
    VERBOSE_ENV,
    VERSION_PREFIX_ENV,
)
from .errors import ConfigError


class BackendSettings(BaseModel):
    """Settings controlling how the external installer is invoked."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    executable: str = DEFAULT_EXECUTABLE
    version_prefix: str = DEFAULT_VERSION_PREFIX
    timeout: float | None = Field(default=None, gt=0)

    @field_validator("executable")
    @classmethod
    def _require_executable(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("executable must not be empty")
        return stripped


_ENV_FIELDS: dict[str, str] = {
    EXECUTABLE_ENV: "executable",
    VERSION_PREFIX_ENV: "version_prefix",
    TIMEOUT_ENV: "timeout",
}


def load_settings(environ: Mapping[str, str] | None = None) -> BackendSettings:
    """Build :class:`BackendSettings` from ``RV_BACKEND_*`` variables.

    Args:
        environ: Mapping to read; defaults to ``os.environ``.

    Returns:
        BackendSettings: Settings with environment overrides applied.

    Raises:
        ConfigError: If a variable holds an invalid value.
    """

    source = os.environ if environ is None else environ
    values: dict[str, str] = {}
    for variable, field in _ENV_FIELDS.items():
        raw = source.get(variable)
        if raw is None or (field != "version_prefix" and not raw.strip()):
            continue
        values[field] = raw

    try:
        return BackendSettings.model_validate(values)
    except ValidationError as exc:
        bad_fields = {str(error["loc"][0]) for error in exc.errors() if error["loc"]}
        variables = sorted(var for var, field in _ENV_FIELDS.items() if field in bad_fields)
        joined = ", ".join(variables) or "environment"
        raise ConfigError(f"Invalid configuration in {joined}: {exc.errors()[0]['msg']}") from exc


_TRUE_VALUES: frozenset[str] = frozenset({"1", "true", "yes", "on"})


def verbose_requested(environ: Mapping[str, str] | None = None) -> bool:
    """Return ``True`` when ``RV_BACKEND_VERBOSE`` holds a true value.

    Accepts ``1``, ``true``, ``yes`` and ``on`` in any case; anything else,
    including ``0`` and ``false``, leaves verbose logging off.
    """

    source = os.environ if environ is None else environ
    return source.get(VERBOSE_ENV, "").strip().lower() in _TRUE_VALUES


__all__ = ["BackendSettings", "load_settings", "verbose_requested"]
