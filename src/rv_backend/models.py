# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data models exchanged between the host and the backend."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RawCatalogEntry(BaseModel):
    """Single entry from ``rv ruby list --format json``.

    The lister emits one entry per platform/architecture pair, so the same
    version appears several times. Only ``version`` is used downstream.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    version: str
    platform: str | None = None
    arch: str | None = None


class InstallRequest(BaseModel):
    """Host request to install ``version`` of ``tool`` into ``install_path``."""

    model_config = ConfigDict(frozen=True)

    tool: str = ""
    version: str = ""
    install_path: str = ""


class EnvironmentBinding(BaseModel):
    """Environment variable assignment for a child process."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(min_length=1)
    value: str


__all__ = ["EnvironmentBinding", "InstallRequest", "RawCatalogEntry"]
