# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Ruby backend for tool-version managers, delegating to the ``rv`` installer.

The three host entry points are independent and keep no state between calls:

* :func:`list_versions` returns installable Ruby versions.
* :func:`install` installs one version into a host-chosen directory.
* :func:`resolve_environment` returns the bindings needed to run it.
"""

from __future__ import annotations

from pathlib import Path, PurePath

from .catalog import VersionCatalog, sorted_versions
from .config import BackendSettings, load_settings
from .environment import EnvironmentResolver, apply_bindings, gem_version_key
from .errors import (
    BackendError,
    CatalogEmpty,
    CatalogParseError,
    CatalogUnavailable,
    ConfigError,
    DirectoryCreationFailed,
    InstallationFailed,
    InvalidRequest,
    MalformedVersion,
    ToolExecutionFailed,
    ToolNotFound,
)
from .installer import InstallOrchestrator
from .models import EnvironmentBinding, InstallRequest, RawCatalogEntry


def list_versions(settings: BackendSettings | None = None) -> frozenset[str]:
    """Return the set of installable Ruby versions."""

    return VersionCatalog(settings).list_versions()


def _field_text(value: str | PurePath | None) -> str:
    # Path("") collapses to ".", so an empty path object is treated as missing.
    if value is None or value == PurePath(""):
        return ""
    return str(value)


def install(
    tool: str | None,
    version: str | None,
    install_path: str | Path | None,
    settings: BackendSettings | None = None,
) -> None:
    """Install ``version`` of ``tool`` into ``install_path``.

    ``None`` counts as a missing field and raises :class:`InvalidRequest`.
    """

    request = InstallRequest(
        tool=_field_text(tool),
        version=_field_text(version),
        install_path=_field_text(install_path),
    )
    InstallOrchestrator(settings).install(request)


def resolve_environment(install_path: str | Path, version: str) -> tuple[EnvironmentBinding, ...]:
    """Return the ordered environment bindings for an installation."""

    return EnvironmentResolver().resolve(install_path, version)


__all__ = [
    "BackendError",
    "BackendSettings",
    "CatalogEmpty",
    "CatalogParseError",
    "CatalogUnavailable",
    "ConfigError",
    "DirectoryCreationFailed",
    "EnvironmentBinding",
    "EnvironmentResolver",
    "InstallOrchestrator",
    "InstallRequest",
    "InstallationFailed",
    "InvalidRequest",
    "MalformedVersion",
    "RawCatalogEntry",
    "ToolExecutionFailed",
    "ToolNotFound",
    "VersionCatalog",
    "apply_bindings",
    "gem_version_key",
    "install",
    "list_versions",
    "load_settings",
    "resolve_environment",
    "sorted_versions",
]
