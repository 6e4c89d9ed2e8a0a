# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy surfaced to the host version manager."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class BackendError(Exception):
    """Base class for every failure raised by the backend."""


class ConfigError(BackendError):
    """Raised when configuration input is invalid."""


class ToolNotFound(BackendError):
    """Raised when an external executable cannot be located on ``PATH``."""

    def __init__(self, tool: str) -> None:
        super().__init__(f"Executable '{tool}' was not found on PATH")
        self.tool = tool


class ToolExecutionFailed(BackendError):
    """Raised when an external executable exits with a non-zero status."""

    def __init__(
        self,
        command: Sequence[str],
        exit_code: int,
        stdout: str | None,
        stderr: str | None,
    ) -> None:
        super().__init__(
            f"Command '{command[0]}' exited with status {exit_code}. stderr: {stderr or '<none>'}",
        )
        self.command = tuple(command)
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr


class CatalogUnavailable(BackendError):
    """Raised when the version lister cannot be invoked at all."""

    def __init__(self, tool: str) -> None:
        super().__init__(f"{tool} is not installed or not in PATH")
        self.tool = tool


class CatalogParseError(BackendError):
    """Raised when the lister output is not the expected JSON document."""

    def __init__(self) -> None:
        super().__init__("failed to parse external tool output")


class CatalogEmpty(BackendError):
    """Raised when the lister reports no usable versions."""

    def __init__(self) -> None:
        super().__init__("no versions available")


class InvalidRequest(BackendError):
    """Raised when an install request is missing a required field."""

    def __init__(self, field: str) -> None:
        super().__init__(f"invalid install request: '{field}' must not be empty")
        self.field = field


class DirectoryCreationFailed(BackendError):
    """Raised when the install directory cannot be created."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"failed to create install directory '{path}': {cause}")
        self.path = path
        self.cause = cause


class InstallationFailed(BackendError):
    """Raised when the external installer reports failure.

    ``stderr`` holds the installer's own diagnostic, unmodified.
    """

    def __init__(self, version: str, stderr: str | None, exit_code: int = 1) -> None:
        detail = (stderr or "").strip() or "<no output>"
        super().__init__(f"failed to install ruby {version}: {detail}")
        self.version = version
        self.stderr = stderr
        self.exit_code = exit_code


class MalformedVersion(BackendError):
    """Raised when a version string does not start with ``<digits>.<digits>``."""

    def __init__(self, version: str) -> None:
        super().__init__(f"malformed version '{version}': expected <major>.<minor>[.<patch>]")
        self.version = version


__all__ = [
    "BackendError",
    "CatalogEmpty",
    "CatalogParseError",
    "CatalogUnavailable",
    "ConfigError",
    "DirectoryCreationFailed",
    "InstallationFailed",
    "InvalidRequest",
    "MalformedVersion",
    "ToolExecutionFailed",
    "ToolNotFound",
]
