# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Install orchestration delegating to ``rv ruby install``."""

from __future__ import annotations

import logging
from pathlib import Path

from . import process_utils
from .config import BackendSettings
from .constants import INSTALL_DIR_FLAG, INSTALL_SUBCOMMAND
from .errors import DirectoryCreationFailed, InstallationFailed, InvalidRequest, ToolExecutionFailed
from .models import InstallRequest

LOGGER = logging.getLogger(__name__)

_REQUIRED_FIELDS: tuple[str, ...] = ("tool", "version", "install_path")


def validate_request(request: InstallRequest) -> None:
    """Ensure every required field of ``request`` is non-empty.

    Raises:
        InvalidRequest: Naming the first empty field in tool, version, install_path order.
    """

    for field in _REQUIRED_FIELDS:
        if not getattr(request, field).strip():
            raise InvalidRequest(field)


class InstallOrchestrator:
    """Validate install requests and hand them to the external installer."""

    def __init__(self, settings: BackendSettings | None = None) -> None:
        self._settings = settings or BackendSettings()

    def install(self, request: InstallRequest) -> None:
        """Install ``request.version`` into ``request.install_path``.

        The installer's exit status is the only success signal; the contents
        of the directory are not inspected afterwards.

        Raises:
            InvalidRequest: If a required field is empty.
            DirectoryCreationFailed: If the install directory cannot be created.
            ToolNotFound: If the installer executable cannot be found.
            InstallationFailed: If the installer exits with a non-zero status.
        """

        validate_request(request)
        target = Path(request.install_path)
        self._ensure_directory(target)

        command = [
            self._settings.executable,
            *INSTALL_SUBCOMMAND,
            INSTALL_DIR_FLAG,
            str(target),
            request.version,
        ]
        try:
            process_utils.run_command(command, timeout=self._settings.timeout)
        except ToolExecutionFailed as exc:
            raise InstallationFailed(request.version, exc.stderr, exc.exit_code or 1) from exc
        LOGGER.debug("Installed %s %s into %s", request.tool, request.version, target)

    @staticmethod
    def _ensure_directory(path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DirectoryCreationFailed(path, exc) from exc
        LOGGER.debug("Install directory ready: %s", path)


__all__ = ["InstallOrchestrator", "validate_request"]
