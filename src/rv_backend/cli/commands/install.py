# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the ``rv-backend install`` command."""

from __future__ import annotations

from pathlib import Path

import typer

from ...constants import DEFAULT_TOOL_NAME
from ...errors import BackendError
from ...installer import InstallOrchestrator, validate_request
from ...logging import info, ok, section, warn
from ...models import InstallRequest
from ..shared import abort, get_state


def _has_contents(path: Path) -> bool:
    try:
        return path.is_dir() and any(path.iterdir())
    except OSError:
        return False


def install_command(
    ctx: typer.Context,
    version: str = typer.Option(..., "--version", "-v", help="Ruby version to install."),
    install_path: str = typer.Option(
        ...,
        "--install-path",
        "-p",
        help="Directory chosen by the host for this installation.",
    ),
    tool: str = typer.Option(DEFAULT_TOOL_NAME, "--tool", help="Tool name requested by the host."),
) -> None:
    """Install a Ruby version into the host-provided directory."""
    state = get_state(ctx)
    request = InstallRequest(tool=tool, version=version, install_path=install_path)

    try:
        validate_request(request)
        section(f"{tool} {version}", use_emoji=state.emoji)
        if _has_contents(Path(install_path)):
            warn(
                f"{install_path} is not empty; rv decides whether existing files are replaced.",
                use_emoji=state.emoji,
            )
        info(f"Installing {tool} {version} into {install_path}", use_emoji=state.emoji)
        InstallOrchestrator(state.settings).install(request)
    except BackendError as exc:
        abort(exc, use_emoji=state.emoji)

    ok(f"Installed {tool} {version}.", use_emoji=state.emoji)


def register(app: typer.Typer) -> None:
    """Register the install command with ``app``."""

    app.command(name="install")(install_command)


__all__ = ["install_command", "register"]
