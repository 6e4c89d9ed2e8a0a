# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the ``rv-backend exec`` command."""

from __future__ import annotations

import os

import typer

from ... import process_utils
from ...environment import EnvironmentResolver, apply_bindings
from ...errors import BackendError
from ..shared import abort, get_state


def exec_command(
    ctx: typer.Context,
    command: list[str] = typer.Argument(..., help="Command to run, given after ``--``."),
    install_path: str = typer.Option(..., "--install-path", "-p", help="Root of the Ruby installation."),
    version: str = typer.Option(..., "--version", "-v", help="Installed Ruby version."),
) -> None:
    """Run a command with an installation's environment applied."""
    state = get_state(ctx)
    try:
        bindings = EnvironmentResolver().resolve(install_path, version)
        env = apply_bindings(bindings, os.environ)
        result = process_utils.run_command(command, env=env, check=False, capture_output=False)
    except BackendError as exc:
        abort(exc, use_emoji=state.emoji)
    raise typer.Exit(code=result.exit_code)


def register(app: typer.Typer) -> None:
    """Register the exec command with ``app``."""

    app.command(name="exec")(exec_command)


__all__ = ["exec_command", "register"]
