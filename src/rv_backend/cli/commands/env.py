# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the ``rv-backend env`` command."""

from __future__ import annotations

import json
import shlex
from enum import Enum

import typer

from ...environment import EnvironmentResolver
from ...errors import BackendError
from ..shared import abort, get_state


class EnvFormat(str, Enum):
    """Output formats supported by ``env``."""

    JSON = "json"
    SHELL = "shell"


def env_command(
    ctx: typer.Context,
    install_path: str = typer.Option(..., "--install-path", "-p", help="Root of the Ruby installation."),
    version: str = typer.Option(..., "--version", "-v", help="Installed Ruby version."),
    output_format: EnvFormat = typer.Option(
        EnvFormat.JSON,
        "--format",
        "-f",
        case_sensitive=False,
        help="Emit a JSON object or shell export statements.",
    ),
) -> None:
    """Print the environment bindings that activate an installation."""
    state = get_state(ctx)
    try:
        bindings = EnvironmentResolver().resolve(install_path, version)
    except BackendError as exc:
        abort(exc, use_emoji=state.emoji)

    if output_format is EnvFormat.SHELL:
        for binding in bindings:
            typer.echo(f"export {binding.key}={shlex.quote(binding.value)}")
        return
    typer.echo(json.dumps({binding.key: binding.value for binding in bindings}))


def register(app: typer.Typer) -> None:
    """Register the env command with ``app``."""

    app.command(name="env")(env_command)


__all__ = ["EnvFormat", "env_command", "register"]
