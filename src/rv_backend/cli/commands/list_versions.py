# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the ``rv-backend list-versions`` command."""

from __future__ import annotations

import json

import typer

from ...catalog import VersionCatalog, sorted_versions
from ...errors import BackendError
from ..shared import abort, get_state


def list_versions_command(
    ctx: typer.Context,
    as_json: bool = typer.Option(
        False,
        "--json/--no-json",
        help="Print the versions as a JSON array instead of one per line.",
    ),
) -> None:
    """List Ruby versions that rv can install, oldest first."""
    state = get_state(ctx)
    try:
        versions = sorted_versions(VersionCatalog(state.settings).list_versions())
    except BackendError as exc:
        abort(exc, use_emoji=state.emoji)

    if as_json:
        typer.echo(json.dumps(versions))
        return
    for version in versions:
        typer.echo(version)


def register(app: typer.Typer) -> None:
    """Register the list-versions command with ``app``."""

    app.command(name="list-versions")(list_versions_command)


__all__ = ["list_versions_command", "register"]
