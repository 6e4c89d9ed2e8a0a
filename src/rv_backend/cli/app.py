# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared options."""

from __future__ import annotations

import typer

from ..config import load_settings, verbose_requested
from ..errors import ConfigError
from ..logging import enable_verbose_logging
from .commands import register_commands
from .shared import CLIState, abort

app = typer.Typer(
    help="Ruby backend for tool-version managers, powered by rv.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def root(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Stream debug logging to stderr.",
    ),
    emoji: bool = typer.Option(
        True,
        "--emoji/--no-emoji",
        help="Toggle emoji in CLI output.",
    ),
) -> None:
    """Load settings and logging before any command runs."""
    if verbose or verbose_requested():
        enable_verbose_logging()
    try:
        settings = load_settings()
    except ConfigError as exc:
        abort(exc, use_emoji=emoji)
    ctx.obj = CLIState(settings=settings, emoji=emoji)


register_commands(app)


def main() -> None:
    """Console script entry point."""

    app()


__all__ = ["app", "main"]
