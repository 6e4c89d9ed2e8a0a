# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""State and error rendering shared by CLI commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NoReturn

import typer

from ..config import BackendSettings
from ..errors import BackendError, InstallationFailed, ToolExecutionFailed
from ..logging import fail


@dataclass(slots=True)
class CLIState:
    """Options collected by the root callback."""

    settings: BackendSettings = field(default_factory=BackendSettings)
    emoji: bool = True


def get_state(ctx: typer.Context) -> CLIState:
    """Return the :class:`CLIState` stored on ``ctx``."""

    state = ctx.find_object(CLIState)
    return state if state is not None else CLIState()


def exit_code_for(exc: BackendError) -> int:
    """Return the process exit code used to report ``exc``.

    Failures of the external tool keep its own exit status.
    """

    if isinstance(exc, (InstallationFailed, ToolExecutionFailed)):
        return exc.exit_code or 1
    return 1


def abort(exc: BackendError, *, use_emoji: bool) -> NoReturn:
    """Render ``exc`` and terminate the command."""

    fail(str(exc), use_emoji=use_emoji)
    raise typer.Exit(code=exit_code_for(exc)) from exc


__all__ = ["CLIState", "abort", "exit_code_for", "get_state"]
