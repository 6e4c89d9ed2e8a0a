# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command registry."""

from __future__ import annotations

import typer

from . import env, exec_, install, list_versions

__all__ = ["register_commands"]


def register_commands(app: typer.Typer) -> None:
    """Register the backend hook commands on ``app``."""

    list_versions.register(app)
    install.register(app)
    env.register(app)
    exec_.register(app)
