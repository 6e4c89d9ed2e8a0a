# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich consoles for user-facing messages.

Stdout carries data read by the host (version lists, bindings), so every
console writes to stderr.
"""

from __future__ import annotations

import sys
from functools import cache

from rich.console import Console


def detect_tty() -> bool:
    """Return ``True`` when stderr appears to be backed by a terminal."""

    try:
        return sys.stderr.isatty()
    except (AttributeError, ValueError):
        return False


@cache
def _stderr_console(color: bool, emoji: bool, tty: bool) -> Console:
    styled = color and tty
    return Console(
        stderr=True,
        color_system="auto" if styled else None,
        force_terminal=tty,
        no_color=not styled,
        emoji=emoji,
        soft_wrap=True,
    )


def get_console(*, color: bool, emoji: bool) -> Console:
    """Return the stderr console for the given ``color``/``emoji`` preferences."""

    return _stderr_console(color, emoji, detect_tty())


__all__ = ["detect_tty", "get_console"]
