# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command-line interface exposing the backend hooks to the host."""

from __future__ import annotations

from .app import app, main

__all__ = ["app", "main"]
