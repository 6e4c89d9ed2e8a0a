# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Constants shared by the catalog, installer and environment layers."""

from __future__ import annotations

from typing import Final

DEFAULT_EXECUTABLE: Final[str] = "rv"
DEFAULT_VERSION_PREFIX: Final[str] = "ruby-"
DEFAULT_TOOL_NAME: Final[str] = "ruby"

LIST_SUBCOMMAND: Final[tuple[str, ...]] = ("ruby", "list", "--format", "json")
INSTALL_SUBCOMMAND: Final[tuple[str, ...]] = ("ruby", "install")
INSTALL_DIR_FLAG: Final[str] = "--install-dir"

BIN_SUBDIR: Final[str] = "bin"
GEMS_SUBDIRS: Final[tuple[str, ...]] = ("lib", "ruby", "gems")

PATH_KEY: Final[str] = "PATH"
GEM_HOME_KEY: Final[str] = "GEM_HOME"
GEM_PATH_KEY: Final[str] = "GEM_PATH"

EXECUTABLE_ENV: Final[str] = "RV_BACKEND_EXECUTABLE"
VERSION_PREFIX_ENV: Final[str] = "RV_BACKEND_VERSION_PREFIX"
TIMEOUT_ENV: Final[str] = "RV_BACKEND_TIMEOUT"
VERBOSE_ENV: Final[str] = "RV_BACKEND_VERBOSE"

__all__ = [
    "BIN_SUBDIR",
    "DEFAULT_EXECUTABLE",
    "DEFAULT_TOOL_NAME",
    "DEFAULT_VERSION_PREFIX",
    "EXECUTABLE_ENV",
    "GEMS_SUBDIRS",
    "GEM_HOME_KEY",
    "GEM_PATH_KEY",
    "INSTALL_DIR_FLAG",
    "INSTALL_SUBCOMMAND",
    "LIST_SUBCOMMAND",
    "PATH_KEY",
    "TIMEOUT_ENV",
    "VERBOSE_ENV",
    "VERSION_PREFIX_ENV",
]
