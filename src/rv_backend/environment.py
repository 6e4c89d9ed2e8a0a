# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Derive the environment needed to run an installed Ruby."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Final

from .constants import BIN_SUBDIR, GEM_HOME_KEY, GEM_PATH_KEY, GEMS_SUBDIRS, PATH_KEY
from .errors import MalformedVersion
from .models import EnvironmentBinding

_MAJOR_MINOR: Final[re.Pattern[str]] = re.compile(r"^(\d+)\.(\d+)", re.ASCII)


def gem_version_key(version: str) -> str:
    """Return the ``major.minor.0`` gem directory segment for ``version``.

    Every patch release of a minor line shares one gem directory, so the
    patch component is dropped.

    Raises:
        MalformedVersion: If ``version`` does not begin with ``<digits>.<digits>``.
    """

    match = _MAJOR_MINOR.match(version)
    if match is None:
        raise MalformedVersion(version)
    major, minor = match.groups()
    return f"{major}.{minor}.0"


class EnvironmentResolver:
    """Map an install path and version onto ``PATH``/``GEM_HOME``/``GEM_PATH``."""

    def resolve(self, install_path: str | Path, version: str) -> tuple[EnvironmentBinding, ...]:
        """Return the ordered bindings for the installation at ``install_path``.

        Args:
            install_path: Root directory of the Ruby installation.
            version: Installed version identifier.

        Returns:
            tuple[EnvironmentBinding, ...]: ``PATH``, ``GEM_HOME`` and ``GEM_PATH`` in that order.

        Raises:
            MalformedVersion: If ``version`` does not begin with ``<digits>.<digits>``.
        """

        root = Path(install_path)
        gem_home = str(root.joinpath(*GEMS_SUBDIRS, gem_version_key(version)))
        return (
            EnvironmentBinding(key=PATH_KEY, value=str(root / BIN_SUBDIR)),
            EnvironmentBinding(key=GEM_HOME_KEY, value=gem_home),
            EnvironmentBinding(key=GEM_PATH_KEY, value=gem_home),
        )


def apply_bindings(
    bindings: Iterable[EnvironmentBinding],
    base_env: Mapping[str, str],
) -> dict[str, str]:
    """Return a copy of ``base_env`` with ``bindings`` applied.

    ``PATH`` is prepended to the existing search path; every other key
    replaces the inherited value. ``base_env`` is left untouched.
    """

    env = dict(base_env)
    for binding in bindings:
        if binding.key == PATH_KEY and env.get(PATH_KEY):
            env[PATH_KEY] = os.pathsep.join((binding.value, env[PATH_KEY]))
        else:
            env[binding.key] = binding.value
    return env


__all__ = ["EnvironmentResolver", "apply_bindings", "gem_version_key"]
