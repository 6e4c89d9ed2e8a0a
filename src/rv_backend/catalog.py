# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Remote version catalog backed by ``rv ruby list``."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from packaging.version import InvalidVersion, Version
from pydantic import TypeAdapter, ValidationError

from . import process_utils
from .config import BackendSettings
from .constants import LIST_SUBCOMMAND
from .errors import CatalogEmpty, CatalogParseError, CatalogUnavailable, ToolNotFound
from .models import RawCatalogEntry

LOGGER = logging.getLogger(__name__)

_ENTRIES_ADAPTER: TypeAdapter[list[RawCatalogEntry]] = TypeAdapter(list[RawCatalogEntry])


def strip_prefix(raw: str, prefix: str) -> str:
    """Return ``raw`` without a leading ``prefix``; other occurrences are kept."""

    if prefix and raw.startswith(prefix):
        return raw[len(prefix) :]
    return raw


def parse_catalog(payload: str) -> list[RawCatalogEntry]:
    """Decode the lister's JSON payload into catalog entries.

    Raises:
        CatalogParseError: If ``payload`` is not a JSON array of version objects.
    """

    try:
        return _ENTRIES_ADAPTER.validate_json(payload)
    except ValidationError as exc:
        raise CatalogParseError() from exc


class VersionCatalog:
    """List installable Ruby versions through the external installer."""

    def __init__(self, settings: BackendSettings | None = None) -> None:
        self._settings = settings or BackendSettings()

    def list_versions(self) -> frozenset[str]:
        """Return the deduplicated set of canonical version identifiers.

        Raises:
            CatalogUnavailable: If the installer executable cannot be found.
            ToolExecutionFailed: If the lister exits with a non-zero status.
            CatalogParseError: If the lister output cannot be decoded.
            CatalogEmpty: If no versions remain after normalisation.
        """

        command = [self._settings.executable, *LIST_SUBCOMMAND]
        try:
            result = process_utils.run_command(command, timeout=self._settings.timeout)
        except ToolNotFound as exc:
            raise CatalogUnavailable(self._settings.executable) from exc

        entries = parse_catalog(result.stdout)
        LOGGER.debug("Decoded %d catalog entries", len(entries))

        versions: set[str] = set()
        for entry in entries:
            canonical = strip_prefix(entry.version.strip(), self._settings.version_prefix)
            if not canonical:
                LOGGER.debug("Skipping catalog entry without a version: %r", entry.version)
                continue
            versions.add(canonical)

        if not versions:
            raise CatalogEmpty()
        return frozenset(versions)


def sorted_versions(versions: Iterable[str]) -> list[str]:
    """Return ``versions`` in ascending order.

    Identifiers that are not valid PEP 440 versions are placed last, in
    lexical order.
    """

    parsed: list[tuple[Version, str]] = []
    unparsed: list[str] = []
    for item in versions:
        try:
            parsed.append((Version(item), item))
        except InvalidVersion:
            unparsed.append(item)
    return [item for _, item in sorted(parsed)] + sorted(unparsed)


__all__ = ["VersionCatalog", "parse_catalog", "sorted_versions", "strip_prefix"]
