# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for console and logging helpers."""

from __future__ import annotations

import logging

import pytest

from rv_backend.logging import PACKAGE_LOGGER, enable_verbose_logging, fail, info, ok, section, warn


@pytest.fixture
def restore_logger():
    handlers = list(PACKAGE_LOGGER.handlers)
    level = PACKAGE_LOGGER.level
    propagate = PACKAGE_LOGGER.propagate
    yield PACKAGE_LOGGER
    PACKAGE_LOGGER.handlers[:] = handlers
    PACKAGE_LOGGER.setLevel(level)
    PACKAGE_LOGGER.propagate = propagate
    if hasattr(PACKAGE_LOGGER, "_rv_backend_verbose_configured"):
        delattr(PACKAGE_LOGGER, "_rv_backend_verbose_configured")


def test_enable_verbose_logging_is_idempotent(restore_logger: logging.Logger) -> None:
    before = len(restore_logger.handlers)

    enable_verbose_logging()
    enable_verbose_logging()

    assert len(restore_logger.handlers) == before + 1
    assert restore_logger.level == logging.DEBUG
    assert logging.getLogger("rv_backend.catalog").getEffectiveLevel() == logging.DEBUG


def test_console_helpers_write_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    info("listing versions", use_emoji=False, use_color=False)
    ok("done", use_emoji=True, use_color=False)
    warn("careful", use_emoji=False, use_color=False)
    fail("broken [red]markup[/red]", use_emoji=False, use_color=False)

    captured = capsys.readouterr()
    assert captured.out == ""
    lines = captured.err.splitlines()
    assert lines[0] == "listing versions"
    assert lines[1].startswith("✅")
    assert lines[2] == "careful"
    assert lines[3] == "broken [red]markup[/red]"


def test_section_renders_plain_header(capsys: pytest.CaptureFixture[str]) -> None:
    section("ruby 3.3.9", use_emoji=False, use_color=False)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.splitlines() == ["", "--- ruby 3.3.9 ---"]
