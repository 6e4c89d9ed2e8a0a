# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from rv_backend.errors import ToolExecutionFailed
from rv_backend.process_utils import CommandResult


class FakeRunner:
    """Stand-in for ``run_command`` recording every invocation."""

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.kwargs: list[dict[str, object]] = []
        self.stdout = ""
        self.stderr = ""
        self.exit_code = 0
        self.error: Exception | None = None

    def __call__(self, args: Sequence[str], **kwargs: object) -> CommandResult:
        self.calls.append(list(args))
        self.kwargs.append(kwargs)
        if self.error is not None:
            raise self.error
        if self.exit_code != 0 and kwargs.get("check", True):
            raise ToolExecutionFailed(list(args), self.exit_code, self.stdout, self.stderr)
        return CommandResult(
            args=tuple(args),
            stdout=self.stdout,
            stderr=self.stderr,
            exit_code=self.exit_code,
        )


@pytest.fixture
def fake_runner(monkeypatch: pytest.MonkeyPatch) -> FakeRunner:
    """Replace ``rv_backend.process_utils.run_command`` with a recorder."""
    runner = FakeRunner()
    monkeypatch.setattr("rv_backend.process_utils.run_command", runner)
    return runner


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove ``RV_BACKEND_*`` variables inherited from the developer shell."""
    for variable in (
        "RV_BACKEND_EXECUTABLE",
        "RV_BACKEND_VERSION_PREFIX",
        "RV_BACKEND_TIMEOUT",
        "RV_BACKEND_VERBOSE",
    ):
        monkeypatch.delenv(variable, raising=False)
