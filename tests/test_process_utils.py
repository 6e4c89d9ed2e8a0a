# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the subprocess wrapper."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

from rv_backend.errors import ToolExecutionFailed, ToolNotFound
from rv_backend.process_utils import TIMEOUT_EXIT_CODE, run_command


def test_run_command_captures_output() -> None:
    result = run_command(
        [sys.executable, "-c", "import sys; print('out'); print('err', file=sys.stderr)"],
    )

    assert result.ok
    assert result.exit_code == 0
    assert result.stdout.strip() == "out"
    assert result.stderr.strip() == "err"
    assert result.args[0] == sys.executable


def test_run_command_does_not_use_a_shell() -> None:
    result = run_command([sys.executable, "-c", "import sys; print(sys.argv[1])", "3.3.9; echo hacked"])

    assert result.stdout.strip() == "3.3.9; echo hacked"


def test_run_command_raises_with_stderr_on_failure() -> None:
    with pytest.raises(ToolExecutionFailed) as excinfo:
        run_command([sys.executable, "-c", "import sys; sys.stderr.write('boom'); sys.exit(5)"])

    assert excinfo.value.exit_code == 5
    assert excinfo.value.stderr == "boom"
    assert "exited with status 5" in str(excinfo.value)


def test_run_command_without_check_returns_result() -> None:
    result = run_command([sys.executable, "-c", "raise SystemExit(7)"], check=False)

    assert result.exit_code == 7
    assert not result.ok


def test_missing_executable_raises_tool_not_found(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("rv_backend.process_utils.shutil.which", lambda *_args, **_kwargs: None)

    with pytest.raises(ToolNotFound) as excinfo:
        run_command(["rv", "ruby", "list"])

    assert excinfo.value.tool == "rv"


def test_missing_absolute_executable_raises_tool_not_found(tmp_path: Path) -> None:
    with pytest.raises(ToolNotFound):
        run_command([str(tmp_path / "missing-rv")])


def test_empty_command_is_rejected() -> None:
    with pytest.raises(ValueError):
        run_command([])


def test_executable_is_resolved_with_child_path(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[str | None] = []

    def fake_which(cmd: str, path: str | None = None) -> str | None:
        seen.append(path)
        return sys.executable

    monkeypatch.setattr("rv_backend.process_utils.shutil.which", fake_which)

    run_command(["ruby", "-c", "pass"], env={**os.environ, "PATH": "/opt/rv/ruby/3.3.9/bin"})

    assert seen == ["/opt/rv/ruby/3.3.9/bin"]


def test_timeout_reports_exit_status_124() -> None:
    result = run_command(
        [sys.executable, "-c", "import time; time.sleep(5)"],
        check=False,
        timeout=0.2,
    )

    assert result.exit_code == TIMEOUT_EXIT_CODE
    assert "timed out after 0.2s" in result.stderr


def test_undecodable_output_bytes_are_dropped() -> None:
    script = "import sys; sys.stdout.buffer.write(b'3.3.9\\xff'); sys.stderr.buffer.write(b'cc: \\xe9t\\xe9'); sys.exit(1)"

    with pytest.raises(ToolExecutionFailed) as excinfo:
        run_command([sys.executable, "-c", script])

    assert excinfo.value.stdout == "3.3.9"
    assert excinfo.value.stderr == "cc: t"
