# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution."""

from __future__ import annotations

import logging
import shutil

# Bandit: subprocess usage is intentional; we provide a controlled wrapper around
# external tool execution, normalising arguments and disabling ``shell=True``.
import subprocess  # nosec B404
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .errors import ToolExecutionFailed, ToolNotFound

LOGGER = logging.getLogger(__name__)

TIMEOUT_EXIT_CODE: Final[int] = 124


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Captured outcome of an external command."""

    args: tuple[str, ...]
    stdout: str
    stderr: str
    exit_code: int

    @property
    def ok(self) -> bool:
        """Return ``True`` when the command exited with status zero."""

        return self.exit_code == 0


def _ensure_text(value: str | bytes | None) -> str:
    """Decode captured output, dropping bytes that are not valid UTF-8."""

    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return value.decode(errors="ignore")


def _normalize_args(args: Sequence[str], search_path: str | None = None) -> list[str]:
    """Return ``args`` with the executable resolved through ``search_path``.

    ``search_path`` defaults to the current ``PATH``.

    Raises:
        ValueError: If no arguments are provided.
        ToolNotFound: If the executable cannot be located.
    """

    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        if not head_path.exists():
            raise ToolNotFound(head)
        return [str(head_path), *rest]

    resolved = shutil.which(head, path=search_path)
    if resolved is None:
        raise ToolNotFound(head)
    return [resolved, *rest]


def run_command(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
    check: bool = True,
    capture_output: bool = True,
    timeout: float | None = None,
) -> CommandResult:
    """Execute *args* after normalising the executable path.

    Args:
        args: Command and argument vector; never interpreted by a shell.
        cwd: Optional working directory for the child process.
        env: Complete environment for the child; inherits ours when ``None``.
            Its ``PATH`` is also used to locate the executable.
        check: Raise :class:`ToolExecutionFailed` on a non-zero exit status.
        capture_output: Capture the child's streams; when false they are inherited
            and the result carries empty output.
        timeout: Optional limit in seconds. Expiry is reported as exit status 124.

    Returns:
        CommandResult: Captured stdout, stderr and exit status. Output is
            decoded as UTF-8 with undecodable bytes dropped.

    Raises:
        ToolNotFound: If the executable cannot be resolved.
        ToolExecutionFailed: When ``check`` is true and the process exits non-zero.
    """

    normalized = _normalize_args(args, env.get("PATH") if env is not None else None)
    LOGGER.debug("Running %s", " ".join(normalized))

    try:
        # Bandit: argument lists are passed directly without shell expansion.
        completed = subprocess.run(  # nosec B603
            normalized,
            cwd=str(cwd) if cwd is not None else None,
            env=dict(env) if env is not None else None,
            check=False,
            capture_output=capture_output,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as exc:
        stderr = _ensure_text(exc.stderr)
        timeout_msg = f"Command timed out after {timeout:.1f}s"
        result = CommandResult(
            args=tuple(normalized),
            stdout=_ensure_text(exc.stdout),
            stderr=f"{stderr}\n{timeout_msg}" if stderr else timeout_msg,
            exit_code=TIMEOUT_EXIT_CODE,
        )
    else:
        result = CommandResult(
            args=tuple(normalized),
            stdout=_ensure_text(completed.stdout),
            stderr=_ensure_text(completed.stderr),
            exit_code=completed.returncode,
        )

    LOGGER.debug("%s exited with status %d", normalized[0], result.exit_code)
    if check and not result.ok:
        raise ToolExecutionFailed(normalized, result.exit_code, result.stdout, result.stderr)
    return result


__all__ = ["CommandResult", "TIMEOUT_EXIT_CODE", "run_command"]
