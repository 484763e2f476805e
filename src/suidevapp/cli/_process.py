"""Thin capability layer over external executables (git, npm)."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Protocol

from suidevapp.cli._errors import ProcessFailedError


class StreamMode(str, Enum):
    """How a child process's stdout/stderr are wired."""

    SUPPRESSED = "suppressed"
    INHERITED = "inherited"
    CAPTURED = "captured"


@dataclass(frozen=True)
class ProcessResult:
    args: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""


class ExternalProcess(Protocol):
    def run(
        self,
        args: Sequence[str],
        *,
        cwd: Path | None = None,
        streams: StreamMode = StreamMode.CAPTURED,
    ) -> ProcessResult: ...


_STREAM_TARGETS: dict[StreamMode, int | None] = {
    StreamMode.SUPPRESSED: subprocess.DEVNULL,
    StreamMode.INHERITED: None,
    StreamMode.CAPTURED: subprocess.PIPE,
}


class SubprocessRunner:
    """Run commands with :func:`subprocess.run`, blocking until they exit.

    No timeout is applied: a hung command stalls the caller.
    """

    def run(
        self,
        args: Sequence[str],
        *,
        cwd: Path | None = None,
        streams: StreamMode = StreamMode.CAPTURED,
    ) -> ProcessResult:
        command = tuple(args)
        target = _STREAM_TARGETS[streams]
        try:
            completed = subprocess.run(
                command,
                cwd=cwd,
                stdout=target,
                stderr=target,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise ProcessFailedError(command, None, str(exc)) from exc

        result = ProcessResult(
            args=command,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
        if result.returncode != 0:
            raise ProcessFailedError(command, result.returncode, _failure_detail(result))
        return result


def _failure_detail(result: ProcessResult) -> str:
    detail = result.stderr.strip()
    if detail:
        return detail
    return f"`{' '.join(result.args)}` exited with status {result.returncode}"
