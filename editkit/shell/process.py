"""Thin wrapper around :mod:`subprocess` for external utilities."""

from __future__ import annotations

import shutil
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from editkit.exceptions import ExternalToolError, ProcessTimeoutError
from editkit.utils.logging import get_logger

log = get_logger(__name__, component="process")


@dataclass(frozen=True)
class ProcessResult:
    command: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def message(self) -> str:
        """Last non-empty line of output, preferring stderr."""
        for stream in (self.stderr, self.stdout):
            lines = [line for line in stream.splitlines() if line.strip()]
            if lines:
                return lines[-1].strip()
        return ""


def invoke(
    command: str,
    args: Sequence[str] = (),
    *,
    cwd: Optional[Path] = None,
    timeout: Optional[float] = None,
) -> ProcessResult:
    """Run ``command`` with ``args`` and capture its output.

    Raises:
        ExternalToolError: when the executable is not on ``PATH`` or cannot start.
        ProcessTimeoutError: when ``timeout`` seconds elapse first.

    A non-zero exit status is reported through the result, not raised.
    """

    executable = shutil.which(command)
    if executable is None:
        raise ExternalToolError(f"Executable not found: {command}")

    argv = (command, *[str(arg) for arg in args])
    started = time.perf_counter()
    try:
        completed = subprocess.run(
            [executable, *argv[1:]],
            cwd=str(cwd) if cwd is not None else None,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as exc:
        raise ProcessTimeoutError(f"{command} did not finish within {timeout}s") from exc
    except OSError as exc:
        raise ExternalToolError(f"Could not run {command}: {exc}") from exc

    duration_ms = round((time.perf_counter() - started) * 1000, 1)
    log.info(
        "Process finished",
        extra={"command": " ".join(argv), "returncode": completed.returncode, "duration_ms": duration_ms},
    )
    return ProcessResult(
        command=argv,
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )


def run_shell(
    command_line: str,
    *,
    shell: str = "/bin/sh",
    cwd: Optional[Path] = None,
    timeout: Optional[float] = None,
) -> ProcessResult:
    """Run a full command line through ``shell -c``."""
    return invoke(shell, ["-c", command_line], cwd=cwd, timeout=timeout)


__all__ = ["ProcessResult", "invoke", "run_shell"]
