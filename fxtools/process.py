"""Subprocess helpers for the external Java toolchain."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import IO, Optional, Sequence, cast

from loguru import logger


def resolve_tool(executable: str) -> Optional[str]:
    """Return the full path of ``executable`` on ``PATH`` (``mvn.cmd`` included on Windows)."""

    return shutil.which(executable)


def probe_tool(executable: str, *args: str) -> bool:
    """Run a version query and report whether the tool answered with exit code 0."""

    resolved = resolve_tool(executable)
    if resolved is None:
        logger.debug("{} not found on PATH", executable)
        return False
    try:
        result = subprocess.run(
            [resolved, *args],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError as exc:
        logger.debug("Probing {} failed: {}", executable, exc)
        return False
    return result.returncode == 0


def stream_command(
    cmd: Sequence[str],
    *,
    cwd: Optional[Path] = None,
    prefix: str = "",
    merge_stderr: bool = True,
    echo: bool = True,
) -> int:
    """Run ``cmd`` and print its output line by line until the stream closes.

    Raises ``OSError`` when the process cannot be started. The exit code is
    returned, not checked.
    """

    logger.debug("Running: {}", " ".join(cmd))
    with subprocess.Popen(
        list(cmd),
        cwd=cwd,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT if merge_stderr else None,
        text=True,
        errors="replace",
    ) as process:
        for line in cast(IO[str], process.stdout):
            if echo:
                print(f"{prefix}{line.rstrip()}", flush=True)
        return process.wait()


def run_inherited(cmd: Sequence[str], *, cwd: Optional[Path] = None) -> int:
    """Run ``cmd`` with the parent's stdin/stdout/stderr and return its exit code."""

    logger.debug("Running with inherited I/O: {}", " ".join(cmd))
    return subprocess.run(list(cmd), cwd=cwd, check=False).returncode
