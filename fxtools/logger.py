"""Centralized logging configuration using Loguru."""

from __future__ import annotations

import pathlib
import sys

from loguru import logger

CONSOLE_FORMAT = "<level>{message}</level>"


def setup_logging(
    *,
    console_level: str = "INFO",
    log_file: str | pathlib.Path | None = None,
    file_level: str = "DEBUG",
) -> None:
    """Configure the sinks used by the command-line tools.

    Parameters
    ----------
    console_level:
        Minimum log level for console output.
    log_file:
        Optional path of a file that captures structured JSON log output.
        Nothing is written to disk when it is ``None``.
    file_level:
        Minimum log level for file output.

    The console sink prints bare messages because every tool talks directly
    to a person at a terminal. Existing handlers are removed to avoid
    duplicate entries when a tool is invoked repeatedly in one process.
    """

    logger.remove()

    logger.add(
        sys.stdout,
        level=console_level.upper(),
        format=CONSOLE_FORMAT,
        backtrace=True,
        diagnose=False,
        colorize=True,
    )

    if log_file is None:
        logger.debug("Logging configured without file sink")
        return

    file_path = pathlib.Path(log_file).expanduser().resolve()
    file_path.parent.mkdir(parents=True, exist_ok=True)

    logger.add(
        file_path,
        level=file_level.upper(),
        backtrace=False,
        diagnose=False,
        rotation="10 MB",
        retention="30 days",
        compression="zip",
        serialize=True,
    )

    logger.bind(
        console_level=console_level,
        file_level=file_level,
        log_file=str(file_path),
    ).debug("Logging configured")


__all__ = ["setup_logging"]
