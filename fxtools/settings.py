"""Environment-driven settings shared by the command-line tools."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

LOG_LEVEL_ENV = "FXTOOLS_LOG_LEVEL"
LOG_FILE_ENV = "FXTOOLS_LOG_FILE"

_TRUTHY = {"1", "true", "yes", "on"}


def load_environment(env_file: Path = Path(".env")) -> None:
    """Load ``.env`` from the working directory without clobbering real variables."""

    load_dotenv(env_file, override=False)


def env_flag(name: str, environ: Optional[Mapping[str, str]] = None) -> bool:
    source = os.environ if environ is None else environ
    return source.get(name, "").strip().lower() in _TRUTHY


@dataclass(slots=True)
class LogSettings:
    console_level: str = "INFO"
    log_file: Optional[Path] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LogSettings":
        source = os.environ if environ is None else environ
        level = source.get(LOG_LEVEL_ENV, "").strip() or "INFO"
        log_file = source.get(LOG_FILE_ENV, "").strip()
        return cls(console_level=level.upper(), log_file=Path(log_file) if log_file else None)
