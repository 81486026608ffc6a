"""Tests for environment-driven settings."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from fxtools.settings import LogSettings, env_flag, load_environment


def test_env_flag_values() -> None:
    assert env_flag("X", {"X": "1"})
    assert env_flag("X", {"X": " Yes "})
    assert not env_flag("X", {"X": "0"})
    assert not env_flag("X", {})


def test_log_settings_from_env(tmp_path: Path) -> None:
    settings = LogSettings.from_env({"FXTOOLS_LOG_LEVEL": "debug", "FXTOOLS_LOG_FILE": str(tmp_path / "fx.log")})
    assert settings.console_level == "DEBUG"
    assert settings.log_file == tmp_path / "fx.log"

    assert LogSettings.from_env({}) == LogSettings()


def test_load_environment_does_not_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("FXTOOLS_TEST_KEEP=file\nFXTOOLS_TEST_NEW=file\n", encoding="utf-8")
    monkeypatch.setenv("FXTOOLS_TEST_KEEP", "process")
    monkeypatch.delenv("FXTOOLS_TEST_NEW", raising=False)

    load_environment(env_file)

    assert os.environ["FXTOOLS_TEST_KEEP"] == "process"
    assert os.environ["FXTOOLS_TEST_NEW"] == "file"
    monkeypatch.delenv("FXTOOLS_TEST_NEW")
