"""Pytest configuration shared by the fxtools tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from loguru import logger

ROOT = Path(__file__).resolve().parents[1]

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def log_messages():
    """Collect formatted loguru messages emitted during a test."""

    messages: list[str] = []
    handler_id = logger.add(messages.append, format="{message}", level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def log_text(log_messages):
    def render() -> str:
        return "".join(log_messages)

    return render
