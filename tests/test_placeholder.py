"""Smoke test for the package scaffold."""

from __future__ import annotations

from fxtools import __version__


def test_version_format() -> None:
    """Ensure the project exposes a version string."""

    assert isinstance(__version__, str)
    assert __version__
