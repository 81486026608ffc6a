"""Exceptions raised by the fxtools commands."""

from __future__ import annotations


class FxToolsError(Exception):
    """Base class for every failure a tool reports to the user."""


class PrerequisiteError(FxToolsError):
    """A required tool, environment variable or file is missing."""


class ConfigError(FxToolsError):
    """The converter configuration file is unreadable or incomplete."""


class ManifestError(FxToolsError):
    """A jar has no readable manifest or no ``Main-Class`` attribute."""


class ArtifactNotFoundError(FxToolsError):
    """The build finished without leaving a jar behind."""


class CommandFailedError(FxToolsError):
    """An external command exited with a non-zero status."""

    def __init__(self, tool: str, returncode: int) -> None:
        super().__init__(f"{tool} failed with exit code: {returncode}")
        self.tool = tool
        self.returncode = returncode
