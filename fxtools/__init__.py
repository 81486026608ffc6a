"""Command-line wrappers for building, launching and packaging JavaFX applications."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("fxtools")
except PackageNotFoundError:  # pragma: no cover - package metadata absent in dev
    __version__ = "0.0.0"

from .builder import BuildSettings, build
from .config import ConverterConfig, load_config, save_config
from .launcher import LaunchConfig

__all__ = [
    "__version__",
    "BuildSettings",
    "ConverterConfig",
    "LaunchConfig",
    "build",
    "load_config",
    "save_config",
]
