"""Build the application jar with Maven."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional

from loguru import logger

from .console import print_banner
from .errors import ArtifactNotFoundError, CommandFailedError, FxToolsError, PrerequisiteError
from .logger import setup_logging
from .process import probe_tool, resolve_tool, stream_command
from .settings import LogSettings, load_environment

MAVEN_ARGS = ["clean", "package", "-DskipTests"]
ARTIFACT_SUFFIX = ".jar"
# maven-shade leaves the unshaded jar behind under this prefix.
EXCLUDED_PREFIX = "original-"
OUTPUT_INDENT = "   "


@dataclass(slots=True)
class BuildSettings:
    """Locations and tool names used by a build."""

    project_dir: Path = field(default_factory=lambda: Path("."))
    build_dir: Path = field(default_factory=lambda: Path("build-output"))
    maven: str = "mvn"
    java_home_var: str = "JAVA_HOME"
    descriptor: str = "pom.xml"

    @property
    def target_dir(self) -> Path:
        return self.project_dir / "target"

    @property
    def resolved_build_dir(self) -> Path:
        return self.build_dir if self.build_dir.is_absolute() else self.project_dir / self.build_dir


def validate_environment(settings: BuildSettings, environ: Optional[Mapping[str, str]] = None) -> None:
    logger.info("Validating environment...")
    source = os.environ if environ is None else environ

    java_home = source.get(settings.java_home_var, "")
    if not java_home.strip():
        raise PrerequisiteError(f"{settings.java_home_var} not set! Configure the environment variable")
    if not Path(java_home).exists():
        raise PrerequisiteError(f"Invalid {settings.java_home_var}: {java_home}")
    logger.info("   ✓ {}: {}", settings.java_home_var, java_home)

    if not probe_tool(settings.maven, "--version"):
        raise PrerequisiteError(f"Maven ({settings.maven}) not found! Download Maven and add it to PATH")
    logger.info("   ✓ Maven available")

    descriptor = settings.project_dir / settings.descriptor
    if not descriptor.exists():
        raise PrerequisiteError(f"{settings.descriptor} not found in: {settings.project_dir}")
    logger.info("   ✓ found {}", settings.descriptor)

    logger.success("Environment validated!")


def remove_tree(directory: Path) -> List[Path]:
    """Delete ``directory`` bottom-up and return the entries that could not be removed."""

    failed: List[Path] = []
    for root, dirs, files in os.walk(directory, topdown=False):
        root_path = Path(root)
        for name in files:
            try:
                (root_path / name).unlink()
            except OSError:
                failed.append(root_path / name)
        for name in dirs:
            child = root_path / name
            try:
                if child.is_symlink():
                    child.unlink()
                else:
                    child.rmdir()
            except OSError:
                failed.append(child)
    try:
        directory.rmdir()
    except OSError:
        failed.append(directory)
    return failed


def clean_build_directory(settings: BuildSettings) -> List[Path]:
    logger.info("Cleaning build directory...")
    build_dir = settings.resolved_build_dir
    if not build_dir.exists():
        return []

    failed = remove_tree(build_dir)
    if failed:
        logger.warning(
            "Could not remove {} entries:\n{}",
            len(failed),
            "\n".join(f"{OUTPUT_INDENT}{path}" for path in failed),
        )
    else:
        logger.info("   ✓ Existing directory removed")
    return failed


def run_maven(settings: BuildSettings) -> None:
    logger.info("Maven build...")
    maven = resolve_tool(settings.maven) or settings.maven
    returncode = stream_command([maven, *MAVEN_ARGS], cwd=settings.project_dir, prefix=OUTPUT_INDENT)
    if returncode != 0:
        raise CommandFailedError("Maven", returncode)


def find_artifact(target_dir: Path) -> Path:
    """Return the first jar in ``target_dir`` that is not an ``original-`` leftover."""

    if not target_dir.is_dir():
        raise ArtifactNotFoundError(f"Failed to create jar: {target_dir} does not exist")
    for candidate in sorted(target_dir.iterdir()):
        if (
            candidate.is_file()
            and candidate.name.endswith(ARTIFACT_SUFFIX)
            and not candidate.name.startswith(EXCLUDED_PREFIX)
        ):
            return candidate
    raise ArtifactNotFoundError("Failed to create jar")


def build(settings: BuildSettings, environ: Optional[Mapping[str, str]] = None) -> Path:
    validate_environment(settings, environ)
    clean_build_directory(settings)
    run_maven(settings)

    artifact = find_artifact(settings.target_dir)
    logger.success("jar created: {}", artifact.name)
    logger.info("   Size: {} KB", artifact.stat().st_size // 1024)
    return artifact


def run(settings: Optional[BuildSettings] = None, environ: Optional[Mapping[str, str]] = None) -> int:
    print_banner("JavaFX → jar Builder", "Maven Build")
    try:
        build(settings or BuildSettings(), environ)
    except (FxToolsError, OSError) as exc:
        logger.exception("ERROR: {}", exc)
        return 1
    print_banner("✅ BUILD SUCCESSFUL! ✅")
    return 0


def main() -> int:
    load_environment()
    log_settings = LogSettings.from_env()
    setup_logging(console_level=log_settings.console_level, log_file=log_settings.log_file)
    try:
        return run()
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        return 130


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
