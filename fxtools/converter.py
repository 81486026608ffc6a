"""Convert a JavaFX jar into a native application image or installer with jpackage.

Requirements on the machine running the conversion:

- a JDK whose ``bin`` directory provides ``jpackage``
- the JavaFX ``jmods`` matching that JDK
- the WiX toolset when building Windows installers
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, TextIO, Tuple

from loguru import logger

from .config import CONFIG_FILE, ConverterConfig, load_config, save_config
from .console import RULE, confirm, print_banner
from .errors import CommandFailedError, FxToolsError, ManifestError, PrerequisiteError
from .logger import setup_logging
from .manifest import read_main_class
from .process import probe_tool, run_inherited
from .settings import LogSettings, env_flag, load_environment

JPACKAGE = "jpackage"
JAVAFX_MODULES = (
    "javafx.controls",
    "javafx.fxml",
    "javafx.graphics",
    "javafx.base",
    "javafx.media",
    "javafx.web",
)
WINDOWS_INSTALLER_TYPES = {"exe", "msi"}
EXIT_AFTER_CREATE_ENV = "FXJARTOEXE_EXIT_AFTER_CREATE"
LABEL_WIDTH = 18


def load_or_create_config(path: Path = CONFIG_FILE) -> Tuple[ConverterConfig, bool]:
    """Load ``path``, or write a default configuration there first.

    Returns the configuration and whether the file was just created.
    """

    if path.exists():
        config = load_config(path)
        logger.info("Config loaded from: {}", path)
        return config, False

    logger.info("Creating new config...")
    config = ConverterConfig.default()
    save_config(config, path)
    logger.info("Config saved in: {}", path)
    logger.info("  Modify that file, then re-run this script.")
    return config, True


def validate_prerequisites(config: ConverterConfig, jpackage: str = JPACKAGE) -> None:
    if not probe_tool(jpackage, "--version"):
        raise PrerequisiteError(f"{jpackage} could not be found.")

    if not config.jar_path.exists():
        raise PrerequisiteError(f"JAR file could not be found: {config.jar_path}")

    if not config.jmods_path.exists():
        raise PrerequisiteError(f"JavaFX jmods could not be found: {config.jmods_path}")

    if config.icon_path is not None and not config.icon_path.exists():
        logger.warning("WARNING: icon not found: {}", config.icon_path)

    logger.info("Requirements verified")


def resolve_main_class(config: ConverterConfig) -> bool:
    """Fill in ``config.main_class`` from the jar manifest when it is unset.

    Returns ``True`` when the value was detected. The configuration file is
    not rewritten.
    """

    if config.main_class:
        return False
    try:
        config.main_class = read_main_class(config.jar_path)
    except ManifestError as exc:
        logger.debug("Main-Class detection failed: {}", exc)
        return False
    return True


def _row(label: str, value: object) -> str:
    return f"{label + ':':<{LABEL_WIDTH}}{value}"


def display_config(config: ConverterConfig) -> None:
    detected = resolve_main_class(config)

    if config.main_class is None:
        main_class = "NOT FOUND - set it in the config!"
    elif detected:
        main_class = f"{config.main_class} (auto-detected)"
    else:
        main_class = config.main_class

    rows = [
        _row("JAR", config.jar_path),
        _row("App name", config.app_name),
        _row("Version", config.app_version),
        _row("Main Class", main_class),
        _row("JavaFX JMODs", config.jmods_path),
        _row("Output", config.output_dir),
        _row("Type", config.build_type),
        _row("Icon", config.icon_path or "(nothing)"),
    ]
    logger.info("\n".join([RULE, "Current config:", RULE, *rows, RULE]))


def build_jpackage_command(config: ConverterConfig, jpackage: str = JPACKAGE) -> List[str]:
    command = [
        jpackage,
        "--input",
        str(config.jar_path.parent),
        "--main-jar",
        config.jar_path.name,
    ]
    if config.main_class:
        command += ["--main-class", config.main_class]
    command += [
        "--name",
        config.app_name,
        "--app-version",
        config.app_version,
        "--dest",
        str(config.output_dir),
        "--type",
        config.build_type,
        "--module-path",
        str(config.jmods_path),
        "--add-modules",
        ",".join(JAVAFX_MODULES),
    ]

    if config.icon_path is not None and config.icon_path.exists():
        command += ["--icon", str(config.icon_path)]
    if config.vendor:
        command += ["--vendor", config.vendor]
    if config.description:
        command += ["--description", config.description]
    if config.copyright:
        command += ["--copyright", config.copyright]
    if config.jvm_options:
        command += ["--java-options", config.jvm_options]
    if config.win_console:
        command.append("--win-console")

    if config.build_type in WINDOWS_INSTALLER_TYPES:
        if config.win_shortcut:
            command.append("--win-shortcut")
        if config.win_menu_group:
            command += ["--win-menu", "--win-menu-group", config.win_menu_group]

    return command


def execute_conversion(config: ConverterConfig, jpackage: str = JPACKAGE) -> None:
    logger.info("Converting...")
    config.output_dir.mkdir(parents=True, exist_ok=True)

    command = build_jpackage_command(config, jpackage)
    logger.info("jpackage command:\n{}", " ".join(command))

    returncode = run_inherited(command)
    if returncode != 0:
        raise CommandFailedError(jpackage, returncode)


def run(
    config_path: Path = CONFIG_FILE,
    *,
    stdin: Optional[TextIO] = None,
    jpackage: str = JPACKAGE,
    exit_after_create: bool = False,
) -> int:
    print_banner("JavaFX JAR to native package converter (jpackage)")
    try:
        config, created = load_or_create_config(config_path)
        if created and exit_after_create:
            return 0

        validate_prerequisites(config, jpackage)
        display_config(config)

        if not confirm("Proceed with the conversion? (y/n): ", stdin):
            logger.info("Operation aborted by user.")
            return 0

        execute_conversion(config, jpackage)
    except (FxToolsError, OSError) as exc:
        logger.exception("ERROR: {}", exc)
        return 1

    logger.success("Conversion successful!")
    logger.info("The packaged application can be found in: {}", config.output_dir)
    return 0


def main() -> int:
    load_environment()
    log_settings = LogSettings.from_env()
    setup_logging(console_level=log_settings.console_level, log_file=log_settings.log_file)
    try:
        return run(exit_after_create=env_flag(EXIT_AFTER_CREATE_ENV))
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        return 130


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
