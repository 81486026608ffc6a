"""Start a packaged JavaFX jar, or print the command that would start it."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional, Sequence, Tuple

from loguru import logger

from .logger import setup_logging
from .process import stream_command
from .settings import LogSettings, load_environment

PRINT_ONLY_FLAG = "-o"

ENV_PREFIX = "FXJARRUN_"


@dataclass(slots=True, frozen=True)
class LaunchConfig:
    """What to launch and where the JavaFX SDK lives."""

    java: str = "java"
    javafx_lib: Path = field(default_factory=lambda: Path("javafx-sdk-25.0.1") / "lib")
    modules: Tuple[str, ...] = ("javafx.controls", "javafx.fxml")
    jar: Path = field(default_factory=lambda: Path("target") / "buildme-1.0-SNAPSHOT.jar")
    main_class: str = "com.example.buildme.HelloApplication"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LaunchConfig":
        source = os.environ if environ is None else environ
        defaults = cls()

        def read(name: str) -> Optional[str]:
            value = source.get(f"{ENV_PREFIX}{name}", "").strip()
            return value or None

        modules = read("MODULES")
        return cls(
            java=read("JAVA") or defaults.java,
            javafx_lib=Path(read("JAVAFX_LIB") or defaults.javafx_lib),
            modules=tuple(m.strip() for m in modules.split(",") if m.strip()) if modules else defaults.modules,
            jar=Path(read("JAR") or defaults.jar),
            main_class=read("MAIN_CLASS") or defaults.main_class,
        )

    def classpath(self) -> str:
        return os.pathsep.join([str(self.jar), str(self.javafx_lib / "*")])

    def to_argv(self) -> List[str]:
        return [
            self.java,
            "--enable-preview",
            "--module-path",
            str(self.javafx_lib),
            "--add-modules",
            ",".join(self.modules),
            "-cp",
            self.classpath(),
            self.main_class,
        ]


def run(argv: Sequence[str], config: Optional[LaunchConfig] = None) -> int:
    if len(argv) > 1:
        logger.error("Error: this command only takes either zero or one parameter")
        return 1

    config = config or LaunchConfig()
    cmd = config.to_argv()

    if argv:
        if argv[0] != PRINT_ONLY_FLAG:
            logger.error("Error: invalid command parameter '{}'", argv[0])
            return 1
        print(" ".join(cmd))
        return 0

    try:
        return stream_command(cmd, merge_stderr=False)
    except OSError as exc:
        logger.error("Failed to run command: {} ({})", config.java, exc)
        return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_environment()
    log_settings = LogSettings.from_env()
    setup_logging(console_level=log_settings.console_level, log_file=log_settings.log_file)
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        return run(args, LaunchConfig.from_env())
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
