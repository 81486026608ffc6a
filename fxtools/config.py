"""Converter configuration record and its ``key=value`` file.

The file uses the escaping of ``java.util.Properties`` so it stays readable by
the Java tooling that shares it.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Dict, Mapping, Optional

from dotenv import dotenv_values

from .errors import ConfigError

CONFIG_FILE = Path("fxjartoexe.properties")
CONFIG_HEADER = "JavaFX JAR to EXE Configuration"

# Older files spell an absent setting as the literal string "null".
NULL_SENTINEL = "null"

REQUIRED_KEYS = (
    "jar.path",
    "app.name",
    "app.version",
    "javafx.jmods.path",
    "output.dir",
    "build.type",
)


def default_jmods_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    source = os.environ if environ is None else environ
    java_home = source.get("JAVA_HOME", "").strip()
    return Path(java_home) / "jmods" if java_home else Path("jmods")


def optional_value(value: Optional[str]) -> Optional[str]:
    """Map empty values and the ``null`` sentinel to ``None``."""

    if value is None:
        return None
    value = value.strip()
    if not value or value == NULL_SENTINEL:
        return None
    return value


def _flag(value: Optional[str], default: bool) -> bool:
    value = optional_value(value)
    if value is None:
        return default
    return value.lower() == "true"


@dataclass(slots=True)
class ConverterConfig:
    """Settings for one jar-to-native-package conversion."""

    jar_path: Path
    app_name: str
    app_version: str
    jmods_path: Path
    output_dir: Path
    build_type: str
    main_class: Optional[str] = None
    icon_path: Optional[Path] = None
    vendor: Optional[str] = None
    description: Optional[str] = None
    copyright: Optional[str] = None
    jvm_options: Optional[str] = None
    win_console: bool = False
    win_menu_group: Optional[str] = None
    win_shortcut: bool = True

    @classmethod
    def default(cls, environ: Optional[Mapping[str, str]] = None) -> "ConverterConfig":
        return cls(
            jar_path=Path("app.jar"),
            app_name="MyJavaFXApp",
            app_version="1.0.0",
            jmods_path=default_jmods_path(environ),
            output_dir=Path("dist"),
            build_type="app-image",
        )

    @classmethod
    def from_properties(cls, values: Mapping[str, Optional[str]]) -> "ConverterConfig":
        missing = [key for key in REQUIRED_KEYS if not (values.get(key) or "").strip()]
        if missing:
            raise ConfigError(f"Missing required configuration keys: {', '.join(missing)}")

        icon = optional_value(values.get("icon.path"))
        return cls(
            jar_path=Path(values["jar.path"].strip()),
            app_name=values["app.name"].strip(),
            app_version=values["app.version"].strip(),
            jmods_path=Path(values["javafx.jmods.path"].strip()),
            output_dir=Path(values["output.dir"].strip()),
            build_type=values["build.type"].strip(),
            main_class=optional_value(values.get("main.class")),
            icon_path=Path(icon) if icon else None,
            vendor=optional_value(values.get("vendor")),
            description=optional_value(values.get("description")),
            copyright=optional_value(values.get("copyright")),
            jvm_options=optional_value(values.get("jvm.options")),
            win_console=_flag(values.get("win.console"), False),
            win_menu_group=optional_value(values.get("win.menu.group")),
            win_shortcut=_flag(values.get("win.shortcut"), True),
        )

    def to_properties(self) -> Dict[str, str]:
        return {
            "jar.path": str(self.jar_path),
            "app.name": self.app_name,
            "app.version": self.app_version,
            "main.class": self.main_class or "",
            "javafx.jmods.path": str(self.jmods_path),
            "output.dir": str(self.output_dir),
            "build.type": self.build_type,
            "icon.path": str(self.icon_path) if self.icon_path else "",
            "vendor": self.vendor or "",
            "description": self.description or "",
            "copyright": self.copyright or "",
            "jvm.options": self.jvm_options or "",
            "win.console": str(self.win_console).lower(),
            "win.menu.group": self.win_menu_group or "",
            "win.shortcut": str(self.win_shortcut).lower(),
        }


_ESCAPE = re.compile(r"\\(u[0-9a-fA-F]{4}|.)", re.DOTALL)
_CONTROL_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_CONTROL_CHARS = {char: letter for letter, char in _CONTROL_ESCAPES.items()}


def _decode_escape(match: re.Match[str]) -> str:
    token = match.group(1)
    if token[0] == "u" and len(token) == 5:
        return chr(int(token[1:], 16))
    return _CONTROL_ESCAPES.get(token, token)


def unescape_value(value: str) -> str:
    """Decode ``java.util.Properties`` escapes (``\\:``, ``\\\\``, ``\\uXXXX``...)."""

    decoded = _ESCAPE.sub(_decode_escape, value)
    # \uXXXX pairs may encode a surrogate pair.
    return decoded.encode("utf-16", "surrogatepass").decode("utf-16", "surrogatepass")


def escape_value(value: str) -> str:
    """Escape ``value`` so both the Properties loader and dotenv read it back unchanged."""

    out = []
    for char in value:
        if char == "\\":
            out.append("\\\\")
        elif char in "=:#!'\"":
            out.append("\\" + char)
        elif char in _CONTROL_CHARS:
            out.append("\\" + _CONTROL_CHARS[char])
        elif ord(char) < 0x20 or ord(char) > 0x7E:
            data = char.encode("utf-16-be", "surrogatepass")
            out.extend(f"\\u{int.from_bytes(data[i:i + 2], 'big'):04X}" for i in range(0, len(data), 2))
        else:
            out.append(char)
    return "".join(out)


def load_config(path: Path = CONFIG_FILE) -> ConverterConfig:
    try:
        raw = dotenv_values(path, interpolate=False, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc
    values = {key: None if value is None else unescape_value(value) for key, value in raw.items()}
    return ConverterConfig.from_properties(values)


def save_config(config: ConverterConfig, path: Path = CONFIG_FILE) -> None:
    lines = [f"# {CONFIG_HEADER}", f"# {datetime.now():%a %b %d %H:%M:%S %Y}"]
    lines.extend(f"{key}={escape_value(value)}" for key, value in config.to_properties().items())
    path.write_text("\n".join(lines) + "\n", encoding="ascii")
