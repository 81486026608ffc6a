"""Tests for the converter configuration file."""

from __future__ import annotations

from pathlib import Path

import pytest

from fxtools.config import ConverterConfig, default_jmods_path, load_config, optional_value, save_config
from fxtools.errors import ConfigError

DEFAULT_KEYS = {
    "jar.path",
    "app.name",
    "app.version",
    "main.class",
    "javafx.jmods.path",
    "output.dir",
    "build.type",
    "icon.path",
    "vendor",
    "description",
    "copyright",
    "jvm.options",
    "win.console",
    "win.menu.group",
    "win.shortcut",
}


def _write(path: Path, body: str) -> Path:
    path.write_text(body, encoding="utf-8")
    return path


def test_saved_defaults_contain_every_key(tmp_path: Path) -> None:
    path = tmp_path / "fxjartoexe.properties"
    save_config(ConverterConfig.default({"JAVA_HOME": "/opt/jdk"}), path)

    lines = [line for line in path.read_text(encoding="utf-8").splitlines() if not line.startswith("#")]
    keys = {line.split("=", 1)[0] for line in lines}

    assert keys == DEFAULT_KEYS
    assert "main.class=" in lines
    assert f"javafx.jmods.path={Path('/opt/jdk') / 'jmods'}" in lines


def test_default_jmods_path_without_java_home() -> None:
    assert default_jmods_path({}) == Path("jmods")


@pytest.mark.parametrize("raw", [None, "", "   ", "null"])
def test_optional_value_treats_sentinel_as_absent(raw) -> None:
    assert optional_value(raw) is None


def test_load_config_parses_values(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "app.properties",
        "# comment\n"
        "jar.path=target/app.jar\n"
        "app.name=Demo App\n"
        "app.version=2.1.0\n"
        "main.class=\n"
        "javafx.jmods.path=C\\:\\\\javafx\\\\jmods\n"
        "output.dir=dist\n"
        "build.type=exe\n"
        "icon.path=null\n"
        "vendor=ACME\n"
        "jvm.options=-Xmx512m -Dfile.encoding=UTF-8\n"
        "win.console=TRUE\n"
        "win.shortcut=false\n",
    )

    config = load_config(path)

    assert config.jar_path == Path("target/app.jar")
    assert config.app_name == "Demo App"
    assert config.main_class is None
    assert str(config.jmods_path) == "C:\\javafx\\jmods"
    assert config.icon_path is None
    assert config.vendor == "ACME"
    assert config.description is None
    assert config.jvm_options == "-Xmx512m -Dfile.encoding=UTF-8"
    assert config.win_console is True
    assert config.win_shortcut is False


def test_load_config_rejects_missing_required_keys(tmp_path: Path) -> None:
    path = _write(tmp_path / "app.properties", "jar.path=app.jar\napp.name=Demo\n")

    with pytest.raises(ConfigError, match="app.version"):
        load_config(path)


def test_save_then_load_keeps_awkward_values(tmp_path: Path) -> None:
    path = tmp_path / "app.properties"
    config = ConverterConfig.default({})
    config.description = "Build #42 of Bob's app"
    config.copyright = " (c) ACME "
    config.main_class = "com.example.Main"

    save_config(config, path)
    loaded = load_config(path)

    assert loaded.description == "Build #42 of Bob's app"
    assert loaded.copyright == "(c) ACME"
    assert loaded.main_class == "com.example.Main"


def test_load_config_reads_java_properties_escapes(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "fxjartoexe.properties",
        "#JavaFX JAR to EXE Configuration\n"
        "#Sun Oct 19 10:00:00 CEST 2026\n"
        "jar.path=target\\\\app.jar\n"
        "app.name=MyJavaFXApp\n"
        "app.version=1.0.0\n"
        "main.class=\n"
        "javafx.jmods.path=C\\:\\\\Program Files\\\\Java\\\\jdk-25/jmods\n"
        "output.dir=dist\n"
        "build.type=app-image\n"
        "copyright=\\u00A9 2026 ACME\n"
        "jvm.options=-Dapp.mode\\=prod\n"
        "win.console=false\n",
    )

    config = load_config(path)

    assert str(config.jmods_path) == "C:\\Program Files\\Java\\jdk-25/jmods"
    assert str(config.jar_path) == "target\\app.jar"
    assert config.copyright == "\u00a9 2026 ACME"
    assert config.jvm_options == "-Dapp.mode=prod"


def test_save_config_writes_java_properties_escapes(tmp_path: Path) -> None:
    path = tmp_path / "fxjartoexe.properties"
    config = ConverterConfig.default({})
    config.jmods_path = Path("C:\\Program Files\\Java\\jdk-25\\jmods")
    config.vendor = "Zoë \U0001F600"

    save_config(config, path)

    lines = path.read_text(encoding="ascii").splitlines()
    assert "javafx.jmods.path=C\\:\\\\Program Files\\\\Java\\\\jdk-25\\\\jmods" in lines
    assert load_config(path).vendor == "Zoë \U0001F600"


@pytest.mark.parametrize("key", ["jar.path", "build.type"])
def test_blank_required_value_is_missing(tmp_path: Path, key: str) -> None:
    path = tmp_path / "app.properties"
    save_config(ConverterConfig.default({}), path)
    text = path.read_text(encoding="ascii")
    path.write_text(
        "\n".join(f"{key}=" if line.startswith(f"{key}=") else line for line in text.splitlines()) + "\n",
        encoding="ascii",
    )

    with pytest.raises(ConfigError, match=key):
        load_config(path)
