"""Read the main attributes of a jar manifest."""

from __future__ import annotations

import zipfile
import zlib
from pathlib import Path
from typing import Dict

from .errors import ManifestError

MANIFEST_ENTRY = "META-INF/MANIFEST.MF"
MAIN_CLASS_ATTRIBUTE = "Main-Class"


def parse_main_attributes(text: str) -> Dict[str, str]:
    """Parse the main section of a manifest.

    Lines longer than 72 bytes are wrapped by the jar tool with a leading
    space on the continuation line; those are joined back together. Parsing
    stops at the first blank line, where per-entry sections begin.
    Attribute names are returned lower-cased.
    """

    attributes: Dict[str, str] = {}
    current: str | None = None
    for raw_line in text.splitlines():
        if not raw_line:
            break
        if raw_line.startswith(" ") and current is not None:
            attributes[current] += raw_line[1:]
            continue
        name, sep, value = raw_line.partition(":")
        if not sep:
            continue
        current = name.strip().lower()
        attributes[current] = value.strip()
    return attributes


def read_main_class(jar_path: Path) -> str:
    """Return the ``Main-Class`` declared in ``jar_path``'s manifest."""

    try:
        with zipfile.ZipFile(jar_path) as archive:
            data = archive.read(MANIFEST_ENTRY)
    except KeyError as exc:
        raise ManifestError(f"No manifest in {jar_path}") from exc
    except (OSError, zipfile.BadZipFile, zlib.error, NotImplementedError, RuntimeError) as exc:
        raise ManifestError(f"Cannot read {jar_path}: {exc}") from exc

    attributes = parse_main_attributes(data.decode("utf-8", errors="replace"))
    main_class = attributes.get(MAIN_CLASS_ATTRIBUTE.lower(), "")
    if not main_class:
        raise ManifestError("Main-Class not found in the JAR MANIFEST")
    return main_class
