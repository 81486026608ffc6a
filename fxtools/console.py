"""Terminal presentation helpers: banners and the confirmation prompt."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO

BANNER_WIDTH = 60
RULE = "═" * 39


def banner(lines: Iterable[str], width: int = BANNER_WIDTH) -> str:
    inner = width - 2
    rows = [f"║ {line.ljust(inner - 2)} ║" for line in lines]
    return "\n".join(["╔" + "═" * inner + "╗", *rows, "╚" + "═" * inner + "╝"])


def print_banner(*lines: str) -> None:
    print(banner(lines))
    print()


def confirm(prompt: str, stream: Optional[TextIO] = None) -> bool:
    """Ask a yes/no question; only ``y`` or ``yes`` (any case) counts as consent.

    End of input is treated as a refusal.
    """

    source = sys.stdin if stream is None else stream
    print(prompt, end="", flush=True)
    response = source.readline()
    return response.strip().lower() in {"y", "yes"}
