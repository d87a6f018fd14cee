"""Size and bar-graph text helpers."""
from __future__ import annotations

import math
import os

KIB = 1024
MIB = KIB * 1024
GIB = MIB * 1024
TIB = GIB * 1024

_UNITS = (
    (TIB, "TiB"),
    (GIB, "GiB"),
    (MIB, "MiB"),
    (KIB, "KiB"),
)


def display_text(value: object) -> str:
    """Printable form of a path or name.

    Undecodable bytes (surrogate-escaped by os.scandir) become U+FFFD.
    """
    return os.fsencode(str(value)).decode("utf-8", "replace")


def human_size(size: int) -> str:
    """Format a byte count with binary units, e.g. "1.5 MiB" or "512 B"."""
    for threshold, unit in _UNITS:
        if size >= threshold:
            return f"{size / threshold:.1f} {unit}"
    return f"{size} B"


def bar_cells(size: int, max_size: int, width: int) -> int:
    """Number of filled cells for `size` relative to the largest sibling."""
    if max_size <= 0:
        max_size = 1
    # Halves round up, not to even.
    filled = math.floor(size / max_size * width + 0.5)
    return max(0, min(width, filled))


def render_bar(size: int, max_size: int, width: int, fill: str = "#") -> str:
    filled = bar_cells(size, max_size, width)
    return fill * filled + " " * (width - filled)
