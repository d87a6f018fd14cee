"""Frame rendering for the browser."""
from __future__ import annotations

from typing import TYPE_CHECKING

from ..formatting import display_text, human_size, render_bar

if TYPE_CHECKING:
    from ..scanner import Node
    from .navigator import Navigator
    from .surface import Surface


HELP_TEXT = (
    "Press 'q' to quit. Use arrow keys to navigate. "
    "Enter to open directory. Backspace to go back."
)

# Header, footer, help line and the blank row above the footer.
RESERVED_ROWS = 4
DEFAULT_BAR_WIDTH = 30


# ═══════════════════════════════════════════════════════════════════════════════
# LINE BUILDERS
# ═══════════════════════════════════════════════════════════════════════════════

def header_line(node: Node, width: int) -> str:
    """Current directory path, padded with dashes to the display width."""
    text = f"--- {display_text(node.path)} "
    return text + "-" * max(0, width - len(text))


def entry_line(entry: Node, max_size: int, bar_width: int = DEFAULT_BAR_WIDTH) -> str:
    bar = render_bar(entry.size, max_size, bar_width)
    return f"{human_size(entry.size):>10} [{bar}] {entry.name}"


def footer_line(root: Node) -> str:
    """Root totals; disk usage and apparent size are the same byte sum."""
    total = human_size(root.size)
    return f"*Total disk usage: {total:>10}   Apparent size: {total:>10}   Items: {root.item_count}"


def visible_rows(height: int) -> int:
    return max(0, height - RESERVED_ROWS)


# ═══════════════════════════════════════════════════════════════════════════════
# FRAME
# ═══════════════════════════════════════════════════════════════════════════════

def render_frame(surface: Surface, nav: Navigator, bar_width: int = DEFAULT_BAR_WIDTH) -> None:
    """Draw one full frame for the navigator's current view.

    Args:
        surface: Terminal surface to draw on
        nav: Navigation state (current view and cursor)
        bar_width: Width of the size bar in cells
    """
    height, width = surface.size()
    current = nav.current()
    entries = nav.entries()
    max_size = max((e.size for e in entries), default=1)

    surface.clear()
    surface.write(0, 0, header_line(current, width)[:width])

    for i, entry in enumerate(entries[: visible_rows(height)]):
        line = entry_line(entry, max_size, bar_width)
        surface.write(i + 1, 0, line[:width], highlight=(i == nav.selected_index))

    if height >= 3:
        surface.write(height - 2, 0, footer_line(nav.root())[:width])
    if height >= 2:
        surface.write(height - 1, 0, HELP_TEXT[:width])

    surface.flush()
