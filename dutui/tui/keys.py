"""Key classification for the browser."""
from __future__ import annotations

from enum import Enum


class Key(str, Enum):
    UP = "up"
    DOWN = "down"
    ENTER = "enter"
    BACK = "back"
    QUIT = "quit"
    OTHER = "other"


# prompt_toolkit key names bound by ConsoleSurface.read_key, plus the raw
# characters a terminal may deliver for the same keys.
KEY_NAMES: dict[str, Key] = {
    "up": Key.UP,
    "down": Key.DOWN,
    "enter": Key.ENTER,
    "c-m": Key.ENTER,
    "c-j": Key.ENTER,
    "\r": Key.ENTER,
    "\n": Key.ENTER,
    "q": Key.QUIT,
    "backspace": Key.BACK,
    "c-h": Key.BACK,
    "\x7f": Key.BACK,
    "\x08": Key.BACK,
}

# Names handed to KeyBindings.add(); "enter" and "backspace" are aliases of
# c-m and c-h, so only one of each pair is registered.
BOUND_KEYS = ("up", "down", "enter", "c-j", "q", "backspace")


def classify_key(name: str | None) -> Key:
    """Map a key name or raw character to a browser Key.

    Unknown input (including None) is Key.OTHER, which the browser ignores.
    """
    if name is None:
        return Key.OTHER
    if isinstance(name, Key):
        return name
    return KEY_NAMES.get(str(name), Key.OTHER)
