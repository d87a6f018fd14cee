"""Terminal surface the browser draws on and reads keys from."""
from __future__ import annotations

from typing import Protocol

from prompt_toolkit import PromptSession
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from rich.console import Console
from rich.text import Text

from .keys import BOUND_KEYS, Key, classify_key

HIGHLIGHT_STYLE = "reverse"


class Surface(Protocol):
    def size(self) -> tuple[int, int]: ...

    def write(self, row: int, col: int, text: str, highlight: bool = False) -> None: ...

    def clear(self) -> None: ...

    def flush(self) -> None: ...

    def read_key(self) -> Key: ...


def _capture_key() -> str:
    """Capture one keypress and return its prompt_toolkit name.

    Keys:
      - Up/Down: move cursor
      - Enter: open directory
      - Backspace: go back
      - q: quit
      - anything else: "other"
    """
    kb = KeyBindings()

    def _bind(name: str) -> None:
        @kb.add(name)
        def _handler(event):
            event.app.exit(result=name)

    for name in BOUND_KEYS:
        _bind(name)

    @kb.add(Keys.Any)
    def _other(event):
        event.app.exit(result="other")

    @kb.add("c-c")
    def _interrupt(event):
        event.app.exit(exception=KeyboardInterrupt)

    # The prompt's own c-d binding would exit with EOFError.
    @kb.add("c-d")
    def _eof(event):
        event.app.exit(result="other")

    session: PromptSession[str] = PromptSession(
        key_bindings=kb,
        erase_when_done=True,
        reserve_space_for_menu=0,
    )
    try:
        result = session.prompt("", default="")
    except EOFError:
        return "other"
    return result if isinstance(result, str) else "other"


class ConsoleSurface:
    """Frame-buffered surface drawn with rich, keyboard read via prompt_toolkit.

    Rows written during a frame are held until `flush()`, which repaints the
    whole screen. Use as a context manager to switch to the alternate screen
    with the cursor hidden for the duration of the browser loop.
    """

    def __init__(self, console: Console | None = None):
        self.console = console or Console()
        self._rows: dict[int, Text] = {}
        self._screen = None

    def __enter__(self) -> ConsoleSurface:
        self._screen = self.console.screen(hide_cursor=True)
        self._screen.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._screen is not None:
            self._screen.__exit__(exc_type, exc, tb)
            self._screen = None
        return False

    def size(self) -> tuple[int, int]:
        width, height = self.console.size
        return height, width

    def write(self, row: int, col: int, text: str, highlight: bool = False) -> None:
        line = self._rows.setdefault(row, Text())
        if col > len(line):
            line.append(" " * (col - len(line)))
        line.append(text, style=HIGHLIGHT_STYLE if highlight else None)

    def clear(self) -> None:
        self._rows = {}

    def flush(self) -> None:
        rows, _ = self.size()
        self.console.clear()
        for row in range(rows):
            line = self._rows.get(row, Text())
            # The last row is printed without a newline so the screen doesn't scroll.
            self.console.print(
                line,
                no_wrap=True,
                overflow="crop",
                end="" if row == rows - 1 else "\n",
            )

    def read_key(self) -> Key:
        return classify_key(_capture_key())
