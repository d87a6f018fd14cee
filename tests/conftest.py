from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


def _ensure_project_root_on_path() -> None:
    # When running via the venv's pytest entrypoint, the CWD is not guaranteed to
    # be on sys.path. Ensure the repository root (containing `dutui/`) is importable.
    project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    if project_root not in sys.path:
        sys.path.insert(0, project_root)


_ensure_project_root_on_path()

from dutui.scanner import Node  # noqa: E402
from dutui.tui.keys import Key  # noqa: E402


class FakeSurface:
    """In-memory terminal surface that records frames and replays keys."""

    def __init__(self, rows: int = 24, columns: int = 80, keys: list | None = None):
        self.rows = rows
        self.columns = columns
        self.keys = list(keys or [])
        self.buffer: dict[int, tuple[str, bool]] = {}
        self.frames: list[dict[int, tuple[str, bool]]] = []
        self.clears = 0

    def size(self) -> tuple[int, int]:
        return self.rows, self.columns

    def write(self, row: int, col: int, text: str, highlight: bool = False) -> None:
        self.buffer[row] = (" " * col + text, highlight)

    def clear(self) -> None:
        self.clears += 1
        self.buffer = {}

    def flush(self) -> None:
        self.frames.append(dict(self.buffer))

    def read_key(self) -> Key:
        if not self.keys:
            return Key.QUIT
        key = self.keys.pop(0)
        if isinstance(key, type) and issubclass(key, BaseException):
            raise key()
        return key

    def text(self, row: int) -> str:
        return self.frames[-1].get(row, ("", False))[0]

    def highlighted_rows(self) -> list[int]:
        return [row for row, (_, hl) in self.frames[-1].items() if hl]


def file_node(path: str, size: int) -> Node:
    return Node(path=Path(path), size=size, is_directory=False)


def dir_node(path: str, children: list[Node]) -> Node:
    return Node(
        path=Path(path),
        size=sum(c.size for c in children),
        is_directory=True,
        item_count=1 + sum(c.item_count for c in children),
        children=children,
    )


@pytest.fixture
def sample_tree() -> Node:
    """/root with a directory `docs` (two files), a file `big.bin` and an empty dir."""
    docs = dir_node(
        "/root/docs",
        [file_node("/root/docs/a.txt", 100), file_node("/root/docs/b.txt", 300)],
    )
    return dir_node(
        "/root",
        [docs, file_node("/root/big.bin", 2048), dir_node("/root/empty", [])],
    )


@pytest.fixture
def fake_surface():
    return FakeSurface
