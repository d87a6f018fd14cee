"""Directory scanner that builds the in-memory size tree."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from stat import S_ISDIR
from typing import Callable, Iterator, Protocol

from .formatting import display_text

log = logging.getLogger(__name__)


class DutuiError(Exception):
    """Base error for dutui."""


class TraversalError(DutuiError):
    """A filesystem call failed for a path during traversal.

    Attributes:
        path: Entry whose stat or listing failed
        kind: "stat" or "list"
        cause: Underlying OSError
    """

    def __init__(self, path: Path, kind: str, cause: OSError):
        super().__init__(f"{path}: {cause}")
        self.path = path
        self.kind = kind
        self.cause = cause


@dataclass
class Node:
    """One filesystem entry with its aggregated size and item count."""

    path: Path
    size: int
    is_directory: bool
    item_count: int = 1
    children: list[Node] | None = None

    @property
    def name(self) -> str:
        return display_text(self.path.name or self.path)


@dataclass(frozen=True)
class EntryStat:
    is_directory: bool
    size: int


@dataclass(frozen=True)
class SkippedEntry:
    path: Path
    error: TraversalError


@dataclass(frozen=True)
class ScanResult:
    root: Node
    skipped: list[SkippedEntry] = field(default_factory=list)


class FileSystem(Protocol):
    def stat(self, path: Path) -> EntryStat: ...

    def list_children(self, path: Path) -> list[Path]: ...


class LocalFileSystem:
    """Filesystem backed by `os.stat` / `os.scandir`.

    `stat` follows symlinks, so a dangling link fails like a missing path.
    """

    def stat(self, path: Path) -> EntryStat:
        st = os.stat(path)
        is_dir = S_ISDIR(st.st_mode)
        return EntryStat(is_directory=is_dir, size=0 if is_dir else st.st_size)

    def list_children(self, path: Path) -> list[Path]:
        with os.scandir(path) as entries:
            return [Path(entry.path) for entry in entries]


SkipCallback = Callable[[Path, TraversalError], None]


@dataclass
class _Frame:
    """A directory whose children are still being visited."""

    path: Path
    pending: Iterator[Path]
    children: list[Node] = field(default_factory=list)


def _open(path: Path, fs: FileSystem) -> Node | _Frame:
    """Stat `path`; files become leaves, directories become open frames."""
    try:
        info = fs.stat(path)
    except OSError as exc:
        raise TraversalError(path, "stat", exc) from exc

    if not info.is_directory:
        return Node(path=path, size=info.size, is_directory=False)

    try:
        child_paths = fs.list_children(path)
    except OSError as exc:
        raise TraversalError(path, "list", exc) from exc
    return _Frame(path=path, pending=iter(child_paths))


def _close(frame: _Frame) -> Node:
    children = frame.children
    return Node(
        path=frame.path,
        size=sum(c.size for c in children),
        is_directory=True,
        item_count=1 + sum(c.item_count for c in children),
        children=children,
    )


def traverse(
    path: Path | str,
    *,
    fs: FileSystem | None = None,
    on_skip: SkipCallback | None = None,
) -> Node:
    """Build the size tree rooted at `path`.

    A child whose traversal fails is skipped: it is reported through
    `on_skip` and a warning, and excluded from the parent's totals.
    Failures on `path` itself raise `TraversalError`.

    The walk is depth-first with an explicit stack of open directories,
    so tree depth is not bounded by the interpreter's recursion limit.

    Args:
        path: File or directory to scan
        fs: Filesystem to read from (defaults to the local one)
        on_skip: Called once per skipped child with its path and error

    Returns:
        The root Node
    """
    fs = fs or LocalFileSystem()

    top = _open(Path(path), fs)
    if isinstance(top, Node):
        return top

    stack: list[_Frame] = [top]
    while True:
        frame = stack[-1]
        child_path = next(frame.pending, None)

        if child_path is None:
            stack.pop()
            node = _close(frame)
            if not stack:
                return node
            stack[-1].children.append(node)
            continue

        try:
            opened = _open(child_path, fs)
        except TraversalError as err:
            log.warning("Could not traverse %s: %s", err.path, err.cause)
            if on_skip is not None:
                on_skip(err.path, err)
            continue

        if isinstance(opened, Node):
            frame.children.append(opened)
        else:
            stack.append(opened)


def scan(path: Path | str, *, fs: FileSystem | None = None) -> ScanResult:
    """Traverse `path` and collect every skipped entry alongside the tree."""
    skipped: list[SkippedEntry] = []

    def _collect(child: Path, err: TraversalError) -> None:
        skipped.append(SkippedEntry(path=child, error=err))

    root = traverse(path, fs=fs, on_skip=_collect)
    log.debug(
        "Scanned %s: %d items, %d bytes, %d skipped",
        root.path,
        root.item_count,
        root.size,
        len(skipped),
    )
    return ScanResult(root=root, skipped=skipped)
