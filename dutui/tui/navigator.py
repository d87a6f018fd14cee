"""Navigation stack and selection cursor over the size tree."""
from __future__ import annotations

from ..scanner import Node


class Navigator:
    """Stack-based navigation with a selection cursor.

    Manages the directory stack the browser draws from:
    - Push on enter: opening a directory pushes it onto the stack
    - Pop on Back: returns to the parent view
    - The root is never popped; the stack always has at least one node

    Every transition is total. Out-of-range moves, entering a file and
    popping the root are no-ops. Each returns True when the state changed.
    """

    def __init__(self, root: Node):
        """Initialize with the scanned root as the only view.

        Args:
            root: Root node of the scanned tree
        """
        self.stack: list[Node] = [root]
        self.selected_index = 0

    def current(self) -> Node:
        """Get the node whose children are on screen."""
        return self.stack[-1]

    def root(self) -> Node:
        return self.stack[0]

    def entries(self) -> list[Node]:
        """Children of the current view, in scan order."""
        return self.current().children or []

    def selected(self) -> Node | None:
        """Get the highlighted entry, or None when the view is empty."""
        entries = self.entries()
        if 0 <= self.selected_index < len(entries):
            return entries[self.selected_index]
        return None

    def move_up(self) -> bool:
        if self.selected_index > 0:
            self.selected_index -= 1
            return True
        return False

    def move_down(self) -> bool:
        if self.selected_index + 1 < len(self.entries()):
            self.selected_index += 1
            return True
        return False

    def enter(self) -> bool:
        """Open the highlighted entry if it is a directory.

        Returns:
            True if a directory was pushed
        """
        target = self.selected()
        if target is None or not target.is_directory:
            return False
        self.stack.append(target)
        self.selected_index = 0
        return True

    def back(self) -> bool:
        """Go back to the parent view.

        The cursor resets to the first entry; the previous selection in the
        parent is not restored.

        Returns:
            True if a view was popped, False at the root
        """
        if len(self.stack) > 1:
            self.stack.pop()
            self.selected_index = 0
            return True
        return False

    def depth(self) -> int:
        """Get the current navigation depth.

        Returns:
            Number of nodes in the stack
        """
        return len(self.stack)

    def breadcrumbs(self) -> str:
        """Generate breadcrumb navigation string.

        Returns:
            Breadcrumb path like "project > src > dutui"
        """
        return " > ".join(node.name for node in self.stack)
