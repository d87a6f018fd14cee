"""Main render/input loop for the size browser."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .components import DEFAULT_BAR_WIDTH, render_frame
from .keys import Key

if TYPE_CHECKING:
    from ..settings import Settings
    from .navigator import Navigator
    from .surface import Surface

log = logging.getLogger(__name__)


class Browser:
    """Main navigation loop with key dispatch.

    The browser draws the navigator's current view, blocks for one key,
    applies the matching transition and repeats until quit.
    """

    def __init__(
        self,
        nav: Navigator,
        surface: Surface,
        settings: Settings | None = None,
    ):
        """Initialize browser with dependencies.

        Args:
            nav: Navigator over the scanned tree
            surface: Terminal surface to draw on and read keys from
            settings: Application settings (bar width)
        """
        self.nav = nav
        self.surface = surface
        self.bar_width = (
            settings.DUTUI_BAR_WIDTH if settings is not None else DEFAULT_BAR_WIDTH
        )

    def handle(self, key: Key) -> bool:
        """Apply one key to the navigator.

        Returns:
            False when the key ends the loop, True otherwise
        """
        if key == Key.QUIT:
            return False
        if key == Key.UP:
            self.nav.move_up()
        elif key == Key.DOWN:
            self.nav.move_down()
        elif key == Key.ENTER:
            if self.nav.enter():
                log.debug("Entered %s", self.nav.breadcrumbs())
        elif key == Key.BACK:
            if self.nav.back():
                log.debug("Back to %s", self.nav.breadcrumbs())
        # Anything else is ignored.
        return True

    def run(self) -> None:
        """Run the browser until quit or Ctrl+C."""
        while True:
            render_frame(self.surface, self.nav, self.bar_width)
            try:
                key = self.surface.read_key()
            except KeyboardInterrupt:
                break
            if not self.handle(key):
                break
