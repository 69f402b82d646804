"""
Terminal Renderer
=================

Draws snapshots into a curses window: the dog, the scrolling objects in their
kind colours, and the HUD. Thin wrapper over render_text.frame_sprites.
"""

from __future__ import annotations

import curses
from typing import Dict, Optional

from dog_pacman.pacman_core.config_loader import GameConfig, get_config
from dog_pacman.pacman_core.object_catalog import ObjectCatalog
from dog_pacman.pacman_core.render_text import SpriteDraw, frame_sprites
from dog_pacman.pacman_core.state_snapshot import GameSnapshot

COLOR_NAMES: Dict[str, int] = {
    "black": curses.COLOR_BLACK,
    "red": curses.COLOR_RED,
    "green": curses.COLOR_GREEN,
    "yellow": curses.COLOR_YELLOW,
    "blue": curses.COLOR_BLUE,
    "magenta": curses.COLOR_MAGENTA,
    "cyan": curses.COLOR_CYAN,
    "white": curses.COLOR_WHITE,
}


class ColorTable:
    """Allocates one curses colour pair per colour name, on first use."""

    def __init__(self):
        self._pairs: Dict[str, int] = {}
        self._enabled = False

    def init(self) -> None:
        """Enable colours. Call once curses is initialised."""
        if not curses.has_colors():
            return
        curses.start_color()
        curses.use_default_colors()
        self._enabled = True

    def attr(self, name: str) -> int:
        """Attribute for a colour name; plain text for unknown names."""
        if not self._enabled or name not in COLOR_NAMES:
            return curses.A_NORMAL
        if name not in self._pairs:
            pair_id = len(self._pairs) + 1
            curses.init_pair(pair_id, COLOR_NAMES[name], -1)
            self._pairs[name] = pair_id
        return curses.color_pair(self._pairs[name])


def safe_addstr(window, y: int, x: int, text: str, attr: int = curses.A_NORMAL) -> None:
    """Write text clipped to the window; off-screen parts are dropped."""
    height, width = window.getmaxyx()
    if not 0 <= y < height:
        return
    if x < 0:
        text = text[-x:]
        x = 0
    text = text[:max(0, width - x)]
    if not text:
        return
    try:
        window.addstr(y, x, text, attr)
    except curses.error:
        # Writing the bottom-right cell moves the cursor off-screen
        pass


class TerminalRenderer:
    """Renders GameSnapshots to a curses window."""

    def __init__(
        self,
        window,
        config: Optional[GameConfig] = None,
        catalog: Optional[ObjectCatalog] = None,
        colors: Optional[ColorTable] = None
    ):
        """
        Initialize renderer.

        Args:
            window: curses window (usually stdscr).
            config: Game configuration. Uses default if None.
            catalog: Object catalog. Built from config if None.
            colors: Colour table; a new one is initialised if None.
        """
        if config is None:
            config = get_config()

        self._window = window
        self._config = config
        self._catalog = catalog if catalog is not None else ObjectCatalog(config)
        if colors is None:
            colors = ColorTable()
            colors.init()
        self._colors = colors

    def render(self, snapshot: GameSnapshot) -> None:
        """Clear, draw the frame, and flush to the terminal."""
        self._window.erase()
        for sprite in frame_sprites(snapshot, self._config, self._catalog):
            self._draw_sprite(sprite)
        self._window.refresh()

    def _draw_sprite(self, sprite: SpriteDraw) -> None:
        attr = self._colors.attr(sprite.color)
        for dy, line in enumerate(sprite.lines):
            safe_addstr(self._window, sprite.y + dy, sprite.x, line, attr)
