"""
Text Renderer
=============

Turns a GameSnapshot into positioned sprites, and rasterizes them into plain
text lines. The terminal renderer draws the same sprites with colours; the
headless environment uses the plain text for render_mode="ansi".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from dog_pacman.pacman_core.config_loader import GameConfig, get_config
from dog_pacman.pacman_core.object_catalog import ObjectCatalog
from dog_pacman.pacman_core.state_snapshot import GameSnapshot

CONTROLS_TEXT = "Space: Open mouth | ESC/Q: Quit"
HUD_ROW = 0
HINT_ROW = 2


@dataclass(frozen=True)
class SpriteDraw:
    """A block of text lines to draw with its top-left at (x, y)."""
    x: int
    y: int
    lines: Tuple[str, ...]
    color: str

    def cells(self) -> Iterator[Tuple[int, int, str]]:
        """Yield (column, row, char) for every character, spaces included."""
        for dy, line in enumerate(self.lines):
            for dx, ch in enumerate(line):
                yield self.x + dx, self.y + dy, ch


def hud_text(snapshot: GameSnapshot) -> str:
    return f"Lives: {snapshot.lives} | Score: {snapshot.score} | Speed: {snapshot.object_speed}"


def goal_hint(catalog: ObjectCatalog) -> str:
    """One-line reminder of what to eat, e.g. 'Eat only POOP, avoid other objects!'."""
    names = " and ".join(k.name.upper() for k in catalog.edible_kinds)
    return f"Eat only {names}, avoid other objects!"


def frame_sprites(
    snapshot: GameSnapshot,
    config: Optional[GameConfig] = None,
    catalog: Optional[ObjectCatalog] = None
) -> List[SpriteDraw]:
    """
    Build the draw list for one frame, back to front.

    Order: player, objects (spawn order), HUD.
    """
    if config is None:
        config = get_config()
    if catalog is None:
        catalog = ObjectCatalog(config)

    player_sprite = config.player.sprite_open if snapshot.mouth_open else config.player.sprite_closed
    sprites = [
        SpriteDraw(snapshot.player_x, snapshot.player_y, player_sprite, config.player.color)
    ]

    for obj in snapshot.objects:
        kind = catalog[obj.kind_id]
        sprites.append(SpriteDraw(obj.x, obj.y, kind.sprite, kind.color))

    width = snapshot.screen_width
    hint = goal_hint(catalog)
    sprites.append(SpriteDraw(0, HUD_ROW, (hud_text(snapshot),), "white"))
    sprites.append(SpriteDraw(width - len(CONTROLS_TEXT), HUD_ROW, (CONTROLS_TEXT,), "white"))
    sprites.append(SpriteDraw(width // 2 - len(hint) // 2, HINT_ROW, (hint,), "cyan"))
    return sprites


def rasterize(sprites: List[SpriteDraw], width: int, height: int) -> List[str]:
    """Draw sprites into a width x height character grid, clipping at the edges."""
    grid = [[" "] * width for _ in range(height)]
    for sprite in sprites:
        for col, row, ch in sprite.cells():
            if 0 <= col < width and 0 <= row < height:
                grid[row][col] = ch
    return ["".join(row) for row in grid]


def render_text(
    snapshot: GameSnapshot,
    config: Optional[GameConfig] = None,
    catalog: Optional[ObjectCatalog] = None,
    height: Optional[int] = None
) -> str:
    """Render a snapshot as a multi-line string (no colours)."""
    if height is None:
        tallest = max([snapshot.player_height] + [o.height for o in snapshot.objects])
        height = snapshot.player_y + tallest + 1
    sprites = frame_sprites(snapshot, config, catalog)
    return "\n".join(rasterize(sprites, snapshot.screen_width, height))
