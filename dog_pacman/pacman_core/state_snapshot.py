"""
State Snapshot
==============

Read-only view of the game handed to renderers once per tick, and packed into
fixed-size numpy arrays for Gymnasium observations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple, TYPE_CHECKING
import numpy as np

from dog_pacman.pacman_core.config_loader import GameConfig, get_config

if TYPE_CHECKING:
    from dog_pacman.pacman_core.difficulty import LevelConfig
    from dog_pacman.pacman_core.mouth import MouthState
    from dog_pacman.pacman_core.object_catalog import GameObject


@dataclass(frozen=True)
class ObjectView:
    """One live object as seen by a renderer."""
    kind_id: int
    x: int
    y: int
    width: int
    height: int
    is_edible: bool


@dataclass(frozen=True)
class GameSnapshot:
    """
    Complete game state at the end of a tick.

    Objects are listed in spawn order.
    """
    # Player
    player_x: int
    player_y: int
    player_width: int
    player_height: int
    mouth_open: bool
    mouth_ticks_remaining: int

    # Progress
    lives: int
    score: int
    tick: int

    # Difficulty in effect for the next tick
    level: int
    object_speed: int
    spawn_rate: int

    screen_width: int
    objects: Tuple[ObjectView, ...]

    @property
    def objects_count(self) -> int:
        return len(self.objects)

    @property
    def is_over(self) -> bool:
        return self.lives == 0

    def to_obs_dict(self, max_objects: int) -> Dict[str, np.ndarray]:
        """
        Convert to Gymnasium observation dictionary.

        Object arrays are padded to max_objects; padding slots have
        obj_kind_id == -1 and obj_mask == 0. Objects beyond max_objects are
        dropped, oldest first kept.
        """
        obj_kind_id = np.full(max_objects, -1, dtype=np.int16)
        obj_x = np.zeros(max_objects, dtype=np.float32)
        obj_width = np.zeros(max_objects, dtype=np.float32)
        obj_edible = np.zeros(max_objects, dtype=np.int8)
        obj_mask = np.zeros(max_objects, dtype=np.int8)

        count = min(len(self.objects), max_objects)
        for i in range(count):
            obj = self.objects[i]
            obj_kind_id[i] = obj.kind_id
            obj_x[i] = obj.x
            obj_width[i] = obj.width
            obj_edible[i] = 1 if obj.is_edible else 0
            obj_mask[i] = 1

        return {
            "mouth_open": np.array(int(self.mouth_open), dtype=np.int8),
            "mouth_ticks_remaining": np.array(self.mouth_ticks_remaining, dtype=np.int32),
            "lives": np.array(self.lives, dtype=np.int32),
            "score": np.array(self.score, dtype=np.int64),
            "tick": np.array(self.tick, dtype=np.int64),
            "object_speed": np.array(self.object_speed, dtype=np.int32),
            "spawn_rate": np.array(self.spawn_rate, dtype=np.int32),
            "objects_count": np.array(count, dtype=np.int32),
            "obj_kind_id": obj_kind_id,
            "obj_x": obj_x,
            "obj_width": obj_width,
            "obj_edible": obj_edible,
            "obj_mask": obj_mask,
        }


class SnapshotBuilder:
    """Builds game state snapshots from live engine state."""

    def __init__(self, config: Optional[GameConfig] = None):
        if config is None:
            config = get_config()

        self._config = config
        self._player_x = config.player.x
        self._player_y = config.player.y
        self._player_width = config.player.width
        self._player_height = config.player.height

    def build(
        self,
        mouth: "MouthState",
        objects: "Tuple[GameObject, ...]",
        lives: int,
        score: int,
        tick: int,
        level: "LevelConfig"
    ) -> GameSnapshot:
        """Build a snapshot from current game state."""
        views = tuple(
            ObjectView(
                kind_id=o.kind_id,
                x=o.x,
                y=self._player_y,
                width=o.width,
                height=o.height,
                is_edible=o.is_edible
            )
            for o in objects
        )

        return GameSnapshot(
            player_x=self._player_x,
            player_y=self._player_y,
            player_width=self._player_width,
            player_height=self._player_height,
            mouth_open=mouth.is_open,
            mouth_ticks_remaining=mouth.ticks_remaining,
            lives=lives,
            score=score,
            tick=tick,
            level=level.level,
            object_speed=level.object_speed,
            spawn_rate=level.spawn_rate,
            screen_width=self._config.screen_width,
            objects=views
        )
