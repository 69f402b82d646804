"""
Difficulty Model
================

Maps the current score to an effective object speed and spawn rate.
Every `points_per_level` points the objects move one column faster and spawn
attempts come one tick sooner, each clamped to its configured bound.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from dog_pacman.pacman_core.config_loader import GameConfig, get_config


@dataclass(frozen=True)
class LevelConfig:
    """Difficulty settings in effect for one tick."""
    level: int
    object_speed: int   # Columns moved per tick
    spawn_rate: int     # Spawn attempt every N ticks


class DifficultyModel:
    """Pure score -> LevelConfig mapping."""

    def __init__(self, config: Optional[GameConfig] = None):
        if config is None:
            config = get_config()

        self._config = config
        self._base_speed = config.difficulty.base_object_speed
        self._max_speed = config.difficulty.max_speed
        self._base_spawn_rate = config.difficulty.base_spawn_rate
        self._min_spawn_rate = config.difficulty.min_spawn_rate
        self._points_per_level = config.difficulty.points_per_level

    def level_index(self, score: int) -> int:
        """Unclamped level number for a score."""
        return max(0, score) // self._points_per_level

    def level_for(self, score: int) -> LevelConfig:
        """
        Get difficulty settings for a score.

        Args:
            score: Current score (>= 0).

        Returns:
            LevelConfig with speed in [base, max] and spawn rate in [min, base].
        """
        level = self.level_index(score)
        speed = min(self._base_speed + level, self._max_speed)
        spawn_rate = max(self._base_spawn_rate - level, self._min_spawn_rate)
        return LevelConfig(level=level, object_speed=speed, spawn_rate=spawn_rate)


def level_for(score: int, config: Optional[GameConfig] = None) -> LevelConfig:
    """Convenience wrapper around DifficultyModel.level_for."""
    return DifficultyModel(config).level_for(score)
