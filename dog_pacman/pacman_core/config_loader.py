"""
Configuration Loader
====================

Loads and validates game_config.yaml, providing typed access to all parameters.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import List, Tuple, Optional

import yaml


@dataclass(frozen=True)
class PlayerConfig:
    """The dog: fixed position, lives and mouth timing."""
    x: int                           # Column of the sprite's left edge
    y: int                           # Row shared with every object
    initial_lives: int
    mouth_open_duration: int         # Ticks the mouth stays open
    color: str
    sprite_closed: Tuple[str, ...]
    sprite_open: Tuple[str, ...]

    @property
    def width(self) -> int:
        """Collision width (closed sprite's first line)."""
        return len(self.sprite_closed[0])

    @property
    def height(self) -> int:
        """Collision height (closed sprite's line count)."""
        return len(self.sprite_closed)


@dataclass(frozen=True)
class TimingConfig:
    """Tick cadence and play field width."""
    frame_period: float              # Seconds between ticks
    screen_width: int                # Spawn column, right edge of the field


@dataclass(frozen=True)
class DifficultyConfig:
    """Speed and spawn-rate bounds for the difficulty curve."""
    base_object_speed: int
    max_speed: int
    base_spawn_rate: int
    min_spawn_rate: int
    points_per_level: int = 10


@dataclass(frozen=True)
class ObjectKindConfig:
    """Configuration for a single object kind."""
    id: int
    name: str
    edible: bool
    color: str
    sprite: Tuple[str, ...]


@dataclass(frozen=True)
class CapsConfig:
    """Limits for headless runs."""
    max_ticks: int
    max_objects: int


@dataclass(frozen=True)
class GameConfig:
    """
    Complete game configuration loaded from YAML.

    All values are immutable to prevent accidental modification during runtime.
    """
    player: PlayerConfig
    timing: TimingConfig
    difficulty: DifficultyConfig
    objects: Tuple[ObjectKindConfig, ...]
    caps: CapsConfig

    @property
    def num_object_kinds(self) -> int:
        """Total number of object kinds."""
        return len(self.objects)

    @property
    def screen_width(self) -> int:
        return self.timing.screen_width

    @property
    def frame_period(self) -> float:
        return self.timing.frame_period

    def get_object(self, kind_id: int) -> ObjectKindConfig:
        """Get object kind config by ID."""
        if 0 <= kind_id < len(self.objects):
            return self.objects[kind_id]
        raise ValueError(f"Invalid object kind ID: {kind_id}")

    def with_screen_width(self, width: int) -> GameConfig:
        """Copy of this config with the play field resized (e.g. to the terminal)."""
        if width <= 0:
            raise ValueError(f"screen_width must be positive, got {width}")
        return replace(self, timing=replace(self.timing, screen_width=int(width)))

    def with_overrides(
        self,
        initial_lives: Optional[int] = None,
        frame_period: Optional[float] = None
    ) -> GameConfig:
        """Copy of this config with command-line overrides applied and validated."""
        player = self.player
        timing = self.timing
        if initial_lives is not None:
            player = replace(player, initial_lives=int(initial_lives))
        if frame_period is not None:
            timing = replace(timing, frame_period=float(frame_period))
        config = replace(self, player=player, timing=timing)
        _validate_config(config)
        return config


def _parse_sprite(sprite_data: List, owner: str) -> Tuple[str, ...]:
    """Parse a sprite (list of text lines) from YAML."""
    if not sprite_data:
        raise ValueError(f"Sprite for {owner} must have at least one line")
    lines = tuple(str(line) for line in sprite_data)
    if not lines[0]:
        raise ValueError(f"First sprite line for {owner} must not be empty")
    return lines


def _parse_object(object_data: dict) -> ObjectKindConfig:
    """Parse a single object kind from YAML."""
    name = str(object_data["name"])
    return ObjectKindConfig(
        id=int(object_data["id"]),
        name=name,
        edible=bool(object_data.get("edible", False)),
        color=str(object_data.get("color", "white")),
        sprite=_parse_sprite(object_data["sprite"], name)
    )


def _validate_config(config: GameConfig) -> None:
    """Validate configuration consistency."""
    if not config.objects:
        raise ValueError("At least one object kind must be configured")

    # Validate object IDs are sequential
    for i, kind in enumerate(config.objects):
        if kind.id != i:
            raise ValueError(f"Object kind ID mismatch: expected {i}, got {kind.id}")

    positive = {
        "player.initial_lives": config.player.initial_lives,
        "player.mouth_open_duration": config.player.mouth_open_duration,
        "timing.frame_period": config.timing.frame_period,
        "timing.screen_width": config.timing.screen_width,
        "difficulty.base_object_speed": config.difficulty.base_object_speed,
        "difficulty.max_speed": config.difficulty.max_speed,
        "difficulty.base_spawn_rate": config.difficulty.base_spawn_rate,
        "difficulty.min_spawn_rate": config.difficulty.min_spawn_rate,
        "difficulty.points_per_level": config.difficulty.points_per_level,
        "caps.max_ticks": config.caps.max_ticks,
        "caps.max_objects": config.caps.max_objects,
    }
    for field_name, value in positive.items():
        if value <= 0:
            raise ValueError(f"{field_name} must be positive, got {value}")

    if config.player.x < 0 or config.player.y < 0:
        raise ValueError(
            f"Player position must be non-negative, got ({config.player.x}, {config.player.y})"
        )

    difficulty = config.difficulty
    if difficulty.max_speed < difficulty.base_object_speed:
        raise ValueError(
            f"max_speed ({difficulty.max_speed}) must be >= "
            f"base_object_speed ({difficulty.base_object_speed})"
        )
    if difficulty.min_spawn_rate > difficulty.base_spawn_rate:
        raise ValueError(
            f"min_spawn_rate ({difficulty.min_spawn_rate}) must be <= "
            f"base_spawn_rate ({difficulty.base_spawn_rate})"
        )

    # Both dog sprites share one collision footprint
    closed, opened = config.player.sprite_closed, config.player.sprite_open
    if len(closed) != len(opened) or len(closed[0]) != len(opened[0]):
        raise ValueError("player.sprite_open must have the same footprint as player.sprite_closed")


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """
    Load and validate game configuration from YAML.

    Args:
        config_path: Path to game_config.yaml. If None, uses default location.

    Returns:
        Validated GameConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config validation fails.
    """
    if config_path is None:
        config_path = os.path.join(
            os.path.dirname(os.path.dirname(__file__)),
            "game_config.yaml"
        )

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        raw = yaml.safe_load(f)

    player_data = raw["player"]
    player = PlayerConfig(
        x=int(player_data.get("x", 10)),
        y=int(player_data["y"]),
        initial_lives=int(player_data["initial_lives"]),
        mouth_open_duration=int(player_data["mouth_open_duration"]),
        color=str(player_data.get("color", "yellow")),
        sprite_closed=_parse_sprite(player_data["sprite_closed"], "player (closed)"),
        sprite_open=_parse_sprite(player_data["sprite_open"], "player (open)")
    )

    timing_data = raw["timing"]
    timing = TimingConfig(
        frame_period=float(timing_data["frame_period"]),
        screen_width=int(timing_data.get("screen_width", 80))
    )

    difficulty_data = raw["difficulty"]
    difficulty = DifficultyConfig(
        base_object_speed=int(difficulty_data["base_object_speed"]),
        max_speed=int(difficulty_data["max_speed"]),
        base_spawn_rate=int(difficulty_data["base_spawn_rate"]),
        min_spawn_rate=int(difficulty_data["min_spawn_rate"]),
        points_per_level=int(difficulty_data.get("points_per_level", 10))
    )

    objects = tuple(_parse_object(o) for o in raw["objects"])

    caps_data = raw.get("caps", {})
    caps = CapsConfig(
        max_ticks=int(caps_data.get("max_ticks", 20000)),
        max_objects=int(caps_data.get("max_objects", 32))
    )

    config = GameConfig(
        player=player,
        timing=timing,
        difficulty=difficulty,
        objects=objects,
        caps=caps
    )

    _validate_config(config)
    return config


# Module-level singleton for convenience
_cached_config: Optional[GameConfig] = None


def get_config() -> GameConfig:
    """Get the cached game configuration, loading if necessary."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config
