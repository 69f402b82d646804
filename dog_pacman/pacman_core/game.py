"""
Core Game
=========

Main game orchestrator combining spawning, movement, collisions, scoring and
the mouth timer.

One update = one tick, always in this order:

1. advance the mouth timer (auto-close)
2. move every live object, resolve collisions and cull, using the difficulty
   of the score at the start of the tick
3. attempt a spawn
4. increment the tick counter
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any, Tuple

from dog_pacman.pacman_core.config_loader import GameConfig, get_config
from dog_pacman.pacman_core.object_catalog import ObjectCatalog, GameObject
from dog_pacman.pacman_core.collision import check_collision
from dog_pacman.pacman_core.difficulty import DifficultyModel, LevelConfig
from dog_pacman.pacman_core.mouth import MouthState
from dog_pacman.pacman_core.rng import ObjectSpawner
from dog_pacman.pacman_core.scoring import ScoreTracker, CollisionEvent, CollisionOutcome
from dog_pacman.pacman_core.state_snapshot import SnapshotBuilder, GameSnapshot


@dataclass
class TickResult:
    """Result of a single engine update."""
    tick: int                                   # Tick index that was processed
    level: LevelConfig                          # Difficulty used for movement
    collisions: List[CollisionEvent] = field(default_factory=list)
    culled: int = 0                             # Objects that left the screen
    spawned: Optional[GameObject] = None
    mouth_closed: bool = False                  # Mouth auto-closed this tick
    delta_score: int = 0
    delta_lives: int = 0
    game_over: bool = False


class CoreGame:
    """
    Main game simulation class.

    Orchestrates:
    - Mouth timer
    - Object movement, collision and culling
    - Object spawner (RNG)
    - Scoring and lives
    - Difficulty curve
    - State snapshots

    The game owns all mutable state. Callers mutate it only through
    update() and open_mouth(), from a single thread.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize game.

        Args:
            config: Game configuration. Uses default if None.
            seed: Random seed for reproducibility.
            rng: Explicit random source for the spawner (overrides seed).
        """
        if config is None:
            config = get_config()

        self._config = config
        self._seed = seed

        # Initialize subsystems
        self._catalog = ObjectCatalog(config)
        self._difficulty = DifficultyModel(config)
        self._scorer = ScoreTracker(config)
        self._spawner = ObjectSpawner(config, seed=seed, rng=rng, catalog=self._catalog)
        self._mouth = MouthState(config.player.mouth_open_duration)
        self._snapshot_builder = SnapshotBuilder(config)

        # Player rectangle never moves
        self._player_x = config.player.x
        self._player_y = config.player.y
        self._player_width = config.player.width
        self._player_height = config.player.height

        # Game state
        self._objects: List[GameObject] = []
        self._tick: int = 0

    @property
    def config(self) -> GameConfig:
        """Game configuration."""
        return self._config

    @property
    def catalog(self) -> ObjectCatalog:
        """Object catalog."""
        return self._catalog

    @property
    def mouth(self) -> MouthState:
        return self._mouth

    @property
    def score(self) -> int:
        """Current score."""
        return self._scorer.score

    @property
    def lives(self) -> int:
        """Lives remaining."""
        return self._scorer.lives

    @property
    def tick(self) -> int:
        """Number of updates processed."""
        return self._tick

    @property
    def objects(self) -> Tuple[GameObject, ...]:
        """Live objects in spawn order."""
        return tuple(self._objects)

    @property
    def is_over(self) -> bool:
        """True once lives reach zero."""
        return self._scorer.is_over

    @property
    def level(self) -> LevelConfig:
        """Difficulty for the current score."""
        return self._difficulty.level_for(self._scorer.score)

    @property
    def scorer(self) -> ScoreTracker:
        return self._scorer

    def reset(self, seed: Optional[int] = None) -> GameSnapshot:
        """
        Reset game to initial state.

        Args:
            seed: New random seed. Uses previous if None.

        Returns:
            Initial game snapshot.
        """
        if seed is not None:
            self._seed = seed

        self._scorer.reset()
        self._spawner.reset(self._seed)
        self._mouth.reset()
        self._objects = []
        self._tick = 0

        return self.snapshot()

    def open_mouth(self) -> bool:
        """Open the mouth if it is closed. Returns True if it opened."""
        return self._mouth.open()

    def place_object(self, kind_id: int, x: int) -> GameObject:
        """
        Add an object at a given column, bypassing the spawner.

        Used by tools and tests to set up exact scenarios.
        """
        obj = GameObject(kind=self._catalog[kind_id], x=x)
        self._objects.append(obj)
        return obj

    def update(self) -> TickResult:
        """
        Advance the game by one tick.

        Returns:
            TickResult describing what happened. Once the game is over this
            is a no-op and the tick counter does not advance.
        """
        level = self._difficulty.level_for(self._scorer.score)
        if self.is_over:
            return TickResult(tick=self._tick, level=level, game_over=True)

        result = TickResult(tick=self._tick, level=level)

        # 1) Mouth timer
        result.mouth_closed = self._mouth.tick()

        # 2) Move, collide, cull (start-of-tick difficulty)
        self._update_objects(level, result)

        # 3) Spawn, with the level after this tick's scoring
        spawn_level = self._difficulty.level_for(self._scorer.score)
        spawned = self._spawner.maybe_spawn(self._tick, spawn_level.spawn_rate)
        if spawned is not None:
            self._objects.append(spawned)
            result.spawned = spawned

        # 4) Tick counter
        self._tick += 1

        result.game_over = self.is_over
        return result

    def _update_objects(self, level: LevelConfig, result: TickResult) -> None:
        """Move every object once and rebuild the live list from survivors."""
        retained: List[GameObject] = []
        mouth_open = self._mouth.is_open

        for obj in self._objects:
            obj.x -= level.object_speed

            if self._collides_with_player(obj):
                event = self._scorer.apply_collision(
                    obj.kind_id, obj.x, mouth_open, obj.is_edible
                )
                result.collisions.append(event)
                result.delta_score += event.delta_score
                result.delta_lives += event.delta_lives
            elif obj.is_off_screen:
                result.culled += 1
            else:
                retained.append(obj)

        self._objects = retained

    def _collides_with_player(self, obj: GameObject) -> bool:
        # Objects travel on the player's row
        return check_collision(
            self._player_x, self._player_y, self._player_width, self._player_height,
            obj.x, self._player_y, obj.width, obj.height
        )

    def snapshot(self) -> GameSnapshot:
        """Build current game state snapshot."""
        return self._snapshot_builder.build(
            mouth=self._mouth,
            objects=tuple(self._objects),
            lives=self._scorer.lives,
            score=self._scorer.score,
            tick=self._tick,
            level=self.level
        )

    def get_info(self) -> Dict[str, Any]:
        """Get additional info dict for Gymnasium."""
        counts = self._scorer.counts
        return {
            "score": self._scorer.score,
            "lives": self._scorer.lives,
            "tick": self._tick,
            "objects_count": len(self._objects),
            "spawned": self._spawner.spawned,
            "eaten": counts[CollisionOutcome.EATEN],
            "wrong_bites": counts[CollisionOutcome.WRONG_BITE],
            "missed": counts[CollisionOutcome.MISSED],
            "dodged": counts[CollisionOutcome.DODGED],
        }
