"""
RNG - Object Spawner
====================

Decides when a new object enters at the right edge and which kind it is.

A spawn is attempted only on ticks where ``tick % spawn_rate == 0``. An
attempt draws one of three outcomes; outcome 0 means "no spawn", so an attempt
succeeds with probability 2/3. The kind is then drawn uniformly over all kinds.
"""

from __future__ import annotations

import random
from typing import Optional

from dog_pacman.pacman_core.config_loader import GameConfig, get_config
from dog_pacman.pacman_core.object_catalog import ObjectCatalog, GameObject

# Outcomes per spawn attempt; NO_SPAWN_OUTCOME is the reserved miss.
SPAWN_OUTCOMES = 3
NO_SPAWN_OUTCOME = 0


class ObjectSpawner:
    """
    Owns the random source used for spawning.

    Any object with a ``randrange(n)`` method can be injected as the source,
    which lets tests script the exact spawn sequence.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        catalog: Optional[ObjectCatalog] = None
    ):
        """
        Initialize spawner.

        Args:
            config: Game configuration. Uses default if None.
            seed: Random seed for reproducibility. Random if None.
            rng: Explicit random source. Overrides seed when given.
            catalog: Object catalog. Built from config if None.
        """
        if config is None:
            config = get_config()

        self._config = config
        self._catalog = catalog if catalog is not None else ObjectCatalog(config)
        self._rng = rng if rng is not None else random.Random(seed)
        self._spawned: int = 0

    @property
    def spawned(self) -> int:
        """Number of objects spawned since the last reset."""
        return self._spawned

    @staticmethod
    def is_attempt_tick(tick: int, spawn_rate: int) -> bool:
        """True on ticks where a spawn is attempted (tick 0 included)."""
        return tick % spawn_rate == 0

    def maybe_spawn(self, tick: int, spawn_rate: int) -> Optional[GameObject]:
        """
        Attempt a spawn for this tick.

        Args:
            tick: Current tick counter (before increment).
            spawn_rate: Effective spawn interval in ticks.

        Returns:
            The new object placed at the screen width, or None.
        """
        if not self.is_attempt_tick(tick, spawn_rate):
            return None
        if self._rng.randrange(SPAWN_OUTCOMES) == NO_SPAWN_OUTCOME:
            return None

        kind_id = self._rng.randrange(len(self._catalog))
        self._spawned += 1
        return GameObject(kind=self._catalog[kind_id], x=self._config.screen_width)

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Reset the spawner with optional new seed.

        Args:
            seed: New random seed. Keeps the current source if None.
        """
        if seed is not None:
            self._rng = random.Random(seed)
        self._spawned = 0
