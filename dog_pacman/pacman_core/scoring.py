"""
Scoring System
==============

Resolves a collision between the dog and an object into score and lives.

| mouth open | edible | outcome    |
|------------|--------|------------|
| yes        | yes    | score += 1 |
| yes        | no     | lives -= 1 |
| no         | yes    | lives -= 1 |
| no         | no     | no effect  |
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from dog_pacman.pacman_core.config_loader import GameConfig, get_config


class CollisionOutcome(Enum):
    EATEN = "eaten"              # Mouth open, edible
    WRONG_BITE = "wrong_bite"    # Mouth open, not edible
    MISSED = "missed"            # Mouth closed, edible
    DODGED = "dodged"            # Mouth closed, not edible


def classify_collision(mouth_open: bool, is_edible: bool) -> CollisionOutcome:
    """Map (mouth open, edible) to the collision outcome."""
    if mouth_open:
        return CollisionOutcome.EATEN if is_edible else CollisionOutcome.WRONG_BITE
    return CollisionOutcome.MISSED if is_edible else CollisionOutcome.DODGED


@dataclass
class CollisionEvent:
    """Record of one resolved collision."""
    kind_id: int
    x: int
    outcome: CollisionOutcome
    delta_score: int
    delta_lives: int

    def __repr__(self) -> str:
        return f"CollisionEvent({self.outcome.value}, kind={self.kind_id}, x={self.x})"


class ScoreTracker:
    """
    Tracks score and lives and applies the collision table.

    Lives never drop below zero; the game is over exactly when they reach it.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize score tracker.

        Args:
            config: Game configuration. Uses default if None.
        """
        if config is None:
            config = get_config()

        self._config = config
        self._initial_lives = config.player.initial_lives
        self._score: int = 0
        self._lives: int = self._initial_lives
        self._counts: Dict[CollisionOutcome, int] = {o: 0 for o in CollisionOutcome}

    @property
    def score(self) -> int:
        """Current total score."""
        return self._score

    @property
    def lives(self) -> int:
        """Lives remaining."""
        return self._lives

    @property
    def is_over(self) -> bool:
        return self._lives == 0

    @property
    def counts(self) -> Dict[CollisionOutcome, int]:
        """Number of collisions per outcome since reset."""
        return dict(self._counts)

    def apply_collision(self, kind_id: int, x: int, mouth_open: bool, is_edible: bool) -> CollisionEvent:
        """
        Apply the collision table and return the event.

        Args:
            kind_id: Kind of the colliding object.
            x: Object position at the time of collision.
            mouth_open: Mouth state on this tick.
            is_edible: Whether the object's kind is edible.

        Returns:
            CollisionEvent describing the change.
        """
        outcome = classify_collision(mouth_open, is_edible)
        delta_score = 0
        delta_lives = 0

        if outcome is CollisionOutcome.EATEN:
            self._score += 1
            delta_score = 1
        elif outcome in (CollisionOutcome.WRONG_BITE, CollisionOutcome.MISSED):
            if self._lives > 0:
                self._lives -= 1
                delta_lives = -1

        self._counts[outcome] += 1
        return CollisionEvent(
            kind_id=kind_id,
            x=x,
            outcome=outcome,
            delta_score=delta_score,
            delta_lives=delta_lives
        )

    def reset(self) -> None:
        """Reset score, lives and counters."""
        self._score = 0
        self._lives = self._initial_lives
        self._counts = {o: 0 for o in CollisionOutcome}

    def add_bonus(self, points: int) -> None:
        """Add bonus points (for special events and test setup)."""
        self._score = max(0, self._score + points)
