"""
Object Catalog
==============

Static table of scrolling object kinds, keyed by kind id.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from dog_pacman.pacman_core.config_loader import (
    GameConfig,
    ObjectKindConfig,
    get_config
)


@dataclass
class ObjectKind:
    """
    Runtime representation of an object kind.

    Wraps ObjectKindConfig with the footprint derived from its sprite.
    """
    config: ObjectKindConfig

    @property
    def id(self) -> int:
        return self.config.id

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def is_edible(self) -> bool:
        return self.config.edible

    @property
    def color(self) -> str:
        return self.config.color

    @property
    def sprite(self) -> Tuple[str, ...]:
        return self.config.sprite

    @property
    def width(self) -> int:
        """Footprint width: length of the sprite's first line."""
        return len(self.config.sprite[0])

    @property
    def height(self) -> int:
        """Footprint height: number of sprite lines."""
        return len(self.config.sprite)

    def __repr__(self) -> str:
        return f"ObjectKind({self.id}: {self.name})"


@dataclass
class GameObject:
    """A live object scrolling along the player's row."""
    kind: ObjectKind
    x: int

    @property
    def kind_id(self) -> int:
        return self.kind.id

    @property
    def width(self) -> int:
        return self.kind.width

    @property
    def height(self) -> int:
        return self.kind.height

    @property
    def is_edible(self) -> bool:
        return self.kind.is_edible

    @property
    def right_edge(self) -> int:
        """First column past the object's right side."""
        return self.x + self.kind.width

    @property
    def is_off_screen(self) -> bool:
        """True once the object has scrolled fully past the left edge."""
        return self.right_edge <= 0


class ObjectCatalog:
    """
    Collection of all object kinds.

    Provides indexed access by kind id and the list of edible kinds.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize catalog from game config.

        Args:
            config: GameConfig instance. If None, loads from default location.
        """
        if config is None:
            config = get_config()

        self._config = config
        self._kinds: Tuple[ObjectKind, ...] = tuple(
            ObjectKind(kind_config) for kind_config in config.objects
        )

    def __len__(self) -> int:
        """Total number of object kinds."""
        return len(self._kinds)

    def __getitem__(self, kind_id: int) -> ObjectKind:
        """Get object kind by ID."""
        if 0 <= kind_id < len(self._kinds):
            return self._kinds[kind_id]
        raise IndexError(f"Object kind ID {kind_id} out of range [0, {len(self._kinds)})")

    def __iter__(self):
        """Iterate over all object kinds."""
        return iter(self._kinds)

    @property
    def edible_kinds(self) -> Tuple[ObjectKind, ...]:
        return tuple(k for k in self._kinds if k.is_edible)
