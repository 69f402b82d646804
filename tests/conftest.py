"""
Shared fixtures: default config and scripted random sources.
"""

from typing import Iterable, List

import pytest

from dog_pacman.pacman_core.config_loader import load_config
from dog_pacman.pacman_core.object_catalog import ObjectCatalog
from dog_pacman.pacman_core.game import CoreGame


class ScriptedRng:
    """
    Stand-in random source returning queued values from randrange.

    Once the script runs out it returns 0, which the spawner reads as
    "no spawn".
    """

    def __init__(self, values: Iterable[int] = ()):
        self._values: List[int] = list(values)
        self.calls: List[int] = []

    def randrange(self, n: int) -> int:
        self.calls.append(n)
        if self._values:
            value = self._values.pop(0)
            assert 0 <= value < n, f"scripted value {value} out of range for randrange({n})"
            return value
        return 0


@pytest.fixture
def config():
    return load_config()


@pytest.fixture
def catalog(config):
    return ObjectCatalog(config)


@pytest.fixture
def quiet_game(config):
    """A game whose spawner never spawns, for hand-placed scenarios."""
    return CoreGame(config=config, rng=ScriptedRng())
