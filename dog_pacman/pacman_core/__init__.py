"""
Pacman Core - The simulation engine and its collaborators.

Main exports:
- CoreGame: Per-tick game simulation
- GameDriver: Fixed-rate tick loop running alongside input polling
- InputController / InputEvent: Key events to mouth transitions
- DogPacmanEnv: Gymnasium environment for headless play
- GameConfig: Configuration loaded from game_config.yaml
"""

from dog_pacman.pacman_core.config_loader import GameConfig, load_config
from dog_pacman.pacman_core.object_catalog import ObjectKind, ObjectCatalog, GameObject
from dog_pacman.pacman_core.difficulty import DifficultyModel, LevelConfig
from dog_pacman.pacman_core.game import CoreGame, TickResult
from dog_pacman.pacman_core.input_controller import InputController, InputEvent, InputKind
from dog_pacman.pacman_core.driver import GameDriver, InputSource
from dog_pacman.pacman_core.state_snapshot import GameSnapshot
from dog_pacman.pacman_core.env_gym import DogPacmanEnv

__all__ = [
    "GameConfig",
    "load_config",
    "ObjectKind",
    "ObjectCatalog",
    "GameObject",
    "DifficultyModel",
    "LevelConfig",
    "CoreGame",
    "TickResult",
    "InputController",
    "InputEvent",
    "InputKind",
    "GameDriver",
    "InputSource",
    "GameSnapshot",
    "DogPacmanEnv",
]
