"""
Gymnasium Environment Wrapper
=============================

Headless, tick-stepped interface to the game. One step applies the action
and then advances the engine by exactly one tick, so a seed plus an action
sequence replays the same game.
Reward is always 0.0 - agents compute their own from info.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple, Union
import numpy as np

import gymnasium as gym
from gymnasium import spaces

from dog_pacman.pacman_core.config_loader import GameConfig, load_config
from dog_pacman.pacman_core.game import CoreGame
from dog_pacman.pacman_core.input_controller import InputController, InputEvent
from dog_pacman.pacman_core.render_text import render_text
from dog_pacman.pacman_core.state_snapshot import GameSnapshot

ACTION_NOOP = 0
ACTION_OPEN_MOUTH = 1


class DogPacmanEnv(gym.Env):
    """
    Dog Pacman as a Gymnasium environment.

    Action Space:
        Discrete(2): 0 = do nothing, 1 = open the mouth (ignored if open).

    Observation Space:
        Dict of scalars (mouth, lives, score, tick, difficulty) and padded
        per-object arrays.

    Reward:
        Always 0.0. Agents must compute their own reward from the info dict.

    Info:
        Contains score, lives, delta_score, delta_lives, tick and
        per-outcome collision counts.
    """

    metadata = {
        "render_modes": ["ansi"],
        "render_fps": 30,
    }

    def __init__(
        self,
        config_path: Optional[str] = None,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
        debug: bool = False,
    ):
        """
        Initialize environment.

        Args:
            config_path: Path to game_config.yaml. Uses default if None.
            config: Already-loaded config (takes precedence over config_path).
            render_mode: "ansi" for text frames, None for headless.
            debug: If True, enables verbose debug output for agent development.
        """
        super().__init__()

        self._config = config if config is not None else load_config(config_path)

        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unsupported render_mode: {render_mode}")
        self.render_mode = render_mode
        self._debug = debug

        self._game = CoreGame(config=self._config)
        self._controller = InputController(self._game)

        self.action_space = spaces.Discrete(2)
        self.observation_space = self._build_observation_space()

        if self._debug:
            print(f"[DEBUG] DogPacmanEnv initialized")
            print(f"[DEBUG]   Screen width: {self._config.screen_width}")
            print(f"[DEBUG]   Object kinds: {self._config.num_object_kinds}")
            print(f"[DEBUG]   Max objects: {self._config.caps.max_objects}")

    def _build_observation_space(self) -> spaces.Dict:
        """Build the observation space definition."""
        max_obj = self._config.caps.max_objects
        difficulty = self._config.difficulty
        width = self._config.screen_width
        int_max = np.iinfo(np.int64).max

        return spaces.Dict({
            "mouth_open": spaces.Box(low=0, high=1, shape=(), dtype=np.int8),
            "mouth_ticks_remaining": spaces.Box(
                low=0, high=self._config.player.mouth_open_duration, shape=(), dtype=np.int32
            ),
            "lives": spaces.Box(low=0, high=self._config.player.initial_lives, shape=(), dtype=np.int32),
            "score": spaces.Box(low=0, high=int_max, shape=(), dtype=np.int64),
            "tick": spaces.Box(low=0, high=int_max, shape=(), dtype=np.int64),
            "object_speed": spaces.Box(
                low=difficulty.base_object_speed, high=difficulty.max_speed, shape=(), dtype=np.int32
            ),
            "spawn_rate": spaces.Box(
                low=difficulty.min_spawn_rate, high=difficulty.base_spawn_rate, shape=(), dtype=np.int32
            ),
            "objects_count": spaces.Box(low=0, high=max_obj, shape=(), dtype=np.int32),
            "obj_kind_id": spaces.Box(
                low=-1, high=self._config.num_object_kinds - 1, shape=(max_obj,), dtype=np.int16
            ),
            "obj_x": spaces.Box(low=-np.inf, high=width, shape=(max_obj,), dtype=np.float32),
            "obj_width": spaces.Box(low=0, high=np.inf, shape=(max_obj,), dtype=np.float32),
            "obj_edible": spaces.Box(low=0, high=1, shape=(max_obj,), dtype=np.int8),
            "obj_mask": spaces.Box(low=0, high=1, shape=(max_obj,), dtype=np.int8),
        })

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None
    ) -> Tuple[Dict[str, np.ndarray], Dict[str, Any]]:
        """
        Reset the environment.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            (observation, info) tuple.
        """
        super().reset(seed=seed)

        snapshot = self._game.reset(seed=seed)

        obs = self._snapshot_to_obs(snapshot)
        info = self._game.get_info()
        info["delta_score"] = 0
        info["delta_lives"] = 0

        return obs, info

    def step(
        self,
        action: Union[int, np.ndarray]
    ) -> Tuple[Dict[str, np.ndarray], float, bool, bool, Dict[str, Any]]:
        """
        Execute one tick.

        Args:
            action: 0 (noop) or 1 (open mouth).

        Returns:
            (observation, reward, terminated, truncated, info) tuple.
            Reward is always 0.0.
        """
        if isinstance(action, np.ndarray):
            action = int(action.item() if action.ndim == 0 else action[0])
        action = int(action)
        if action not in (ACTION_NOOP, ACTION_OPEN_MOUTH):
            raise ValueError(f"Invalid action {action}, expected 0 or 1")

        if action == ACTION_OPEN_MOUTH:
            self._controller.handle_input(InputEvent.open_mouth())

        result = self._game.update()
        snapshot = self._game.snapshot()

        obs = self._snapshot_to_obs(snapshot)

        # Reward is always 0.0 - agents compute their own
        reward = 0.0

        terminated = self._game.is_over
        truncated = not terminated and self._game.tick >= self._config.caps.max_ticks

        info = self._game.get_info()
        info["delta_score"] = result.delta_score
        info["delta_lives"] = result.delta_lives
        info["collisions"] = len(result.collisions)

        if self._debug:
            print(f"[DEBUG] Step: action={action}, tick={result.tick}, "
                  f"delta_score={result.delta_score}, delta_lives={result.delta_lives}, "
                  f"objects={obs['objects_count']}")
            if terminated:
                print(f"[DEBUG] TERMINATED: out of lives, score={self._game.score}")

        return obs, reward, terminated, truncated, info

    def _snapshot_to_obs(self, snapshot: GameSnapshot) -> Dict[str, np.ndarray]:
        """Convert snapshot to observation dict."""
        return snapshot.to_obs_dict(self._config.caps.max_objects)

    def render(self) -> Optional[str]:
        """
        Render the current game state.

        Returns:
            Text frame if render_mode is "ansi", None otherwise.
        """
        if self.render_mode == "ansi":
            return render_text(self._game.snapshot(), self._config, self._game.catalog)
        return None

    def close(self) -> None:
        """Nothing to release; kept for the Gymnasium API."""

    @property
    def game(self) -> CoreGame:
        """Access to underlying game (for debugging/tools)."""
        return self._game

    @property
    def config(self) -> GameConfig:
        """Game configuration."""
        return self._config
