"""
Headless Autoplay
=================

Plays full games through the Gymnasium environment with a simple timing
agent and reports scores and step throughput. Handy for checking a config
change without a terminal.

Usage:
    python -m tools.autoplay [--seeds N] [--config PATH] [--random] [--debug]
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import Dict, List
import numpy as np

from dog_pacman.pacman_core.config_loader import GameConfig, load_config
from dog_pacman.pacman_core.env_gym import DogPacmanEnv, ACTION_NOOP, ACTION_OPEN_MOUTH


class TimingAgent:
    """
    Opens the mouth when the next tick would bring an edible object onto
    the dog and no inedible one is due at the same time.
    """

    def __init__(self, config: GameConfig):
        self._player_left = config.player.x
        self._player_right = config.player.x + config.player.width

    def act(self, obs: Dict[str, np.ndarray]) -> int:
        if int(obs["mouth_open"]):
            return ACTION_NOOP

        speed = int(obs["object_speed"])
        edible_due = False
        for i in np.flatnonzero(obs["obj_mask"]):
            next_x = float(obs["obj_x"][i]) - speed
            width = float(obs["obj_width"][i])
            if next_x < self._player_right and next_x + width > self._player_left:
                if not obs["obj_edible"][i]:
                    return ACTION_NOOP
                edible_due = True
        return ACTION_OPEN_MOUTH if edible_due else ACTION_NOOP


def play_episode(env: DogPacmanEnv, seed: int, agent, rng: np.random.Generator) -> dict:
    """Run one episode and return its summary."""
    obs, info = env.reset(seed=seed)
    terminated = truncated = False
    steps = 0
    while not (terminated or truncated):
        action = agent.act(obs) if agent is not None else int(rng.integers(0, 2))
        obs, _, terminated, truncated, info = env.step(action)
        steps += 1
    return {
        "seed": seed,
        "score": info["score"],
        "ticks": steps,
        "terminated": terminated,
        "eaten": info["eaten"],
        "missed": info["missed"],
        "wrong_bites": info["wrong_bites"],
    }


def main():
    parser = argparse.ArgumentParser(description="Play Dog Pacman headless")
    parser.add_argument("--seeds", type=int, default=5, help="Number of seeds (0..N-1)")
    parser.add_argument("--config", type=str, default=None, help="Path to game_config.yaml")
    parser.add_argument("--random", action="store_true", help="Use random actions instead of the timing agent")
    parser.add_argument("--debug", action="store_true", help="Verbose per-step output")

    args = parser.parse_args()
    if args.seeds <= 0:
        print("Error: --seeds must be positive")
        return 1

    config = load_config(args.config)
    env = DogPacmanEnv(config=config, debug=args.debug)
    agent = None if args.random else TimingAgent(config)
    rng = np.random.default_rng(0)

    results: List[dict] = []
    start = time.perf_counter()
    for seed in range(args.seeds):
        result = play_episode(env, seed, agent, rng)
        results.append(result)
        end = "game over" if result["terminated"] else "tick cap"
        print(f"  Seed {seed}: score={result['score']}, ticks={result['ticks']} ({end}), "
              f"eaten={result['eaten']}, missed={result['missed']}, "
              f"wrong_bites={result['wrong_bites']}")
    elapsed = time.perf_counter() - start
    env.close()

    scores = np.array([r["score"] for r in results], dtype=np.float64)
    total_ticks = sum(r["ticks"] for r in results)
    print()
    print("=" * 50)
    print(f"Seeds played:    {len(results)}")
    print(f"Mean score:      {scores.mean():.2f}")
    print(f"Max score:       {int(scores.max())}")
    print(f"Ticks/second:    {total_ticks / elapsed:.0f}")
    print("=" * 50)
    return 0


if __name__ == "__main__":
    sys.exit(main())
