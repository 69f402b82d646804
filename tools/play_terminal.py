"""
Human Play Mode
===============

Play Dog Pacman in the terminal.

Controls:
    - Space: Open the dog's mouth
    - ESC/Q: Quit

Usage:
    python -m tools.play_terminal [--seed SEED] [--config PATH] [--lives N] [--frame-ms MS]
"""

from __future__ import annotations

import argparse
import curses
import sys
from typing import Optional

from dog_pacman.pacman_core.config_loader import load_config, GameConfig
from dog_pacman.pacman_core.game import CoreGame
from dog_pacman.pacman_core.driver import GameDriver
from dog_pacman.pacman_core.object_catalog import ObjectCatalog
from dog_pacman.pacman_core.render_terminal import ColorTable, TerminalRenderer
from dog_pacman.pacman_core.screens import show_instructions, draw_game_over
from dog_pacman.pacman_core.terminal_input import TerminalKeySource


class HumanPlayer:
    """
    Terminal session for one game.

    Sets up curses, shows the instructions, runs the driver, and shows the
    game-over screen. curses.wrapper restores the terminal on exit.
    """

    def __init__(self, config: GameConfig, seed: Optional[int] = None):
        self._base_config = config
        self._seed = seed
        self._final_score = 0
        self._quit_requested = False

    @property
    def quit_requested(self) -> bool:
        return self._quit_requested

    def run(self) -> int:
        """Play one game. Returns the final score."""
        curses.wrapper(self._session)
        return self._final_score

    def _session(self, stdscr) -> None:
        curses.curs_set(0)
        colors = ColorTable()
        colors.init()

        # The play field spans the terminal
        _, width = stdscr.getmaxyx()
        config = self._base_config.with_screen_width(width)
        catalog = ObjectCatalog(config)

        show_instructions(stdscr, catalog, colors)

        game = CoreGame(config=config, seed=self._seed)
        renderer = TerminalRenderer(stdscr, config, catalog, colors)
        driver = GameDriver(
            game,
            renderer=renderer,
            input_source=TerminalKeySource(),
            on_game_over=lambda score: draw_game_over(stdscr, score, colors)
        )
        self._final_score = driver.run()
        self._quit_requested = driver.quit_requested


def main():
    parser = argparse.ArgumentParser(description="Play Dog Pacman in the terminal")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--config", type=str, default=None, help="Path to game_config.yaml")
    parser.add_argument("--lives", type=int, default=None, help="Override initial lives")
    parser.add_argument("--frame-ms", type=float, default=None, help="Override tick period (ms)")

    args = parser.parse_args()

    try:
        config = load_config(args.config)
        frame_period = args.frame_ms / 1000.0 if args.frame_ms is not None else None
        config = config.with_overrides(initial_lives=args.lives, frame_period=frame_period)
    except (FileNotFoundError, ValueError) as e:
        print(f"Config error: {e}")
        return 1

    try:
        player = HumanPlayer(config=config, seed=args.seed)
        score = player.run()
    except curses.error as e:
        print(f"Terminal error: {e}")
        return 1

    print(f"\nFinal Score: {score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
