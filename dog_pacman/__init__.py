"""
Dog Pacman Package
==================

Terminal arcade game: a dog scrolls past a stream of objects and must open
its mouth to eat the right ones. This package contains:

- The deterministic simulation core (spawning, movement, collisions,
  scoring, lives, difficulty)
- The threaded tick/input driver
- Curses front end and a headless Gymnasium environment

All tunable parameters are in game_config.yaml.
"""
