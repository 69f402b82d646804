"""
Input Controller
================

Translates discrete input events into mouth transitions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from dog_pacman.pacman_core.game import CoreGame


class InputKind(Enum):
    QUIT = "quit"
    OPEN_MOUTH = "open_mouth"
    OTHER = "other"


@dataclass(frozen=True)
class InputEvent:
    """A single key press, already classified."""
    kind: InputKind
    raw: Optional[str] = None    # Original key text, for diagnostics

    @staticmethod
    def quit() -> "InputEvent":
        return InputEvent(InputKind.QUIT)

    @staticmethod
    def open_mouth() -> "InputEvent":
        return InputEvent(InputKind.OPEN_MOUTH)

    @staticmethod
    def other(raw: Optional[str] = None) -> "InputEvent":
        return InputEvent(InputKind.OTHER, raw)


class InputController:
    """Applies input events to a game. Never advances the simulation."""

    def __init__(self, game: CoreGame):
        self._game = game

    def handle_input(self, event: InputEvent) -> bool:
        """
        Handle one input event.

        Args:
            event: Classified input event.

        Returns:
            False if the run loop should stop, True otherwise.
        """
        if event.kind is InputKind.QUIT:
            return False
        if event.kind is InputKind.OPEN_MOUTH:
            # Already open: ignored, the timer is not reset
            self._game.open_mouth()
        return True
