"""
Mouth State Machine
===================

Closed -> Open(duration) on an open request while closed. Each tick the
counter drops by one and the mouth closes when it reaches zero. There is no
explicit close action.
"""

from __future__ import annotations


class MouthState:
    """The dog's mouth: open flag plus ticks left before it snaps shut."""

    def __init__(self, open_duration: int):
        self._open_duration = open_duration
        self._ticks_remaining: int = 0

    @property
    def is_open(self) -> bool:
        return self._ticks_remaining > 0

    @property
    def ticks_remaining(self) -> int:
        return self._ticks_remaining

    @property
    def open_duration(self) -> int:
        return self._open_duration

    def open(self) -> bool:
        """
        Open the mouth if it is closed.

        Returns:
            True if the mouth opened, False if it was already open.
        """
        if self.is_open:
            return False
        self._ticks_remaining = self._open_duration
        return True

    def tick(self) -> bool:
        """
        Advance the timer by one tick.

        Returns:
            True if the mouth closed on this tick.
        """
        if not self.is_open:
            return False
        self._ticks_remaining -= 1
        return self._ticks_remaining == 0

    def reset(self) -> None:
        """Close the mouth."""
        self._ticks_remaining = 0

    def __repr__(self) -> str:
        if self.is_open:
            return f"MouthState(open, {self._ticks_remaining} left)"
        return "MouthState(closed)"
