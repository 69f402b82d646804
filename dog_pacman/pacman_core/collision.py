"""
Collision Detection
===================

Axis-aligned rectangle overlap on the character grid.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """Grid rectangle: top-left corner plus footprint."""
    x: int
    y: int
    width: int
    height: int

    def overlaps(self, other: "Rect") -> bool:
        return check_collision(
            self.x, self.y, self.width, self.height,
            other.x, other.y, other.width, other.height
        )


def check_collision(
    ax: int, ay: int, aw: int, ah: int,
    bx: int, by: int, bw: int, bh: int
) -> bool:
    """
    True if rectangles A and B overlap.

    Edges that only touch do not count as overlap.
    """
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by
