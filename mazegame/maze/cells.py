"""Closed tag sets shared by the generator, glyph mapper and game loop."""

from __future__ import annotations

import enum
from typing import Tuple

Coord2D = Tuple[int, int]


class Cell(enum.IntEnum):
    """Binary cell state. The integer values double as bits in glyph patterns."""

    PATH = 0
    WALL = 1


class Direction(enum.Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    def step(self, x: int, y: int) -> Coord2D:
        return x + self.dx, y + self.dy


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

__all__ = ["Cell", "Direction", "Coord2D"]
