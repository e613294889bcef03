# grid.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple

from .config import UP, DOWN, LEFT, RIGHT

Cell = Tuple[int, int]


class Direction(Enum):
    UP = UP
    DOWN = DOWN
    LEFT = LEFT
    RIGHT = RIGHT

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def opposite(self) -> "Direction":
        return Direction((-self.dx, -self.dy))

    @classmethod
    def from_token(cls, token) -> Optional["Direction"]:
        """Map an input token (arrow key name, WASD letter, plain name) to a Direction.

        Anything unrecognised maps to None so callers can simply ignore it.
        """
        if isinstance(token, Direction):
            return token
        if not isinstance(token, str):
            return None
        return _TOKENS.get(token.strip().lower())


_TOKENS = {
    "arrowup": Direction.UP, "w": Direction.UP, "up": Direction.UP,
    "arrowdown": Direction.DOWN, "s": Direction.DOWN, "down": Direction.DOWN,
    "arrowleft": Direction.LEFT, "a": Direction.LEFT, "left": Direction.LEFT,
    "arrowright": Direction.RIGHT, "d": Direction.RIGHT, "right": Direction.RIGHT,
}


@dataclass(frozen=True)
class Board:
    width: int
    height: int

    def in_bounds(self, cell: Cell) -> bool:
        """Check if a cell is inside the grid."""
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def cells(self) -> Iterator[Cell]:
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    @property
    def area(self) -> int:
        return self.width * self.height
