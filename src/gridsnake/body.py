# body.py
from __future__ import annotations
from typing import List, Set, Tuple

from .grid import Cell, Direction


class SnakeBody:
    """Ordered cells of the snake, head at index 0.

    Growth stacks copies of the tail cell; the duplicates unstack one per tick
    as the body moves.
    """

    def __init__(self, start: Cell, starter_length: int = 0) -> None:
        self._cells: List[Cell] = []
        self.reset(start, starter_length)

    def reset(self, start: Cell, starter_length: int = 0) -> None:
        self._cells = [start]
        self.grow(starter_length)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self):
        return iter(self._cells)

    @property
    def head(self) -> Cell:
        return self._cells[0]

    @property
    def tail(self) -> Cell:
        return self._cells[-1]

    def cells(self) -> Tuple[Cell, ...]:
        return tuple(self._cells)

    def unique_cells(self) -> Set[Cell]:
        return set(self._cells)

    def compute_new_head(self, heading: Direction) -> Cell:
        hx, hy = self._cells[0]
        return (hx + heading.dx, hy + heading.dy)

    def shift_tail(self) -> None:
        # The vacated tail becomes the slot commit_head() overwrites.
        self._cells.insert(0, self._cells.pop())

    def commit_head(self, new_head: Cell) -> None:
        self._cells[0] = new_head

    def grow(self, amount: int) -> None:
        self._cells.extend([self._cells[-1]] * amount)

    def contains_at(self, cell: Cell, excluding_head: bool = False,
                    excluding_tail: bool = False) -> bool:
        """Self-overlap test used for collisions and food exclusion."""
        start = 1 if excluding_head else 0
        stop = len(self._cells) - 1 if excluding_tail else len(self._cells)
        return cell in self._cells[start:stop]
