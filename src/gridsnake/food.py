# food.py
from __future__ import annotations
from typing import Iterable, Optional

import numpy as np  # type: ignore

from .grid import Board, Cell


def free_cells(board: Board, body: Iterable[Cell]) -> np.ndarray:
    """
    Return every cell not covered by the body as an (N, 2) array of (x, y),
    in row-major order.
    """
    occupied = np.zeros((board.height, board.width), dtype=bool)
    for x, y in body:
        if board.in_bounds((x, y)):
            occupied[y, x] = True
    ys, xs = np.nonzero(~occupied)
    return np.stack([xs, ys], axis=1)


def place_new_food(
    board: Board,
    body: Iterable[Cell],
    previous_food: Optional[Cell],
    rng: np.random.Generator,
) -> Optional[Cell]:
    """
    Pick a new food cell uniformly among the free cells.

    The previous food cell is never picked again unless it is the only free
    cell left. Returns None when the body covers the whole board.
    """
    free = free_cells(board, body)
    if len(free) == 0:
        return None

    if previous_food is not None and len(free) > 1:
        keep = ~((free[:, 0] == previous_food[0]) & (free[:, 1] == previous_food[1]))
        free = free[keep]

    fx, fy = free[rng.integers(len(free))]
    return (int(fx), int(fy))
