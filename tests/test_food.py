import numpy as np

from gridsnake.food import free_cells, place_new_food
from gridsnake.grid import Board


def test_free_cells_excludes_body():
    board = Board(3, 2)
    free = free_cells(board, [(0, 0), (2, 1), (2, 1)])
    cells = {tuple(c) for c in free.tolist()}
    assert len(free) == 4
    assert cells == {(1, 0), (2, 0), (0, 1), (1, 1)}


def test_food_avoids_body_and_previous():
    board = Board(6, 4)
    body = [(0, 0), (1, 0), (2, 0), (3, 0), (3, 1)]
    rng = np.random.default_rng(3)
    previous = (4, 2)
    seen = set()
    for _ in range(300):
        food = place_new_food(board, body, previous, rng)
        assert food not in body
        assert food != previous
        assert board.in_bounds(food)
        seen.add(food)
    # uniform over the 18 remaining cells; 300 draws reach all of them
    assert len(seen) == board.area - len(body) - 1


def test_previous_food_allowed_when_it_is_the_only_free_cell():
    board = Board(2, 1)
    rng = np.random.default_rng(0)
    assert place_new_food(board, [(0, 0)], (1, 0), rng) == (1, 0)


def test_full_board_has_no_food():
    board = Board(2, 2)
    body = [(0, 0), (1, 0), (1, 1), (0, 1)]
    assert place_new_food(board, body, None, np.random.default_rng(0)) is None


def test_placement_is_reproducible_with_seed():
    board = Board(20, 12)
    body = [(0, 6)]
    a = [place_new_food(board, body, None, np.random.default_rng(11)) for _ in range(3)]
    b = [place_new_food(board, body, None, np.random.default_rng(11)) for _ in range(3)]
    assert a == b
    assert all(isinstance(v, int) for cell in a for v in cell)
