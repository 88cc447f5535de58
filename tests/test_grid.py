from pixel_snake.config import GRID_SIZE, RIGHT, UP
from pixel_snake.grid import (
    centered_snake, is_playable, occupied_by_snake, playable_cells, step, wrap,
)


def test_playable_region_excludes_border_ring():
    assert is_playable(1, 1)
    assert is_playable(GRID_SIZE - 2, GRID_SIZE - 2)
    for x, y in [(0, 5), (5, 0), (GRID_SIZE - 1, 5), (5, GRID_SIZE - 1), (-1, 3), (3, 40)]:
        assert not is_playable(x, y)


def test_playable_cells_row_major():
    cells = list(playable_cells())
    assert len(cells) == (GRID_SIZE - 2) ** 2
    assert cells[:2] == [(1, 1), (2, 1)]
    assert cells[-1] == (GRID_SIZE - 2, GRID_SIZE - 2)
    assert all(is_playable(x, y) for x, y in cells)


def test_occupied_by_snake():
    snake = [(3, 3), (2, 3), (1, 3)]
    assert occupied_by_snake(2, 3, snake)
    assert not occupied_by_snake(4, 3, snake)
    assert not occupied_by_snake(1, 1, [])


def test_wrap_lands_on_opposite_playable_edge():
    assert wrap(0, 5) == (GRID_SIZE - 2, 5)
    assert wrap(-3, 5) == (GRID_SIZE - 2, 5)
    assert wrap(GRID_SIZE - 1, 5) == (1, 5)
    assert wrap(GRID_SIZE + 2, 5) == (1, 5)
    assert wrap(5, 0) == (5, GRID_SIZE - 2)
    assert wrap(5, GRID_SIZE - 1) == (5, 1)
    assert wrap(7, 9) == (7, 9)


def test_step_and_spawn_position():
    assert step((4, 4), UP) == (4, 3)
    assert step((4, 4), RIGHT) == (5, 4)
    assert centered_snake(3) == [(15, 16), (14, 16), (13, 16)]
