# grid.py
from __future__ import annotations
from typing import Iterable, Iterator, List, Tuple

from .config import GRID_SIZE

Cell = Tuple[int, int]


def is_playable(x: int, y: int) -> bool:
    """True for cells inside the border ring."""
    return 1 <= x <= GRID_SIZE - 2 and 1 <= y <= GRID_SIZE - 2


def occupied_by_snake(x: int, y: int, snake: Iterable[Cell]) -> bool:
    return any(sx == x and sy == y for sx, sy in snake)


def playable_cells() -> Iterator[Cell]:
    """Row-major walk over the playable region."""
    for y in range(1, GRID_SIZE - 1):
        for x in range(1, GRID_SIZE - 1):
            yield (x, y)


def _wrap_axis(v: int) -> int:
    if v <= 0:
        return GRID_SIZE - 2
    if v >= GRID_SIZE - 1:
        return 1
    return v


def wrap(x: int, y: int) -> Cell:
    """Teleport a coordinate on or past the border to the opposite playable edge."""
    return (_wrap_axis(x), _wrap_axis(y))


def step(cell: Cell, direction: Tuple[int, int]) -> Cell:
    return (cell[0] + direction[0], cell[1] + direction[1])


def centered_snake(length: int) -> List[Cell]:
    """Horizontal snake heading right, head just left of the grid center."""
    mid = GRID_SIZE // 2
    return [(mid - 1 - i, mid) for i in range(length)]
