# spawner.py
from __future__ import annotations
import logging
from typing import Optional, Protocol

from .config import POWERUP_KINDS, POWERUP_WINDOW_MAX, POWERUP_WINDOW_MIN
from .grid import Cell, occupied_by_snake, playable_cells
from .models import Food, GameState, PowerUp

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Uniform integer source; ``random.Random`` fits as-is."""

    def randint(self, a: int, b: int) -> int: ...


def _taken(state: GameState, cell: Cell) -> bool:
    if occupied_by_snake(cell[0], cell[1], state.snake):
        return True
    if state.food is not None and state.food.cell == cell:
        return True
    return state.power_up is not None and state.power_up.cell == cell


def pick_free_cell(state: GameState, rng: RandomSource) -> Optional[Cell]:
    """Uniform pick among playable cells free of snake, food and power-up."""
    free = [cell for cell in playable_cells() if not _taken(state, cell)]
    if not free:
        return None
    return free[rng.randint(0, len(free) - 1)]


def spawn_food(state: GameState, rng: RandomSource, now: float) -> None:
    cell = pick_free_cell(state, rng)
    if cell is None:
        logger.debug("no free cell for food")
        return
    state.food = Food(cell=cell, born_at=now)


def schedule_power_up(state: GameState, rng: RandomSource, now: float) -> None:
    state.next_power_up_at = now + rng.randint(POWERUP_WINDOW_MIN, POWERUP_WINDOW_MAX)


def maybe_spawn_power_up(state: GameState, rng: RandomSource, now: float) -> None:
    """
    Place a power-up once the spawn window has elapsed.

    Nothing happens while a power-up sits on the board or an effect is
    running. Once the window is due it is rescheduled whether or not a free
    cell was found, so a full board burns that attempt.
    """
    if state.power_up is not None or state.active_effect is not None:
        return
    if now < state.next_power_up_at:
        return

    cell = pick_free_cell(state, rng)
    if cell is not None:
        kind = POWERUP_KINDS[rng.randint(0, len(POWERUP_KINDS) - 1)]
        state.power_up = PowerUp(cell=cell, kind=kind, born_at=now)
        logger.debug("power-up %s spawned at %s", kind, cell)
    else:
        logger.debug("no free cell for power-up, window skipped")
    schedule_power_up(state, rng, now)
