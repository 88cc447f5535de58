# game.py
from __future__ import annotations
from typing import Tuple

from .config import OPPOSITE, RIGHT, START_LENGTH, TICK_BASE
from .effects import activate, score_food
from .grid import centered_snake, is_playable, occupied_by_snake, step, wrap
from .models import GameState, Mode
from .spawner import RandomSource, maybe_spawn_power_up, schedule_power_up, spawn_food


# ---------- Helpers ----------
def is_opposite(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


# ---------- State ----------
def new_game_state(rng: RandomSource, now: float) -> GameState:
    """Fresh run: centered snake heading right, first food placed."""
    state = GameState(
        snake=centered_snake(START_LENGTH),
        direction=RIGHT,
        next_direction=RIGHT,
        score=0,
        level=1,
        tick_rate=TICK_BASE,
    )
    schedule_power_up(state, rng, now)
    spawn_food(state, rng, now)
    return state


# ---------- Input ----------
def queue_direction(state: GameState, direction) -> None:
    """Buffer a direction intent; anything that isn't a direction is dropped."""
    if direction in OPPOSITE:
        state.input_queue.append(direction)


def apply_queued_direction(state: GameState) -> None:
    """
    Take the first queued intent that doesn't reverse the snake.

    Reversals ahead of it are discarded; intents behind it stay queued for
    the following steps.
    """
    while state.input_queue:
        proposed = state.input_queue.popleft()
        if not is_opposite(proposed, state.direction):
            state.next_direction = proposed
            return


# ---------- Update ----------
def step_game(state: GameState, mode: Mode, rng: RandomSource, now: float) -> bool:
    """
    Advance the snake by one cell.
    Returns True if alive, False on collision (the snake is left untouched).
    """
    apply_queued_direction(state)
    state.direction = state.next_direction

    nx, ny = step(state.head(), state.direction)

    if mode is Mode.WRAP:
        nx, ny = wrap(nx, ny)
    elif not is_playable(nx, ny):
        return False

    # Checked against the pre-move body, tail included
    if occupied_by_snake(nx, ny, state.snake):
        return False

    new_head = (nx, ny)
    state.snake.insert(0, new_head)

    if state.food is not None and state.food.cell == new_head:
        state.food = None
        score_food(state)
        spawn_food(state, rng, now)
        maybe_spawn_power_up(state, rng, now)
    else:
        state.snake.pop()

    if state.power_up is not None and state.power_up.cell == new_head:
        activate(state, state.power_up.kind, now)
        state.power_up = None

    return True
