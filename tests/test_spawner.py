from pixel_snake.config import DOUBLE, POWERUP_TTL_MS, SLOW
from pixel_snake.grid import playable_cells
from pixel_snake.models import ActiveEffect, Food, GameState, PowerUp
from pixel_snake.spawner import maybe_spawn_power_up, pick_free_cell, spawn_food


def _state(**kw):
    kw.setdefault("snake", [(3, 1), (2, 1), (1, 1)])
    return GameState(**kw)


class _LastPick:
    def randint(self, a, b):
        return b


def test_pick_free_cell_skips_snake_food_and_power_up(rng):
    state = _state()
    assert pick_free_cell(state, rng) == (4, 1)

    state.food = Food(cell=(4, 1), born_at=0)
    assert pick_free_cell(state, rng) == (5, 1)

    state.power_up = PowerUp(cell=(5, 1), kind=SLOW, born_at=0)
    assert pick_free_cell(state, rng) == (6, 1)


def test_pick_free_cell_spans_whole_playable_region(rng):
    state = _state()
    assert pick_free_cell(state, _LastPick()) == (30, 30)
    # one draw over every free cell
    assert rng.calls == [] and pick_free_cell(state, rng) is not None
    assert rng.calls == [(0, 900 - 3 - 1)]


def test_full_board_leaves_food_absent(rng):
    state = _state(snake=list(playable_cells()))
    assert pick_free_cell(state, rng) is None
    spawn_food(state, rng, now=10)
    assert state.food is None


def test_spawn_food_stamps_birth_time(rng):
    state = _state()
    spawn_food(state, rng, now=1234)
    assert state.food == Food(cell=(4, 1), born_at=1234)


def test_power_up_waits_for_window(rng):
    state = _state(next_power_up_at=1000)
    maybe_spawn_power_up(state, rng, now=999)
    assert state.power_up is None
    assert state.next_power_up_at == 1000


def test_power_up_spawns_and_reschedules(scripted):
    rng = scripted([0, 1, 25_000])   # cell index, kind, window
    state = _state(next_power_up_at=1000)
    maybe_spawn_power_up(state, rng, now=1000)
    assert state.power_up == PowerUp(cell=(4, 1), kind=DOUBLE, born_at=1000)
    assert state.power_up.ttl == POWERUP_TTL_MS
    assert state.next_power_up_at == 26_000
    assert rng.calls[-1] == (20_000, 30_000)


def test_no_power_up_while_one_is_on_board(rng):
    existing = PowerUp(cell=(9, 9), kind=SLOW, born_at=0)
    state = _state(power_up=existing)
    maybe_spawn_power_up(state, rng, now=50_000)
    assert state.power_up is existing
    assert state.next_power_up_at == 0


def test_no_power_up_while_effect_active(rng):
    state = _state(active_effect=ActiveEffect(kind=DOUBLE, foods_left=2))
    maybe_spawn_power_up(state, rng, now=50_000)
    assert state.power_up is None
    assert state.next_power_up_at == 0


def test_full_board_still_burns_the_window(rng):
    state = _state(snake=list(playable_cells()), next_power_up_at=500)
    maybe_spawn_power_up(state, rng, now=600)
    assert state.power_up is None
    assert state.next_power_up_at == 600 + 20_000
