# session.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .clock import GameClock
from .config import DIRECTIONS, START_LENGTH
from .controls import Command, Intent
from .effects import effective_tick_rate, expire, remaining
from .game import new_game_state, queue_direction, step_game
from .grid import Cell, centered_snake
from .models import GameState, Mode, SessionState
from .scores import ScoreStore
from .spawner import RandomSource, maybe_spawn_power_up

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """Everything the renderer may look at, copied out of the live state."""
    state: SessionState
    mode: Mode
    snake: Tuple[Cell, ...]
    direction: Tuple[int, int]
    food: Optional[Cell]
    food_age: float
    power_up: Optional[Cell]
    power_up_kind: Optional[str]
    power_up_age: float
    effect_kind: Optional[str]
    effect_remaining: Optional[float]
    score: int
    level: int
    tick_rate: float
    leaderboard: Tuple[int, ...]

    @property
    def best(self) -> int:
        return self.leaderboard[0] if self.leaderboard else 0


class Session:
    def __init__(self, store: ScoreStore, rng: RandomSource, mode: Mode = Mode.CLASSIC):
        self.store = store
        self.rng = rng
        self.mode = mode
        self.state = SessionState.MENU
        self.clock = GameClock()
        # placeholder board until the first start; never stepped in MENU
        self.game = GameState(snake=centered_snake(START_LENGTH))
        # top-5 for the current mode, re-read only when it can have changed
        self.scores: List[int] = []
        self.refresh_scores()

    # ---------- Commands ----------
    def start(self) -> None:
        if self.state not in (SessionState.MENU, SessionState.GAME_OVER):
            return
        self.clock.reset()
        self.game = new_game_state(self.rng, self.clock.now)
        self.refresh_scores()
        self._enter(SessionState.RUNNING)

    def toggle_pause(self) -> None:
        if self.state is SessionState.RUNNING:
            self._enter(SessionState.PAUSED)
        elif self.state is SessionState.PAUSED:
            self._enter(SessionState.RUNNING)

    def toggle_mode(self) -> None:
        if self.state not in (SessionState.MENU, SessionState.GAME_OVER):
            return
        self.mode = self.mode.toggled()
        logger.info("mode set to %s", self.mode.value)
        self.refresh_scores()
        self._enter(SessionState.MENU)

    def back_to_menu(self) -> None:
        self.game.input_queue.clear()
        self.refresh_scores()
        self._enter(SessionState.MENU)

    def queue_direction(self, direction: Tuple[int, int]) -> None:
        queue_direction(self.game, direction)

    def handle(self, intent: Optional[Intent]) -> None:
        """Dispatch whatever the input router produced."""
        if intent is None:
            return
        if intent in DIRECTIONS:
            self.queue_direction(intent)
        elif intent is Command.START:
            self.start()
        elif intent is Command.PAUSE:
            self.toggle_pause()
        elif intent is Command.TOGGLE_MODE:
            self.toggle_mode()
        elif intent is Command.MENU:
            self.back_to_menu()

    # ---------- Frame ----------
    def frame(self, host_now: float) -> int:
        """Per-frame entry point fed with host wall-clock ms."""
        return self.tick(self.clock.delta(host_now))

    def tick(self, delta_ms: float) -> int:
        """
        Advance simulation time by ``delta_ms`` and run the steps it covers.
        Returns how many steps ran. Outside RUNNING nothing moves.
        """
        if self.state is not SessionState.RUNNING:
            return 0

        self.clock.advance(delta_ms)
        now = self.clock.now
        expire(self.game, now)
        maybe_spawn_power_up(self.game, self.rng, now)

        return self.clock.run_steps(
            step=self._step,
            rate=lambda: effective_tick_rate(self.game),
            running=lambda: self.state is SessionState.RUNNING,
        )

    def _step(self) -> None:
        if not step_game(self.game, self.mode, self.rng, self.clock.now):
            self._game_over()

    def _game_over(self) -> None:
        self.store.save(self.mode.value, self.game.score)
        self.refresh_scores()
        logger.info("game over: score %d (%s)", self.game.score, self.mode.value)
        self._enter(SessionState.GAME_OVER)

    def _enter(self, state: SessionState) -> None:
        if state is not self.state:
            logger.info("%s -> %s", self.state.value, state.value)
        self.state = state

    # ---------- Read side ----------
    def refresh_scores(self) -> None:
        self.scores = self.store.get(self.mode.value)

    def leaderboard(self) -> List[int]:
        return list(self.scores)

    def best(self) -> int:
        scores = self.leaderboard()
        return scores[0] if scores else 0

    def snapshot(self) -> Snapshot:
        game = self.game
        now = self.clock.now
        food, power_up, effect = game.food, game.power_up, game.active_effect
        return Snapshot(
            state=self.state,
            mode=self.mode,
            snake=tuple(game.snake),
            direction=game.direction,
            food=food.cell if food else None,
            food_age=now - food.born_at if food else 0.0,
            power_up=power_up.cell if power_up else None,
            power_up_kind=power_up.kind if power_up else None,
            power_up_age=power_up.age(now) if power_up else 0.0,
            effect_kind=effect.kind if effect else None,
            effect_remaining=remaining(effect, now),
            score=game.score,
            level=game.level,
            tick_rate=effective_tick_rate(game),
            leaderboard=tuple(self.scores),
        )
