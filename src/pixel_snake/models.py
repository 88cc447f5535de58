# models.py
from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, List, Optional, Tuple

from .config import POWERUP_TTL_MS, RIGHT, SLOW, TICK_BASE
from .grid import Cell

Direction = Tuple[int, int]


class Mode(Enum):
    CLASSIC = "classic"
    WRAP = "wrap"

    @property
    def label(self) -> str:
        return "Wrap" if self is Mode.WRAP else "Classic"

    def toggled(self) -> "Mode":
        return Mode.CLASSIC if self is Mode.WRAP else Mode.WRAP


class SessionState(Enum):
    MENU = "menu"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game-over"


@dataclass
class Food:
    cell: Cell
    born_at: float       # ms, only drives the pulse animation


@dataclass
class PowerUp:
    cell: Cell
    kind: str
    born_at: float
    ttl: float = POWERUP_TTL_MS

    def age(self, now: float) -> float:
        return now - self.born_at

    def expired(self, now: float) -> bool:
        return self.age(now) > self.ttl


@dataclass
class ActiveEffect:
    kind: str
    ends_at: Optional[float] = None   # slow
    foods_left: int = 0               # double

    def is_slow(self) -> bool:
        return self.kind == SLOW


@dataclass
class GameState:
    snake: List[Cell]                 # head at index 0
    direction: Direction = RIGHT
    next_direction: Direction = RIGHT
    input_queue: Deque[Direction] = field(default_factory=deque)
    food: Optional[Food] = None
    power_up: Optional[PowerUp] = None
    active_effect: Optional[ActiveEffect] = None
    score: int = 0
    level: int = 1
    tick_rate: float = TICK_BASE      # steps/s before effect modifiers
    next_power_up_at: float = 0.0

    def head(self) -> Cell:
        return self.snake[0]
