# effects.py
from __future__ import annotations
import logging
from typing import Optional

from .config import (
    DOUBLE, DOUBLE_FOODS, LEVEL_EVERY, SLOW, SLOW_DURATION_MS, SLOW_FLOOR,
    SLOW_PENALTY, TICK_BASE, TICK_CAP, TICK_PER_LEVEL,
)
from .models import ActiveEffect, GameState

logger = logging.getLogger(__name__)


# ---------- Speed ----------
def level_for_score(score: int) -> int:
    return 1 + score // LEVEL_EVERY


def tick_rate_for_level(level: int) -> float:
    scaled = TICK_BASE + (level - 1) * TICK_PER_LEVEL
    return min(TICK_CAP, max(TICK_BASE, scaled))


def effective_tick_rate(state: GameState) -> float:
    """Steps per second the clock should run at right now."""
    effect = state.active_effect
    if effect is not None and effect.is_slow():
        return max(SLOW_FLOOR, state.tick_rate - SLOW_PENALTY)
    return state.tick_rate


# ---------- Effects ----------
def activate(state: GameState, kind: str, now: float) -> None:
    if kind == SLOW:
        state.active_effect = ActiveEffect(kind=SLOW, ends_at=now + SLOW_DURATION_MS)
    else:
        state.active_effect = ActiveEffect(kind=DOUBLE, foods_left=DOUBLE_FOODS)
    logger.debug("effect %s active", kind)


def score_food(state: GameState) -> int:
    """Award points for one food, then recompute level and tick rate."""
    points = 1
    effect = state.active_effect
    if effect is not None and effect.kind == DOUBLE:
        points = 2
        effect.foods_left -= 1
        if effect.foods_left <= 0:
            state.active_effect = None
            logger.debug("effect double used up")
    state.score += points
    state.level = level_for_score(state.score)
    state.tick_rate = tick_rate_for_level(state.level)
    return points


def expire(state: GameState, now: float) -> None:
    """Once-per-frame housekeeping for the power-up TTL and the slow timer."""
    if state.power_up is not None and state.power_up.expired(now):
        logger.debug("power-up %s expired", state.power_up.kind)
        state.power_up = None

    effect = state.active_effect
    if effect is not None and effect.is_slow() and now >= effect.ends_at:
        logger.debug("effect slow ended")
        state.active_effect = None


def remaining(effect: Optional[ActiveEffect], now: float) -> Optional[float]:
    """Milliseconds left for slow, foods left for double."""
    if effect is None:
        return None
    if effect.is_slow():
        return max(0.0, effect.ends_at - now)
    return effect.foods_left
