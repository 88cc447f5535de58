# clock.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional


@dataclass
class GameClock:
    """
    Fixed-step accumulator between frame time and simulation steps.

    ``now`` is simulation time in ms. It only moves when ``tick`` is called,
    so a paused session (which stops ticking) freezes every timer keyed on it.
    A frame may run zero, one or several steps.
    """
    now: float = 0.0
    accumulator: float = 0.0
    last_frame: Optional[float] = None   # host time of the previous frame

    def delta(self, host_now: float) -> float:
        """Host-time delta since the previous frame; 0 on the first one."""
        if self.last_frame is None:
            self.last_frame = host_now
        delta = max(0.0, host_now - self.last_frame)
        self.last_frame = host_now
        return delta

    def advance(self, delta_ms: float) -> None:
        self.now += delta_ms
        self.accumulator += delta_ms

    def run_steps(
        self,
        step: Callable[[], None],
        rate: Callable[[], float],
        running: Callable[[], bool],
    ) -> int:
        """
        Drain the accumulator one step at a time.

        The rate is read again before every step since eating food or
        picking up a power-up can change it mid-frame.
        """
        steps = 0
        while running():
            step_ms = 1000.0 / rate()
            if self.accumulator < step_ms:
                break
            step()
            self.accumulator -= step_ms
            steps += 1
        return steps

    def reset(self) -> None:
        self.accumulator = 0.0
