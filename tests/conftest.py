import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from pixel_snake.models import Mode
from pixel_snake.scores import MemoryScoreStore
from pixel_snake.session import Session


class ScriptedRandom:
    """Plays back scripted values, then always answers the lowest bound.

    With no script, free-cell picks land on the first free cell in row-major
    order, power-ups come out as ``slow`` and spawn windows are 20 s.
    """

    def __init__(self, values=()):
        self.values = list(values)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        if self.values:
            v = self.values.pop(0)
            assert a <= v <= b, f"scripted {v} outside [{a}, {b}]"
            return v
        return a


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def rng():
    return ScriptedRandom()


@pytest.fixture
def store():
    return MemoryScoreStore()


@pytest.fixture
def session(store, rng):
    return Session(store=store, rng=rng, mode=Mode.CLASSIC)
