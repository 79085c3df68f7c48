import os

# pygame must not try to open a real display during tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest  # noqa: E402

from torus_snake.config import Config  # noqa: E402
from torus_snake.game import Game  # noqa: E402
from torus_snake.scheduler import ManualScheduler  # noqa: E402


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_game(clock):
    """Game factory with spawning off, a manual scheduler and a fake clock."""

    def _make(**overrides):
        params = dict(grid_size=10, snake_length=4, snake_offset=(3, 3), spawn_multiplier=0.0, seed=0)
        params.update(overrides)
        return Game(Config(**params), scheduler=ManualScheduler(), clock=clock)

    return _make
