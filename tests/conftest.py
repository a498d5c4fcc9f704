"""Pytest configuration and fixtures for snake game tests."""

import random

import pytest

from pixel_snake.game import GameState
from pixel_snake.models import GameStatus


class FakeScheduler:
    """Records scheduler calls instead of touching an event loop."""

    def __init__(self):
        self.calls = []
        self.rate = None
        self.running = False

    def start(self, rate=None):
        self.calls.append(("start", rate))
        if rate is not None:
            self.rate = rate
        self.running = True

    def stop(self):
        self.calls.append(("stop", None))
        self.running = False

    def set_rate(self, rate):
        self.calls.append(("set_rate", rate))
        self.rate = rate


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def game(seeded_rng, scheduler, clock):
    """A started game on level 1 with the board cleared of food."""
    state = GameState(rng=seeded_rng, scheduler=scheduler, clock=clock)
    state.start()
    state.registry.clear_food()
    assert state.status is GameStatus.RUNNING
    return state
