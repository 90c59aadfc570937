"""Shared fixtures: deterministic clock, random source and engine."""
import random

import pytest

from sidescroller.core.clock import ManualClock
from sidescroller.core.events import EventBus
from sidescroller.core.scheduler import TickScheduler
from sidescroller.game.engine import GameEngine
from sidescroller.settings import GameSettings
from sidescroller.storage.highscore import MemoryHighScoreStore


class SequenceRandom(random.Random):
    """random.Random whose random() replays a fixed cycle of values."""

    def __init__(self, values):
        super().__init__(0)
        self._values = list(values)
        self._i = 0

    def random(self):
        value = self._values[self._i % len(self._values)]
        self._i += 1
        return value


FRAME_MS = 16.0


@pytest.fixture
def settings():
    return GameSettings()


@pytest.fixture
def clock():
    return ManualClock(1000.0)


@pytest.fixture
def scheduler():
    return TickScheduler()


@pytest.fixture
def store():
    return MemoryHighScoreStore()


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def make_engine(settings, clock, scheduler, store, bus):
    def _make(rng_values=(0.5,), **overrides):
        kwargs = dict(
            settings=settings,
            clock=clock,
            scheduler=scheduler,
            store=store,
            event_bus=bus,
            rng=SequenceRandom(rng_values),
        )
        kwargs.update(overrides)
        return GameEngine(**kwargs)
    return _make


@pytest.fixture
def engine(make_engine):
    return make_engine()


@pytest.fixture
def quiet_engine(engine, clock):
    """A started engine that will not spawn anything on its own."""
    engine.start()
    engine.run.last_spawn_time = float("inf")
    return engine


def step(engine, clock, ms=FRAME_MS):
    """Advance the clock and pump one display refresh."""
    now = clock.advance(ms)
    return engine.scheduler.pump(now)
