import functools

import numpy as np
import pytest

from gridsnake.config import Config
from gridsnake.events import EventBus, GameEvent
from gridsnake.scores import MemoryHighScoreStore
from gridsnake.session import GameSession
from gridsnake.simulation import SessionPhase, Simulation


class Recorder:
    """Collects every event emitted on a bus, in order."""

    def __init__(self, bus: EventBus):
        self.calls = []
        for event in GameEvent:
            bus.subscribe(event, functools.partial(self._record, event))

    def _record(self, event, **payload):
        self.calls.append((event, payload))

    def of(self, event):
        return [payload for e, payload in self.calls if e is event]

    def clear(self):
        self.calls.clear()


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def recorder(bus):
    return Recorder(bus)


@pytest.fixture
def store():
    return MemoryHighScoreStore()


@pytest.fixture
def make_sim(bus, store):
    def _make(**overrides):
        sim = Simulation(Config(**overrides), events=bus, high_scores=store,
                         rng=np.random.default_rng(1))
        sim.phase = SessionPhase.RUNNING
        sim.food = (19, 0)
        return sim
    return _make


@pytest.fixture
def session(bus, store):
    s = GameSession(Config(), events=bus, high_scores=store, rng=np.random.default_rng(7))
    s.sim.food = (19, 0)
    return s
