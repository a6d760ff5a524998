import random

import pytest

from highscore_store import MemoryScoreStore
from simulation import Simulation


class CountingStore(MemoryScoreStore):
    """Remembers every save so tests can tell how often game-over persisted."""

    def __init__(self, value: int = 0):
        super().__init__(value)
        self.saves = []

    def save(self, value: int) -> None:
        self.saves.append(value)
        super().save(value)


@pytest.fixture
def make_sim():
    def factory(high_score: int = 0, seed: int = 1234, width: int = 800, height: int = 300):
        return Simulation(width, height, store=CountingStore(high_score), rng=random.Random(seed))
    return factory


@pytest.fixture
def sim(make_sim):
    return make_sim()


@pytest.fixture
def running(sim):
    sim.start()
    return sim
