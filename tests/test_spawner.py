import random

import pytest

from entities import GroundObstacle, FlyingObstacle
from simulation import Simulation, Phase
from spawner import ObstacleSpawner
from settings import (
    CACTUS_TYPES, BIRD_HEIGHTS, MIN_GROUND_SPACING, MAX_GROUND_OBSTACLES, FLYING_UNLOCK_SCORE,
)

WIDTH, GROUND_Y = 800, 250


class ScriptedRandom:
    """Returns queued samples; choice() always takes the first option."""

    def __init__(self, *samples):
        self.samples = list(samples)

    def random(self):
        return self.samples.pop(0)

    def choice(self, options):
        return options[0]


def cactus(x):
    return GroundObstacle(x=x, y=GROUND_Y - 40, width=20, height=40)


def pick(sample, score=0.0, ground=(), flying=()):
    spawner = ObstacleSpawner(ScriptedRandom(sample))
    return spawner.pick(score, list(ground), list(flying), WIDTH, GROUND_Y)


def test_ground_obstacle_at_spawn_edge():
    ob = pick(0.5)
    w, h = CACTUS_TYPES[0]
    assert isinstance(ob, GroundObstacle)
    assert (ob.x, ob.y, ob.width, ob.height) == (WIDTH, GROUND_Y - h, w, h)


def test_quiet_tick_above_ground_chance():
    assert pick(0.6) is None
    assert pick(0.95, score=1000) is None


def test_flying_locked_until_score_passes_threshold():
    ob = pick(0.1, score=FLYING_UNLOCK_SCORE)
    assert isinstance(ob, GroundObstacle)


def test_flying_after_threshold():
    ob = pick(0.1, score=FLYING_UNLOCK_SCORE + 0.15)
    assert isinstance(ob, FlyingObstacle)
    assert ob.x == WIDTH
    assert ob.y == GROUND_Y - BIRD_HEIGHTS[0]
    assert (ob.width, ob.height) == (46, 32)


def test_one_bird_at_a_time_falls_back_to_ground():
    ob = pick(0.1, score=500, flying=[FlyingObstacle(x=300, y=GROUND_Y - 80)])
    assert isinstance(ob, GroundObstacle)


def test_ground_cap():
    full = [cactus(100 + i * 50) for i in range(MAX_GROUND_OBSTACLES)]
    assert pick(0.5, ground=full) is None


@pytest.mark.parametrize("last_x, spawns", [
    (WIDTH - MIN_GROUND_SPACING - 1, True),
    (WIDTH - MIN_GROUND_SPACING, False),
    (WIDTH - 50, False),
])
def test_minimum_spacing(last_x, spawns):
    ob = pick(0.5, ground=[cactus(last_x)])
    assert (ob is not None) == spawns


def test_bird_heights_are_reachable():
    rng = random.Random(3)
    spawner = ObstacleSpawner(rng)
    seen = set()
    for _ in range(500):
        ob = spawner.pick(1000, [cactus(0)] * MAX_GROUND_OBSTACLES, [], WIDTH, GROUND_Y)
        if ob is not None:
            seen.add(GROUND_Y - ob.y)
    assert seen == set(BIRD_HEIGHTS)


def test_spawn_tick_idle_outside_a_run():
    sim = Simulation(WIDTH, 300, rng=random.Random(0))
    for _ in range(50):
        assert sim.spawn_tick(0.8) is None
    assert sim.ground_obstacles == []


def test_constraints_hold_over_a_long_run():
    sim = Simulation(WIDTH, 300, rng=random.Random(2024))
    sim._check_collisions = lambda: None    # keep running past every hazard
    sim.start()

    grounds = flyers = 0
    for frame in range(25000):
        sim.update()
        if frame % 4:
            continue
        previous = sim.ground_obstacles[-1] if sim.ground_obstacles else None
        score = sim.world.score
        ob = sim.spawn_tick(0.8)

        assert len(sim.flying_obstacles) <= 1
        assert len(sim.ground_obstacles) <= MAX_GROUND_OBSTACLES
        if isinstance(ob, FlyingObstacle):
            flyers += 1
            assert score > FLYING_UNLOCK_SCORE
        elif isinstance(ob, GroundObstacle):
            grounds += 1
            if previous is not None:
                assert ob.x - previous.x > MIN_GROUND_SPACING

    assert sim.phase is Phase.RUNNING
    assert grounds > 50
    assert flyers > 10
