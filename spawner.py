# spawner.py
from __future__ import annotations
import logging
import random
from typing import Sequence, Union

from entities import GroundObstacle, FlyingObstacle
from settings import (
    CACTUS_TYPES, BIRD_HEIGHTS,
    FLYING_UNLOCK_SCORE, FLYING_CHANCE, GROUND_CHANCE,
    MAX_GROUND_OBSTACLES, MIN_GROUND_SPACING,
)

logger = logging.getLogger(__name__)

Obstacle = Union[GroundObstacle, FlyingObstacle]


class ObstacleSpawner:
    """Probabilistic rate limiter run once per spawn tick.

    One uniform sample decides the tick. Below FLYING_CHANCE it may unlock a
    bird (score past FLYING_UNLOCK_SCORE, none in flight); otherwise below
    GROUND_CHANCE it may place a cactus, provided fewer than
    MAX_GROUND_OBSTACLES are active and the newest one has cleared
    MIN_GROUND_SPACING from the spawn edge.
    """

    def __init__(self, rng: random.Random):
        self.rng = rng

    def pick(self, score: float,
             ground: Sequence[GroundObstacle],
             flying: Sequence[FlyingObstacle],
             width: float, ground_y: float) -> Obstacle | None:
        sample = self.rng.random()

        if score > FLYING_UNLOCK_SCORE and sample < FLYING_CHANCE and not flying:
            return self._flying(width, ground_y)

        if sample < GROUND_CHANCE and len(ground) < MAX_GROUND_OBSTACLES:
            last = ground[-1] if ground else None
            if last is None or last.x < width - MIN_GROUND_SPACING:
                return self._ground(width, ground_y)
        return None

    # ---------- Builders ----------
    def _ground(self, width: float, ground_y: float) -> GroundObstacle:
        w, h = self.rng.choice(CACTUS_TYPES)
        return GroundObstacle(x=width, y=ground_y - h, width=w, height=h)

    def _flying(self, width: float, ground_y: float) -> FlyingObstacle:
        lift = self.rng.choice(BIRD_HEIGHTS)
        return FlyingObstacle(x=width, y=ground_y - lift)
