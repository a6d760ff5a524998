# entities.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from settings import STAND_SIZE, DUCK_SIZE, HITBOX_INSET, BIRD_SIZE


class Posture(Enum):
    STANDING = "standing"
    DUCKING = "ducking"


@dataclass(frozen=True)
class Box:
    """Axis-aligned box in logical units, y growing downward."""
    x: float
    y: float
    width: float
    height: float

    def overlaps(self, other: Box) -> bool:
        return (self.x < other.x + other.width and
                self.x + self.width > other.x and
                self.y < other.y + other.height and
                self.y + self.height > other.y)


# -------------------------------
# Player
# -------------------------------
@dataclass
class Player:
    x: float
    y: float
    vy: float = 0.0
    posture: Posture = Posture.STANDING
    airborne: bool = False
    run_frame: int = 0


def posture_size(posture: Posture) -> tuple[int, int]:
    return DUCK_SIZE if posture is Posture.DUCKING else STAND_SIZE


def ground_target(ground_y: float, posture: Posture) -> float:
    """Resting y for the player's top edge in the given posture."""
    return ground_y - posture_size(posture)[1]


def player_hitbox(player: Player) -> Box:
    w, h = posture_size(player.posture)
    return Box(player.x + HITBOX_INSET, player.y + HITBOX_INSET,
               w - 2 * HITBOX_INSET, h - 2 * HITBOX_INSET)


# -------------------------------
# Obstacles
# -------------------------------
@dataclass
class GroundObstacle:
    x: float
    y: float
    width: float
    height: float

    def box(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)

    @property
    def off_screen(self) -> bool:
        return self.x + self.width <= 0


@dataclass
class FlyingObstacle:
    x: float
    y: float
    width: float = BIRD_SIZE[0]
    height: float = BIRD_SIZE[1]
    wing_frame: int = 0

    def box(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)

    @property
    def off_screen(self) -> bool:
        return self.x + self.width <= 0


# -------------------------------
# Background (no gameplay effect)
# -------------------------------
@dataclass
class GroundTile:
    x: float
    width: float


@dataclass
class Cloud:
    x: float
    y: float
    width: float
    speed: float
