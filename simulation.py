# simulation.py
from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from itertools import chain
import logging
import math
import random

from entities import (
    Posture, Player, GroundObstacle, FlyingObstacle, GroundTile, Cloud,
    ground_target, player_hitbox,
)
from highscore_store import ScoreStore, MemoryScoreStore
from spawner import ObstacleSpawner, Obstacle
from settings import (
    WIDTH, HEIGHT, GROUND_OFFSET,
    INITIAL_SPEED, MAX_SPEED, SPEED_STEP, SPEED_SCORE_STEP,
    GRAVITY, JUMP_FORCE, FAST_FALL_VELOCITY,
    SCORE_PER_FRAME, DAY_NIGHT_INTERVAL,
    PLAYER_X, RUN_FRAME_CADENCE, FLYING_EXTRA_SPEED, WING_FRAME_CADENCE,
    GROUND_TILE_STEP, GROUND_TILE_OVERSCAN, GROUND_TILE_WIDTHS,
    GROUND_TILE_WIDE_CHANCE, GROUND_TILE_JITTER,
    CLOUD_COUNT, CLOUD_WIDTH_RANGE, CLOUD_Y_RANGE, CLOUD_SPEED_RANGE, CLOUD_JITTER,
    SCORE_DIGITS,
)

logger = logging.getLogger(__name__)


class Phase(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    GAME_OVER = "game_over"


class Intent(Enum):
    START = "start"
    RESTART = "restart"
    JUMP = "jump"
    DUCK_PRESSED = "duck_pressed"
    DUCK_RELEASED = "duck_released"


# -------------------------------
# Pure rules
# -------------------------------
def speed_for_score(score: float) -> float:
    steps = math.floor(score / SPEED_SCORE_STEP)
    return min(MAX_SPEED, INITIAL_SPEED + steps * SPEED_STEP)


def day_night_cycle(score: float) -> int:
    """How many whole DAY_NIGHT_INTERVALs the score has passed."""
    return math.floor(score / DAY_NIGHT_INTERVAL)


def format_score(value: float) -> str:
    return str(max(0, int(value))).zfill(SCORE_DIGITS)


# -------------------------------
# State
# -------------------------------
@dataclass
class World:
    width: float
    height: float
    ground_y: float
    speed: float = INITIAL_SPEED
    score: float = 0.0
    high_score: int = 0
    frame_count: int = 0
    is_daytime: bool = True
    cycle: int = 0
    phase: Phase = Phase.NOT_STARTED


@dataclass(frozen=True)
class Snapshot:
    """Everything a renderer needs for one frame; detached from live state."""
    phase: Phase
    width: float
    height: float
    ground_y: float
    score: int
    high_score: int
    speed: float
    is_daytime: bool
    frame_count: int
    player: Player
    ground_obstacles: tuple[GroundObstacle, ...]
    flying_obstacles: tuple[FlyingObstacle, ...]
    ground_tiles: tuple[GroundTile, ...]
    clouds: tuple[Cloud, ...]


class Simulation:
    """One game: world, player, obstacles and background, advanced per frame.

    ``update`` is driven by the frame clock and ``spawn_tick`` by a separate
    wall-clock timer. Both run on the caller's thread; share an instance
    across threads only behind a lock.
    """

    def __init__(self, width: float = WIDTH, height: float = HEIGHT,
                 store: ScoreStore | None = None,
                 rng: random.Random | None = None):
        self.rng = rng or random.Random()
        self.store = store if store is not None else MemoryScoreStore()
        self.spawner = ObstacleSpawner(self.rng)
        self._build(width, height)

    def _build(self, width: float, height: float):
        if width <= 0:
            raise ValueError(f"viewport width must be positive, got {width}")
        if height <= GROUND_OFFSET:
            raise ValueError(f"viewport height must exceed {GROUND_OFFSET}, got {height}")

        self.world = World(width=width, height=height, ground_y=height - GROUND_OFFSET,
                           high_score=self.store.load())
        self.player = self._new_player()
        self.ground_obstacles: list[GroundObstacle] = []
        self.flying_obstacles: list[FlyingObstacle] = []

        self.ground_tiles: list[GroundTile] = []
        x = 0
        while x < width + GROUND_TILE_OVERSCAN:
            self.ground_tiles.append(GroundTile(x=x, width=self._tile_width()))
            x += GROUND_TILE_STEP
        self.clouds = [self._new_cloud(self.rng.random() * width) for _ in range(CLOUD_COUNT)]

    def _new_player(self) -> Player:
        return Player(x=PLAYER_X, y=ground_target(self.world.ground_y, Posture.STANDING))

    def _tile_width(self) -> float:
        wide = self.rng.random() < GROUND_TILE_WIDE_CHANCE
        return GROUND_TILE_WIDTHS[1] if wide else GROUND_TILE_WIDTHS[0]

    def _new_cloud(self, x: float) -> Cloud:
        return Cloud(x=x,
                     y=self.rng.uniform(*CLOUD_Y_RANGE),
                     width=self.rng.uniform(*CLOUD_WIDTH_RANGE),
                     speed=self.rng.uniform(*CLOUD_SPEED_RANGE))

    @property
    def phase(self) -> Phase:
        return self.world.phase

    def resize(self, width: float, height: float):
        """Viewport changed: throw the current game away and rebuild."""
        logger.info("Viewport is now %sx%s; re-initializing", width, height)
        self._build(width, height)

    # ---------- Intents ----------
    def handle(self, intent: Intent) -> bool:
        """Apply an input intent. Returns False when it does not apply right now."""
        handlers = {
            Intent.START: self.start,
            Intent.RESTART: self.restart,
            Intent.JUMP: self.jump,
            Intent.DUCK_PRESSED: self.duck,
            Intent.DUCK_RELEASED: self.stand,
        }
        return handlers[intent]()

    def start(self) -> bool:
        if self.world.phase is not Phase.NOT_STARTED:
            return False
        self.world.phase = Phase.RUNNING
        logger.info("Run started")
        return True

    def restart(self) -> bool:
        if self.world.phase is not Phase.GAME_OVER:
            return False
        w = self.world
        w.score = 0.0
        w.speed = INITIAL_SPEED
        w.frame_count = 0
        w.is_daytime = True
        w.cycle = 0
        self.player = self._new_player()
        self.ground_obstacles.clear()
        self.flying_obstacles.clear()
        w.phase = Phase.RUNNING
        logger.info("Run restarted (high score %d)", w.high_score)
        return True

    def jump(self) -> bool:
        p = self.player
        if self.world.phase is not Phase.RUNNING:
            return False
        if p.airborne or p.posture is Posture.DUCKING:
            return False
        p.vy = JUMP_FORCE
        p.airborne = True
        return True

    def duck(self) -> bool:
        if self.world.phase is not Phase.RUNNING:
            return False
        p = self.player
        p.posture = Posture.DUCKING
        if p.airborne:
            p.vy = FAST_FALL_VELOCITY
        self._settle()
        return True

    def stand(self) -> bool:
        p = self.player
        was_ducking = p.posture is Posture.DUCKING
        p.posture = Posture.STANDING
        self._settle()
        return was_ducking

    def _settle(self):
        # Posture changed: the floor may have moved under the player.
        p = self.player
        target = ground_target(self.world.ground_y, p.posture)
        if not p.airborne or p.y >= target:
            p.y = target
            if p.airborne:
                p.vy = 0.0
                p.airborne = False

    # ---------- Frame update ----------
    def update(self) -> Phase:
        w = self.world
        if w.phase is not Phase.RUNNING:
            return w.phase

        w.frame_count += 1
        w.score += SCORE_PER_FRAME
        self._update_lighting()
        self._update_speed()
        self._update_player()
        self._scroll()
        self._check_collisions()
        self._prune_obstacles()
        self._recycle_background()
        return w.phase

    def _update_lighting(self):
        w = self.world
        cycle = day_night_cycle(w.score)
        if cycle == w.cycle:
            return
        w.cycle = cycle
        daytime = cycle % 2 == 0
        if daytime != w.is_daytime:
            w.is_daytime = daytime
            logger.debug("Lighting -> %s at score %d", "day" if daytime else "night", w.score)

    def _update_speed(self):
        w = self.world
        speed = speed_for_score(w.score)
        if speed != w.speed:
            logger.debug("Speed %.1f -> %.1f", w.speed, speed)
            w.speed = speed

    def _update_player(self):
        p = self.player
        p.vy += GRAVITY
        p.y += p.vy

        target = ground_target(self.world.ground_y, p.posture)
        if p.y >= target:
            p.y = target
            p.vy = 0.0
            p.airborne = False

        if not p.airborne and self.world.frame_count % RUN_FRAME_CADENCE == 0:
            p.run_frame = (p.run_frame + 1) % 2

    def _scroll(self):
        w = self.world
        flap = w.frame_count % WING_FRAME_CADENCE == 0
        for ob in self.ground_obstacles:
            ob.x -= w.speed
        for bird in self.flying_obstacles:
            bird.x -= w.speed + FLYING_EXTRA_SPEED
            if flap:
                bird.wing_frame = (bird.wing_frame + 1) % 2

        for tile in self.ground_tiles:
            tile.x -= w.speed
        for cloud in self.clouds:
            cloud.x -= cloud.speed

    def _check_collisions(self):
        box = player_hitbox(self.player)
        for ob in chain(self.ground_obstacles, self.flying_obstacles):
            if box.overlaps(ob.box()):
                self._game_over()
                return

    def _game_over(self):
        w = self.world
        w.phase = Phase.GAME_OVER
        final = math.floor(w.score)
        logger.info("Game over at score %d", final)
        if final > w.high_score:
            w.high_score = final
            logger.info("New high score %d", final)
            try:
                self.store.save(final)
            except OSError:
                logger.exception("Could not persist high score %d", final)

    def _prune_obstacles(self):
        self.ground_obstacles[:] = [o for o in self.ground_obstacles if not o.off_screen]
        self.flying_obstacles[:] = [o for o in self.flying_obstacles if not o.off_screen]

    def _recycle_background(self):
        width = self.world.width
        for tile in self.ground_tiles:
            if tile.x + tile.width < 0:
                tile.x = width + self.rng.random() * GROUND_TILE_JITTER
        for cloud in self.clouds:
            if cloud.x + cloud.width < 0:
                cloud.x = width + self.rng.random() * CLOUD_JITTER
                cloud.y = self.rng.uniform(*CLOUD_Y_RANGE)

    # ---------- Spawning ----------
    def spawn_tick(self, delta_time: float = 0.0) -> Obstacle | None:
        """One attempt of the periodic spawner; a no-op outside a run."""
        w = self.world
        if w.phase is not Phase.RUNNING:
            return None
        ob = self.spawner.pick(w.score, self.ground_obstacles, self.flying_obstacles,
                               w.width, w.ground_y)
        if isinstance(ob, FlyingObstacle):
            self.flying_obstacles.append(ob)
        elif ob is not None:
            self.ground_obstacles.append(ob)
        if ob is not None:
            logger.debug("Spawned %s at y=%.0f", type(ob).__name__, ob.y)
        return ob

    # ---------- Read side ----------
    def snapshot(self) -> Snapshot:
        w = self.world
        return Snapshot(
            phase=w.phase,
            width=w.width,
            height=w.height,
            ground_y=w.ground_y,
            score=math.floor(w.score),
            high_score=w.high_score,
            speed=w.speed,
            is_daytime=w.is_daytime,
            frame_count=w.frame_count,
            player=replace(self.player),
            ground_obstacles=tuple(replace(o) for o in self.ground_obstacles),
            flying_obstacles=tuple(replace(o) for o in self.flying_obstacles),
            ground_tiles=tuple(replace(t) for t in self.ground_tiles),
            clouds=tuple(replace(c) for c in self.clouds),
        )
