# settings.py
from pathlib import Path

WIDTH, HEIGHT = 800, 300
TITLE = "Dino Runner"

# Ground line sits this far above the bottom of the viewport
GROUND_OFFSET = 50

# Speed progression
INITIAL_SPEED = 8.0
MAX_SPEED = 20.0
SPEED_STEP = 0.5
SPEED_SCORE_STEP = 100

# Physics (logical units per frame, y grows downward)
GRAVITY = 0.6
JUMP_FORCE = -13.0
FAST_FALL_VELOCITY = 10.0

SCORE_PER_FRAME = 0.15
DAY_NIGHT_INTERVAL = 700

# Player
PLAYER_X = 80
STAND_SIZE = (44, 48)
DUCK_SIZE = (58, 28)
HITBOX_INSET = 5
RUN_FRAME_CADENCE = 6

# Obstacles
CACTUS_TYPES = (
    (20, 40),   # small
    (25, 50),   # medium
    (35, 55),   # large
    (50, 45),   # double
)
BIRD_SIZE = (46, 32)
BIRD_HEIGHTS = (80, 50, 120)   # above the ground line: low, ground level, high
FLYING_EXTRA_SPEED = 2.0
WING_FRAME_CADENCE = 8

# Spawner
SPAWN_INTERVAL = 0.8           # seconds, wall clock
FLYING_UNLOCK_SCORE = 200
FLYING_CHANCE = 0.25
GROUND_CHANCE = 0.6
MAX_GROUND_OBSTACLES = 3
MIN_GROUND_SPACING = 200

# Background
GROUND_TILE_STEP = 20
GROUND_TILE_OVERSCAN = 100
GROUND_TILE_WIDTHS = (5, 15)
GROUND_TILE_WIDE_CHANCE = 0.3
GROUND_TILE_JITTER = 20
CLOUD_COUNT = 4
CLOUD_WIDTH_RANGE = (40.0, 80.0)
CLOUD_Y_RANGE = (20.0, 100.0)
CLOUD_SPEED_RANGE = (0.5, 1.0)
CLOUD_JITTER = 100

# Input
TOUCH_DUCK_ZONE = 0.4          # lower share of the viewport that ducks on touch

# HUD / persistence
SCORE_DIGITS = 5
HIGH_SCORE_FILE = Path.home() / ".dino_runner" / "highscore.json"

# Colors (RGBA)
DAY_BG = (247, 247, 247, 255)
DAY_FG = (83, 83, 83, 255)
DAY_CLOUD = (224, 224, 224, 255)
NIGHT_BG = (26, 26, 46, 255)
NIGHT_FG = (224, 224, 224, 255)
NIGHT_CLOUD = (42, 42, 78, 255)
