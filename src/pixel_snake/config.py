# config.py
from __future__ import annotations
from dataclasses import dataclass
import os

# ----- Window & grid -----
GRID_SIZE = 32                  # border ring included
CELL_SIZE = 20
HUD_HEIGHT = 64
BOARD_PX = GRID_SIZE * CELL_SIZE
WIDTH, HEIGHT = BOARD_PX, BOARD_PX + HUD_HEIGHT
START_LENGTH = 3

# ----- Colors -----
BG          = (11, 16, 32)
GRID        = (17, 26, 47)
BORDER      = (75, 85, 99)
SNAKE_BODY  = (22, 163, 74)
SNAKE_ALT   = (34, 197, 94)
SNAKE_HEAD  = (187, 247, 208)
EYE         = (15, 23, 42)
FOOD_A      = (249, 115, 22)
FOOD_B      = (251, 113, 133)
TEXT        = (248, 250, 252)
TEXT_MUTED  = (203, 213, 225)
OVERLAY     = (4, 10, 20, 189)   # RGBA
POWER_SLOW  = (96, 165, 250)
POWER_DOUBLE = (250, 204, 21)
POWER_BLINK = (255, 255, 255)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)
OPPOSITE = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT}

# ----- Speed & levels -----
TICK_BASE = 6
TICK_CAP = 15
TICK_PER_LEVEL = 0.7
LEVEL_EVERY = 4

# ----- Power-ups -----
SLOW = "slow"
DOUBLE = "double"
POWERUP_KINDS = (SLOW, DOUBLE)
POWERUP_WINDOW_MIN = 20_000     # ms
POWERUP_WINDOW_MAX = 30_000
POWERUP_TTL_MS = 7_000
SLOW_DURATION_MS = 5_000
SLOW_PENALTY = 2.5
SLOW_FLOOR = 3
DOUBLE_FOODS = 3

# ----- Leaderboard -----
LEADERBOARD_SIZE = 5


# ----- Tunables (what you'd pass on the command line) -----
@dataclass
class Config:
    seed: int | None = None
    scores_dir: str = os.path.join(os.path.expanduser("~"), ".pixel_snake")
    fps: int = 60
    mode: str = "classic"
    log_level: str = "INFO"
