"""Game constants and the settings record built from them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


# Window configuration -----------------------------------------------------
GAME_WIDTH = 800
GAME_HEIGHT = 600
FPS = 60
TICK_MS = 1000.0 / FPS
MAX_FRAME_MS = 50
CAPTION = "Flappy Arcade"
FONT_SIZE = 28


# Bird physics -------------------------------------------------------------
GRAVITY = 900.0
FLAP_VELOCITY = -320.0
BIRD_START = (160, 220)
BIRD_SIZE = (51, 36)
TILT_RANGE = (-25.0, 50.0)
TILT_DIVISOR = 8.0
IDLE_BOB_PERIOD_MS = 220.0
IDLE_BOB_AMPLITUDE = 0.15


# Ground -------------------------------------------------------------------
GROUND_CENTER_Y = 568
GROUND_HEIGHT = 64


# Pipe configuration -------------------------------------------------------
PIPE_SPEED = 220.0
PIPE_GAP = 170
PIPE_SPAWN_MS = 1400
PIPE_SIZE = (64, 400)
PIPE_SPAWN_X = GAME_WIDTH + 80
GAP_CENTER_RANGE = (170, 420)
PIPE_CULL_X = -120
SCORE_ZONE_OFFSET = 30
SCORE_ZONE_WIDTH = 10


# Messages -----------------------------------------------------------------
IDLE_MESSAGE = "Click to start\nSPACE to flap"
GAME_OVER_MESSAGE = "Game Over!\nClick to restart"


# Colours ------------------------------------------------------------------
SKY_BLUE = (138, 202, 234)
DEEP_BLUE = (69, 146, 196)
BASE_BROWN = (222, 161, 94)
BASE_STRIPE = (205, 148, 89)
GRASS_GREEN = (115, 191, 46)
BIRD_YELLOW = (255, 240, 0)
WING_ORANGE = (255, 200, 0)
BEAK_ORANGE = (250, 120, 30)
PIPE_GREEN = (99, 201, 70)
PIPE_DARK_GREEN = (89, 178, 62)
DEATH_TINT = (255, 68, 68)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


@dataclass(frozen=True)
class GameSettings:
    """Tunable values for one game session.

    Every field defaults to the module constant of the same meaning, so
    ``GameSettings()`` is the stock game.  Tests swap single values, e.g.
    ``GameSettings(gravity=0.0)`` for a bird that never falls.
    """

    width: int = GAME_WIDTH
    height: int = GAME_HEIGHT
    gravity: float = GRAVITY
    flap_velocity: float = FLAP_VELOCITY
    bird_start: Tuple[int, int] = BIRD_START
    bird_size: Tuple[int, int] = BIRD_SIZE
    ground_center_y: int = GROUND_CENTER_Y
    ground_height: int = GROUND_HEIGHT
    pipe_speed: float = PIPE_SPEED
    pipe_gap: int = PIPE_GAP
    pipe_size: Tuple[int, int] = PIPE_SIZE
    spawn_interval_ms: int = PIPE_SPAWN_MS
    spawn_x: int = PIPE_SPAWN_X
    gap_center_range: Tuple[int, int] = GAP_CENTER_RANGE
    cull_x: int = PIPE_CULL_X
    score_zone_offset: int = SCORE_ZONE_OFFSET
    score_zone_width: int = SCORE_ZONE_WIDTH
    tick_ms: float = TICK_MS
    tilt_divisor: float = TILT_DIVISOR
    tilt_range: Tuple[float, float] = TILT_RANGE
    idle_bob_period_ms: float = IDLE_BOB_PERIOD_MS
    idle_bob_amplitude: float = IDLE_BOB_AMPLITUDE

    def __post_init__(self) -> None:
        low, high = self.gap_center_range
        if low > high:
            raise ValueError(f"gap_center_range is empty: {self.gap_center_range}")
        if self.spawn_interval_ms <= 0:
            raise ValueError(f"spawn_interval_ms must be positive, got {self.spawn_interval_ms}")
        if self.pipe_gap <= 0:
            raise ValueError(f"pipe_gap must be positive, got {self.pipe_gap}")
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
