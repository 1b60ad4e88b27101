# src/gridsnake/config.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

# ----- Grid -----
GRID_SIZE = 20

# ----- Window -----
CELL_SIZE = 24
HUD_HEIGHT = 40
WIDTH = GRID_SIZE * CELL_SIZE
HEIGHT = GRID_SIZE * CELL_SIZE + HUD_HEIGHT
FPS = 60

# ----- Colors -----
BG    = (243, 244, 246)
GRID  = (229, 231, 235)
HEAD  = (22, 163, 74)
BODY  = (74, 222, 128)
FOOD  = (249, 115, 22)
TEXT  = (31, 41, 55)
MUTED = (107, 114, 128)
WARN  = (202, 138, 4)
DEAD  = (220, 38, 38)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = {"up": UP, "down": DOWN, "left": LEFT, "right": RIGHT}

Cell = Tuple[int, int]


class Mode(str, Enum):
    BOUNDED = "bounded"     # leaving the grid is fatal
    TOROIDAL = "toroidal"   # leaving the grid wraps to the opposite edge


class GameStatus(str, Enum):
    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "gameOver"


# ----- Tunables -----
@dataclass(frozen=True)
class Config:
    grid_size: int = GRID_SIZE
    start: Cell = (10, 10)
    start_direction: Cell = RIGHT
    idle_food: Cell = (15, 15)
    food_reward: int = 10
    initial_speed_ms: int = 200
    speed_step_ms: int = 2
    min_speed_ms: int = 80
    mode: Mode = Mode.BOUNDED
    seed: Optional[int] = None
    food_attempts: Optional[int] = None   # None -> 4 * grid area

    def __post_init__(self):
        n = self.grid_size
        if n < 2:
            raise ValueError(f"grid_size must be >= 2, got {n}")
        for name in ("start", "idle_food"):
            x, y = getattr(self, name)
            if not (0 <= x < n and 0 <= y < n):
                raise ValueError(f"{name} {(x, y)} lies outside a {n}x{n} grid")
        if self.start_direction not in DIRECTIONS.values():
            raise ValueError(f"start_direction must be a unit direction, got {self.start_direction}")
        if self.min_speed_ms <= 0 or self.initial_speed_ms < self.min_speed_ms:
            raise ValueError("speeds must satisfy 0 < min_speed_ms <= initial_speed_ms")
        if self.speed_step_ms < 0 or self.food_reward < 0:
            raise ValueError("speed_step_ms and food_reward must be non-negative")

    @property
    def max_food_attempts(self) -> int:
        if self.food_attempts is not None:
            return self.food_attempts
        return 4 * self.grid_size * self.grid_size


CFG = Config()
