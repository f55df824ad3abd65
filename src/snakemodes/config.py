from dataclasses import dataclass

# ----- Board & window -----
BOARD_SIZE = 20
CELL_SIZE = 30
WIDTH = HEIGHT = BOARD_SIZE * CELL_SIZE
HUD_HEIGHT = 40

# ----- Colors -----
BOARD_COLOR = (87, 87, 87)
BRICK_COLOR = (169, 106, 14)
SNAKE_COLOR = (184, 185, 40)
SNAKE_HEAD_COLOR = (244, 242, 245)
FOOD_COLOR = (39, 134, 93)
PORTAL_COLOR = (7, 100, 163)
TEXT = (220, 220, 230)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# ----- Snake -----
INIT_SNAKE_SIZE = 3
INIT_SPEED = 12      # ticks per move
SPEED_STEP = 0.1

# Food is clamped into [k, BOARD_SIZE - k]
FOOD_MARGIN = 2
PORTAL_FOOD_MARGIN = 3


# ----- Tunables -----
@dataclass
class Config:
    seed: int = 0
    fps: int = 60
    max_spawn_attempts: int = 1000
    min_speed: float = 1.0

CFG = Config(seed=0)
