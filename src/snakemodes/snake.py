from __future__ import annotations

from typing import List, Optional, Tuple

from .board import Board, Cell
from .config import CFG, DIRECTIONS, INIT_SNAKE_SIZE, INIT_SPEED, RIGHT, SPEED_STEP

Vector = Tuple[int, int]


def is_opposite(a: Vector, b: Vector) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


class Snake:
    """
    Ordered body cells, head at index 0.

    Movement is gated by `speed`: every call to move() is one tick, and the
    snake only advances a cell once `speed` ticks have accumulated.
    """

    def __init__(self, board: Board):
        self.board = board
        self.body: List[Cell] = []
        self.direction: Vector = RIGHT
        self.pending: Vector = RIGHT
        self.speed: float = INIT_SPEED
        self.move_counter = 0
        self.growing = False
        self.size = INIT_SNAKE_SIZE
        self.teleport_offset: Optional[Vector] = None
        self.reset()

    def reset(self) -> None:
        cx, cy = self.board.center
        self.body = [(cx - i, cy) for i in range(INIT_SNAKE_SIZE)]
        self.size = INIT_SNAKE_SIZE
        self.direction = RIGHT
        self.pending = RIGHT
        self.speed = INIT_SPEED
        self.move_counter = 0
        self.growing = False
        self.teleport_offset = None

    @property
    def head(self) -> Cell:
        return self.body[0]

    def switch_direction(self, dx: int, dy: int) -> bool:
        """Queue a turn for the next move. 180° turns are rejected."""
        cand = (dx, dy)
        if cand not in DIRECTIONS or is_opposite(cand, self.direction):
            return False
        self.pending = cand
        return True

    def move(self) -> bool:
        """Count one tick; return True if the snake advanced a cell."""
        self.move_counter += 1
        if self.move_counter < self.speed:
            return False
        self.move_counter = 0

        # Commit direction once per move
        self.direction = self.pending
        kx, ky = self.teleport_offset or (0, 0)
        self.teleport_offset = None

        hx, hy = self.head
        dx, dy = self.direction
        self.body.insert(0, (hx + dx + kx, hy + dy + ky))

        if self.growing:
            self.growing = False
            self.size += 1
        else:
            self.body.pop()
        return True

    def grow(self) -> None:
        self.growing = True

    def speed_up(self, min_speed: float = CFG.min_speed) -> None:
        self.speed = max(min_speed, self.speed - self.speed * SPEED_STEP)

    def wrap_around(self) -> None:
        self.body[0] = self.board.wrap(self.head)

    def occupies(self, cell: Cell) -> bool:
        return cell in self.body

    def bit_itself(self) -> bool:
        return self.head in self.body[1:]
