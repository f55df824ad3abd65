from __future__ import annotations

from dataclasses import dataclass
import logging
import random
from typing import Callable, Iterable, Optional

from .board import Cell
from .config import BOARD_SIZE, CFG, FOOD_MARGIN
from .snake import Snake

logger = logging.getLogger(__name__)

ORIGIN: Cell = (0, 0)


def sample_free_cell(
    rng: random.Random,
    is_blocked: Callable[[Cell], bool],
    margin: int = FOOD_MARGIN,
    board_size: int = BOARD_SIZE,
    max_attempts: int = CFG.max_spawn_attempts,
) -> Optional[Cell]:
    """
    Pick a random cell clamped into [margin, board_size - margin] that is not
    blocked. Rejection-samples up to `max_attempts` times, then scans every
    eligible cell. Returns None when the clamped area is full.
    """
    lo, hi = margin, board_size - margin

    def clamp(v: int) -> int:
        return min(max(v, lo), hi)

    for _ in range(max_attempts):
        cell = (clamp(rng.randrange(board_size)), clamp(rng.randrange(board_size)))
        if not is_blocked(cell):
            return cell

    free = [
        (x, y)
        for x in range(lo, hi + 1)
        for y in range(lo, hi + 1)
        if not is_blocked((x, y))
    ]
    if not free:
        return None
    return rng.choice(free)


class Food:
    """
    A collectible cell. The portal food is created with a link to the
    primary food it pairs with.
    """

    def __init__(self, linked: Optional["Food"] = None):
        self.linked = linked
        self.cell: Cell = ORIGIN
        self.shown = False

    @property
    def is_portal(self) -> bool:
        return self.linked is not None

    def spawn(
        self,
        snake: Snake,
        rng: random.Random,
        margin: int = FOOD_MARGIN,
        avoid: Iterable[Cell] = (),
        max_attempts: int = CFG.max_spawn_attempts,
    ) -> bool:
        """
        Move to a random cell off the snake and off `avoid`. Keeps the
        old cell when nothing is free.
        """
        self.shown = True
        taken = set(avoid)

        def blocked(cell: Cell) -> bool:
            return cell in taken or snake.occupies(cell)

        cell = sample_free_cell(
            rng,
            blocked,
            margin=margin,
            board_size=snake.board.size,
            max_attempts=max_attempts,
        )
        if cell is None:
            logger.warning("No free cell for food; keeping %s", self.cell)
            return False
        self.cell = cell
        logger.debug("Food spawned at %s (portal=%s)", cell, self.is_portal)
        return True

    def hide(self) -> None:
        self.shown = False
        self.cell = ORIGIN


@dataclass(frozen=True)
class Brick:
    cell: Cell

    @classmethod
    def spawn(
        cls,
        snake: Snake,
        food: Food,
        bricks: Iterable["Brick"],
        rng: random.Random,
        max_attempts: int = CFG.max_spawn_attempts,
    ) -> Optional["Brick"]:
        """Place a brick off the snake, the food and every existing brick."""
        taken = {b.cell for b in bricks}
        taken.add(food.cell)

        def blocked(cell: Cell) -> bool:
            return cell in taken or snake.occupies(cell)

        cell = sample_free_cell(
            rng,
            blocked,
            margin=FOOD_MARGIN,
            board_size=snake.board.size,
            max_attempts=max_attempts,
        )
        if cell is None:
            logger.warning("No free cell for a brick; skipping")
            return None
        logger.debug("Brick placed at %s", cell)
        return cls(cell)
