import math

import pytest

from snakemodes.engine import GameEngine
from snakemodes.modes import Mode

FOOD_PARK = (3, 3)
PORTAL_PARK = (3, 16)


@pytest.fixture
def force_move():
    def _force(engine: GameEngine) -> bool:
        """Prime the move counter so the next tick advances the snake."""
        engine.snake.move_counter = math.ceil(engine.snake.speed) - 1
        return engine.tick()
    return _force


@pytest.fixture
def make_engine():
    def _make(mode: Mode = Mode.CLASSIC, seed: int = 7) -> GameEngine:
        engine = GameEngine(seed=seed)
        engine.select_mode(mode)
        engine.start()
        # Food parked at (3, 3), portal food at (3, 16), away from the snake
        engine.food.cell = FOOD_PARK
        if engine.portal_food.shown:
            engine.portal_food.cell = PORTAL_PARK
        engine.drain_events()
        return engine
    return _make
