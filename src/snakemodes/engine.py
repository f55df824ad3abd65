# engine.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
import random
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np  # type: ignore

from .board import Board, Cell
from .config import CFG, Config
from .food import Brick, Food
from .modes import Mode, ModeRules, parse_mode, rules_for
from .snake import Snake

logger = logging.getLogger(__name__)


class Phase(Enum):
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class GameEvent(Enum):
    STARTED = "started"
    SCORE_CHANGED = "score_changed"
    GAME_OVER = "game_over"
    MENU = "menu"
    EXITED = "exited"


# ---------- Scene (read-only view for renderers) ----------
EMPTY, BODY, HEAD, FOOD, PORTAL, BRICK = range(6)


@dataclass(frozen=True)
class FoodView:
    cell: Cell
    shown: bool
    is_portal: bool


@dataclass(frozen=True)
class Scene:
    snake: Tuple[Cell, ...]          # head first
    foods: Tuple[FoodView, ...]
    bricks: Tuple[Cell, ...]
    score: int
    best_score: int
    mode: Mode
    phase: Phase
    board_size: int

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    def to_grid(self) -> np.ndarray:
        """
        Rasterise the scene into a (board_size, board_size) int8 array
        indexed [y, x]. Later layers win: bricks, foods, body, head.
        """
        n = self.board_size
        grid = np.full((n, n), EMPTY, dtype=np.int8)

        def put(cell: Cell, code: int) -> None:
            x, y = cell
            if 0 <= x < n and 0 <= y < n:
                grid[y, x] = code

        for cell in self.bricks:
            put(cell, BRICK)
        for food in self.foods:
            if food.shown:
                put(food.cell, PORTAL if food.is_portal else FOOD)
        for cell in self.snake[1:]:
            put(cell, BODY)
        if self.snake:
            put(self.snake[0], HEAD)
        return grid


# ---------- Engine ----------
class GameEngine:
    """
    Owns one game session: snake, both foods, bricks and score.

    Input handlers (switch_direction, select_mode) only record intent; all
    entity state changes happen inside tick().
    """

    def __init__(
        self,
        board: Optional[Board] = None,
        cfg: Config = CFG,
        seed: Optional[int] = None,
    ):
        self.board = board or Board()
        self.cfg = cfg
        self.rng = random.Random(cfg.seed if seed is None else seed)

        self.selected_mode = Mode.CLASSIC
        self.mode = Mode.CLASSIC
        self.phase = Phase.MENU

        self.score = 0
        self.best_score = 0
        self.foot_counter = 0

        self.snake = Snake(self.board)
        self.food = Food()
        self.portal_food = Food(linked=self.food)
        self.bricks: List[Brick] = []
        self._events: List[GameEvent] = []

    @property
    def rules(self) -> ModeRules:
        return rules_for(self.mode)

    @property
    def teleport_armed(self) -> bool:
        return self.foot_counter > 0 or self.snake.teleport_offset is not None

    # ----- input -----
    def switch_direction(self, dx: int, dy: int) -> bool:
        return self.snake.switch_direction(dx, dy)

    def select_mode(self, value) -> bool:
        """Pick the mode for the next session. Unknown values are ignored."""
        mode = parse_mode(value)
        if mode is None:
            logger.warning("Ignoring unknown mode %r; keeping %s", value, self.selected_mode.name)
            return False
        self.selected_mode = mode
        return True

    # ----- lifecycle -----
    def start(self) -> None:
        self.mode = self.selected_mode
        self.reset()
        self.phase = Phase.PLAYING
        self._events.append(GameEvent.STARTED)
        logger.info("Game started in %s mode", self.mode.name)

    def reset(self) -> None:
        self.score = 0
        self._update_score()
        self.foot_counter = 0

        self.snake.reset()
        self._spawn_food(self.food)
        if self.rules.portal:
            self._spawn_food(self.portal_food)
        else:
            self.portal_food.hide()
        self.bricks = []

    def game_over(self) -> None:
        if self.phase is not Phase.PLAYING:
            return
        self.phase = Phase.GAME_OVER
        self._events.append(GameEvent.GAME_OVER)
        logger.info("Game over: score=%d best=%d", self.score, self.best_score)

    def show_menu(self) -> None:
        if self.phase is Phase.MENU:
            return
        self.phase = Phase.MENU
        self._events.append(GameEvent.MENU)

    def exit(self) -> None:
        """Reset the session and forget the best score."""
        self.mode = self.selected_mode
        self.reset()
        self.best_score = 0
        self.phase = Phase.MENU
        self._events.append(GameEvent.EXITED)
        logger.info("Session exited; best score cleared")

    def drain_events(self) -> List[GameEvent]:
        events, self._events = self._events, []
        return events

    # ----- terminal checks -----
    def fell_out(self) -> bool:
        return self.rules.checks_bounds and not self.board.is_in_bounds(self.snake.head)

    def bitten(self) -> bool:
        return self.rules.checks_self and self.snake.bit_itself()

    def crashed(self) -> bool:
        if not self.rules.checks_bricks:
            return False
        head = self.snake.head
        return any(brick.cell == head for brick in self.bricks)

    def ate(self) -> Optional[Food]:
        head = self.snake.head
        if self.food.shown and self.food.cell == head:
            return self.food
        if self.rules.portal and self.portal_food.shown and self.portal_food.cell == head:
            return self.portal_food
        return None

    # ----- per-frame step -----
    def tick(self) -> bool:
        """Advance one frame. Returns False once the game is not running."""
        if self.phase is not Phase.PLAYING:
            return False

        if self.fell_out() or self.bitten() or self.crashed():
            self.game_over()
            return False

        if self.snake.move():
            self._after_move()
            eaten = self.ate()
            if eaten is not None:
                self._consume(eaten)

        if self.rules.wraps:
            self.snake.wrap_around()
        return True

    def _after_move(self) -> None:
        if not self.rules.portal or self.foot_counter == 0:
            return
        self.foot_counter -= 1
        if self.foot_counter == 0:
            self._spawn_food(self.food)
            self._spawn_food(self.portal_food)

    def _consume(self, eaten: Food) -> None:
        self.snake.grow()
        if self.foot_counter == 0:
            self.score += 1
        self._update_score()
        ON_EAT[self.mode](self, eaten)

    def _update_score(self) -> None:
        if self.score > self.best_score:
            self.best_score = self.score
        self._events.append(GameEvent.SCORE_CHANGED)

    def _spawn_food(self, food: Food) -> bool:
        avoid = [brick.cell for brick in self.bricks]
        if food.is_portal:
            avoid.append(self.food.cell)
        elif self.portal_food.shown:
            avoid.append(self.portal_food.cell)
        return food.spawn(
            self.snake,
            self.rng,
            margin=self.rules.food_margin,
            avoid=avoid,
            max_attempts=self.cfg.max_spawn_attempts,
        )

    # ----- output -----
    def scene(self) -> Scene:
        return Scene(
            snake=tuple(self.snake.body),
            foods=tuple(
                FoodView(f.cell, f.shown, f.is_portal)
                for f in (self.food, self.portal_food)
            ),
            bricks=tuple(b.cell for b in self.bricks),
            score=self.score,
            best_score=self.best_score,
            mode=self.mode,
            phase=self.phase,
            board_size=self.board.size,
        )


# ---------- Per-mode effects of eating ----------
def _respawn(engine: GameEngine, eaten: Food) -> None:
    engine._spawn_food(engine.food)


def _on_eat_walls(engine: GameEngine, eaten: Food) -> None:
    brick = Brick.spawn(
        engine.snake,
        engine.food,
        engine.bricks,
        engine.rng,
        max_attempts=engine.cfg.max_spawn_attempts,
    )
    if brick is not None:
        engine.bricks.append(brick)
    _respawn(engine, eaten)


def _on_eat_speed(engine: GameEngine, eaten: Food) -> None:
    engine.snake.speed_up(engine.cfg.min_speed)
    _respawn(engine, eaten)


def _on_eat_portal(engine: GameEngine, eaten: Food) -> None:
    # Foods stay put until the tail has passed through the jump
    if engine.teleport_armed:
        return
    other = engine.portal_food if eaten is engine.food else engine.food
    engine.foot_counter = engine.snake.size
    engine.snake.teleport_offset = (
        other.cell[0] - eaten.cell[0],
        other.cell[1] - eaten.cell[1],
    )
    logger.debug("Teleport armed %s -> %s", eaten.cell, other.cell)


ON_EAT: Dict[Mode, Callable[[GameEngine, Food], None]] = {
    Mode.CLASSIC: _respawn,
    Mode.GOD: _respawn,
    Mode.WALLS: _on_eat_walls,
    Mode.SPEED: _on_eat_speed,
    Mode.PORTAL: _on_eat_portal,
}
