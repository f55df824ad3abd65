# env.py
from __future__ import annotations

from dataclasses import dataclass
import logging

import numpy as np  # type: ignore
import pygame       # type: ignore

from .config import CFG, BOARD_SIZE, WIDTH, HEIGHT, HUD_HEIGHT, UP, DOWN, LEFT, RIGHT
from .engine import GameEngine, Phase
from .modes import Mode
from .render import draw_scene

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Actions: integers -> grid directions (dx, dy)
# -----------------------------------------------------------------------------
ACTIONS = {
    0: UP,
    1: DOWN,
    2: LEFT,
    3: RIGHT,
}


# -----------------------------------------------------------------------------
# Headless driver
# -----------------------------------------------------------------------------
@dataclass
class SnakeEnv:
    """
    Gym-like wrapper that drives a GameEngine without a window.

    One step() forwards a direction and ticks until the snake has moved a
    cell or the game has ended. The observation is the scene's occupancy
    grid (see Scene.to_grid).

    Rewards:
      + points scored during the step
      + death_reward on game over
    """
    mode: Mode = Mode.CLASSIC
    seed_value: int = CFG.seed
    death_reward: float = -1.0
    render_enabled: bool = False

    def __post_init__(self):
        self.engine: GameEngine | None = None

        # --- Rendering state (pygame) ---
        self.screen = None
        self.font = None
        self.clock = None

        if self.render_enabled:
            pygame.init()
            self.screen = pygame.display.set_mode((WIDTH, HEIGHT + HUD_HEIGHT))
            pygame.display.set_caption("Snake (headless driver)")
            self.font = pygame.font.SysFont(None, 28)
            self.clock = pygame.time.Clock()

    # Gym-like API -------------------------------------------------------------
    def reset(self, seed: int | None = None) -> np.ndarray:
        """
        Start a new game in `mode` on the same engine. A given seed reseeds
        its RNG. Returns the initial observation.
        """
        if self.engine is None:
            self.engine = GameEngine(seed=self.seed_value if seed is None else seed)
        elif seed is not None:
            self.engine.rng.seed(seed)
        self.engine.select_mode(self.mode)
        self.engine.start()
        self.engine.drain_events()
        return self.engine.scene().to_grid()

    def step(self, action: int):
        """
        Apply an action (0..3), tick until one move happens, and return:
          (obs, reward, terminated, info)
        """
        if self.engine is None:
            raise RuntimeError("Call reset() first.")
        if action not in ACTIONS:
            raise ValueError(f"Invalid action {action}")

        engine = self.engine
        if engine.phase is not Phase.PLAYING:
            return self._result(0.0, True)

        engine.switch_direction(*ACTIONS[action])
        score_before = engine.score
        snake = engine.snake

        ticks = 0
        while True:
            if not engine.tick():
                return self._result(self.death_reward, True)
            ticks += 1
            if snake.move_counter == 0:  # reset only by a move
                break

        logger.debug("Moved after %d tick(s), head=%s", ticks, snake.head)
        return self._result(float(engine.score - score_before), False)

    def _result(self, reward: float, terminated: bool):
        engine = self.engine
        info = {
            "score": engine.score,
            "best_score": engine.best_score,
            "size": engine.snake.size,
        }
        if terminated:
            info["reason"] = "game_over"
        return engine.scene().to_grid(), reward, terminated, info

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------
    def render(self) -> None:
        if not self.render_enabled or self.engine is None or self.screen is None:
            return
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit()
                raise SystemExit

        draw_scene(self.screen, self.font, self.engine.scene())
        pygame.display.flip()
        if self.clock is not None:
            self.clock.tick(15)

    def close(self) -> None:
        if self.render_enabled:
            pygame.quit()

    @property
    def action_space_n(self) -> int:
        return len(ACTIONS)

    @property
    def observation_space_shape(self):
        n = self.engine.board.size if self.engine is not None else BOARD_SIZE
        return (n, n)

