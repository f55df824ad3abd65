# main.py
import argparse
import logging

import pygame  # type: ignore

from .config import CFG, WIDTH, HEIGHT, HUD_HEIGHT, UP, DOWN, LEFT, RIGHT
from .engine import GameEngine, GameEvent, Phase
from .modes import Mode
from .render import MODE_KEYS, draw_menu, draw_scene

ARROWS = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}
DIGITS = {getattr(pygame, f"K_{key}"): mode for mode, key in MODE_KEYS.items()}


class TickDriver:
    """On/off switch for the frame loop's calls into the engine."""

    def __init__(self):
        self.running = False

    def start(self) -> None:
        self.running = True

    def stop(self) -> None:
        self.running = False

    def follow(self, events) -> None:
        for event in events:
            if event is GameEvent.STARTED:
                self.start()
            elif event in (GameEvent.GAME_OVER, GameEvent.MENU, GameEvent.EXITED):
                self.stop()


def handle_input(engine: GameEngine) -> bool:
    """Forward keys to the engine. Return False to quit."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type != pygame.KEYDOWN:
            continue

        if event.key in ARROWS:
            engine.switch_direction(*ARROWS[event.key])
        elif engine.phase is Phase.MENU:
            if event.key in DIGITS:
                engine.select_mode(DIGITS[event.key])
            elif event.key in (pygame.K_RETURN, pygame.K_SPACE):
                engine.start()
            elif event.key == pygame.K_ESCAPE:
                engine.exit()
        elif event.key == pygame.K_m:
            engine.show_menu()
    return True


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--mode", type=str, default="classic", help="classic, god, walls, portal or speed")
    parser.add_argument("--seed", type=int, default=CFG.seed)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    engine = GameEngine(seed=args.seed)
    if not engine.select_mode(args.mode):
        print(f"Unknown mode {args.mode!r}, starting in {Mode.CLASSIC.name.lower()}")
    driver = TickDriver()

    pygame.init()
    font = pygame.font.SysFont(None, 28)
    screen = pygame.display.set_mode((WIDTH, HEIGHT + HUD_HEIGHT))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    running = True
    while running:
        # 1) input
        running = handle_input(engine)
        if not running:
            break
        driver.follow(engine.drain_events())

        # 2) update
        if driver.running:
            engine.tick()
            driver.follow(engine.drain_events())

        # 3) render
        if engine.phase is Phase.MENU:
            draw_menu(screen, font, engine.selected_mode, engine.best_score)
        else:
            draw_scene(screen, font, engine.scene())
        pygame.display.flip()
        clock.tick(CFG.fps)  # movement gated inside the engine by snake speed

    pygame.quit()
    print(f"Best score this session: {engine.best_score}")


if __name__ == "__main__":
    main()
