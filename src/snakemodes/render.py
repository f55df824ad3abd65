# render.py
from typing import Tuple

import pygame  # type: ignore

from .config import (
    CELL_SIZE, WIDTH, HEIGHT, HUD_HEIGHT,
    BOARD_COLOR, BRICK_COLOR, SNAKE_COLOR, SNAKE_HEAD_COLOR,
    FOOD_COLOR, PORTAL_COLOR, TEXT,
)
from .engine import Phase, Scene
from .modes import Mode

MODE_KEYS = {
    Mode.CLASSIC: "1",
    Mode.GOD: "2",
    Mode.WALLS: "3",
    Mode.PORTAL: "4",
    Mode.SPEED: "5",
}


# ---------- Helpers ----------
def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(gx * CELL_SIZE, HUD_HEIGHT + gy * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, color, rect)


def draw_border(screen: pygame.Surface) -> None:
    rect = pygame.Rect(0, HUD_HEIGHT, WIDTH, HEIGHT)
    pygame.draw.rect(screen, BRICK_COLOR, rect, width=CELL_SIZE)


# ---------- Frames ----------
def draw_scene(screen: pygame.Surface, font: pygame.font.Font, scene: Scene) -> None:
    """Draw one frame from a scene snapshot. Hidden foods are skipped."""
    screen.fill(BOARD_COLOR)
    draw_border(screen)

    for x, y in scene.bricks:
        draw_cell(screen, x, y, BRICK_COLOR)
    for food in scene.foods:
        if food.shown:
            draw_cell(screen, food.cell[0], food.cell[1], PORTAL_COLOR if food.is_portal else FOOD_COLOR)
    for x, y in scene.snake[1:]:
        draw_cell(screen, x, y, SNAKE_COLOR)
    if scene.snake:
        draw_cell(screen, scene.head[0], scene.head[1], SNAKE_HEAD_COLOR)

    hud = font.render(
        f"Score: {scene.score}   Best: {scene.best_score}   Mode: {scene.mode.name.lower()}",
        True, TEXT,
    )
    screen.blit(hud, (8, 10))

    if scene.phase is Phase.GAME_OVER:
        draw_game_over(screen, font, scene.score)


def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, score: int) -> None:
    overlay = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, HUD_HEIGHT))

    title = font.render("GAME OVER", True, (240, 240, 250))
    sub = font.render("M for menu", True, TEXT)
    sco = font.render(f"Score: {score}", True, TEXT)

    mid_y = HUD_HEIGHT + HEIGHT // 2
    screen.blit(title, title.get_rect(center=(WIDTH // 2, mid_y - 16)))
    screen.blit(sub, sub.get_rect(center=(WIDTH // 2, mid_y + 16)))
    screen.blit(sco, sco.get_rect(center=(WIDTH // 2, mid_y + 44)))


def draw_menu(screen: pygame.Surface, font: pygame.font.Font, selected: Mode, best_score: int) -> None:
    screen.fill(BOARD_COLOR)
    draw_border(screen)

    lines = ["SNAKE", "", "Enter: play    Esc: exit", ""]
    for mode, key in MODE_KEYS.items():
        marker = ">" if mode is selected else " "
        lines.append(f"{marker} {key}  {mode.name.lower()}")
    lines += ["", f"Best: {best_score}"]

    y = HUD_HEIGHT + HEIGHT // 4
    for line in lines:
        txt = font.render(line, True, TEXT)
        screen.blit(txt, txt.get_rect(center=(WIDTH // 2, y)))
        y += 28
