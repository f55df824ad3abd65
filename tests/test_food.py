import random

from snakemodes.board import Board
from snakemodes.food import Brick, Food, sample_free_cell
from snakemodes.snake import Snake


def _long_snake() -> Snake:
    """A snake covering rows 4..8 of a 20x20 board (under half the area)."""
    snake = Snake(Board(20))
    snake.body = [(x, y) for y in range(4, 9) for x in range(20)]
    return snake


def test_food_never_spawns_on_snake() -> None:
    rng = random.Random(1)
    snake = _long_snake()
    food = Food()
    for _ in range(1000):
        assert food.spawn(snake, rng)
        assert food.shown
        assert not snake.occupies(food.cell)
        assert 2 <= food.cell[0] <= 18 and 2 <= food.cell[1] <= 18


def test_portal_margin_is_wider() -> None:
    rng = random.Random(2)
    snake = Snake(Board(20))
    food = Food()
    for _ in range(500):
        food.spawn(snake, rng, margin=3)
        assert 3 <= food.cell[0] <= 17 and 3 <= food.cell[1] <= 17


def test_food_avoids_extra_cells() -> None:
    rng = random.Random(3)
    snake = Snake(Board(20))
    food = Food()
    avoid = [(x, y) for x in range(2, 19) for y in range(2, 18)]
    assert food.spawn(snake, rng, avoid=avoid)
    assert food.cell[1] == 18


def test_brick_never_overlaps() -> None:
    rng = random.Random(4)
    snake = _long_snake()
    food = Food()
    food.spawn(snake, rng)
    bricks = []
    for _ in range(1000):
        brick = Brick.spawn(snake, food, bricks, rng)
        assert brick is not None
        assert not snake.occupies(brick.cell)
        assert brick.cell != food.cell
        assert brick.cell not in {b.cell for b in bricks}
        if len(bricks) < 50:
            bricks.append(brick)


def test_hide_resets_food() -> None:
    food = Food()
    food.spawn(Snake(Board(20)), random.Random(5))
    food.hide()
    assert not food.shown
    assert food.cell == (0, 0)


def test_portal_food_is_linked() -> None:
    food = Food()
    portal = Food(linked=food)
    assert portal.is_portal and portal.linked is food
    assert not food.is_portal


def test_sampling_falls_back_to_scan() -> None:
    rng = random.Random(6)
    only = (9, 9)
    cell = sample_free_cell(rng, lambda c: c != only, max_attempts=0)
    assert cell == only


def test_full_board_fails_spawn() -> None:
    rng = random.Random(7)
    assert sample_free_cell(rng, lambda c: True, max_attempts=10) is None

    snake = Snake(Board(20))
    snake.body = [(x, y) for x in range(20) for y in range(20)]
    food = Food()
    food.cell = (4, 4)
    assert food.spawn(snake, rng, max_attempts=10) is False
    assert food.cell == (4, 4)
    assert Brick.spawn(snake, food, [], rng, max_attempts=10) is None
