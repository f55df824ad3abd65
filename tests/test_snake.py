import pytest

from snakemodes.board import Board
from snakemodes.config import INIT_SPEED, LEFT, RIGHT, UP
from snakemodes.snake import Snake


@pytest.fixture
def snake() -> Snake:
    return Snake(Board(20))


def test_reset_layout(snake: Snake) -> None:
    assert snake.body == [(10, 10), (9, 10), (8, 10)]
    assert snake.head == (10, 10)
    assert snake.direction == RIGHT
    assert snake.speed == INIT_SPEED
    assert snake.size == 3
    assert snake.move_counter == 0
    assert not snake.growing
    assert snake.teleport_offset is None


def test_move_is_gated_by_speed(snake: Snake) -> None:
    start = list(snake.body)
    for _ in range(INIT_SPEED - 1):
        assert snake.move() is False
        assert snake.body == start
    assert snake.move() is True
    assert snake.body == [(11, 10), (10, 10), (9, 10)]
    assert snake.move_counter == 0


def test_reverse_turn_is_rejected(snake: Snake) -> None:
    assert snake.switch_direction(*LEFT) is False
    assert snake.pending == RIGHT
    for _ in range(INIT_SPEED):
        snake.move()
    assert snake.direction == RIGHT


def test_turn_applies_on_next_move(snake: Snake) -> None:
    assert snake.switch_direction(*UP)
    assert snake.direction == RIGHT
    for _ in range(INIT_SPEED):
        snake.move()
    assert snake.direction == UP
    assert snake.head == (10, 9)


def test_double_turn_cannot_reverse_into_neck(snake: Snake) -> None:
    snake.switch_direction(*UP)
    # Still heading right until the next move, so left is a reversal
    assert snake.switch_direction(*LEFT) is False
    assert snake.pending == UP


def test_non_unit_direction_ignored(snake: Snake) -> None:
    assert snake.switch_direction(2, 0) is False
    assert snake.switch_direction(1, 1) is False
    assert snake.pending == RIGHT


def test_growth_tracks_size(snake: Snake) -> None:
    for n in range(1, 4):
        snake.grow()
        snake.move_counter = INIT_SPEED - 1
        assert snake.move()
        assert snake.size == 3 + n
        assert len(snake.body) == snake.size
        assert not snake.growing


def test_teleport_offset_consumed(snake: Snake) -> None:
    snake.teleport_offset = (-6, -5)
    snake.move_counter = INIT_SPEED - 1
    snake.move()
    assert snake.head == (5, 5)
    assert snake.teleport_offset is None
    snake.move_counter = INIT_SPEED - 1
    snake.move()
    assert snake.head == (6, 5)


def test_speed_up_is_geometric(snake: Snake) -> None:
    snake.speed_up()
    assert snake.speed == pytest.approx(10.8)
    snake.speed_up()
    assert snake.speed == pytest.approx(9.72)


def test_speed_up_has_floor(snake: Snake) -> None:
    for _ in range(100):
        snake.speed_up(min_speed=1.0)
    assert snake.speed == 1.0


def test_wrap_around(snake: Snake) -> None:
    snake.body = [(-1, 4), (0, 4), (1, 4)]
    snake.wrap_around()
    assert snake.head == (19, 4)
    snake.body = [(7, 20), (7, 19)]
    snake.wrap_around()
    assert snake.head == (7, 0)


def test_bit_itself(snake: Snake) -> None:
    assert not snake.bit_itself()
    snake.body = [(5, 5), (5, 6), (6, 6), (6, 5), (5, 5)]
    assert snake.bit_itself()
