from snakemodes.board import Board


def test_in_bounds_excludes_frame() -> None:
    board = Board(20)
    assert board.is_in_bounds((1, 1))
    assert board.is_in_bounds((18, 18))
    assert not board.is_in_bounds((0, 5))
    assert not board.is_in_bounds((5, 0))
    assert not board.is_in_bounds((19, 5))
    assert not board.is_in_bounds((5, 19))


def test_wrap_uses_full_range() -> None:
    board = Board(20)
    assert board.wrap((-1, 5)) == (19, 5)
    assert board.wrap((20, 5)) == (0, 5)
    assert board.wrap((5, -1)) == (5, 19)
    assert board.wrap((0, 19)) == (0, 19)


def test_center() -> None:
    assert Board(20).center == (10, 10)
