import pytest

from torus_snake.config import Direction
from torus_snake.snake import Snake


def test_initial_layout_trails_left_of_head():
    snake = Snake(length=4, size=10, offset=(3, 3))
    assert snake.positions == [(6, 3), (5, 3), (4, 3), (3, 3)]
    assert snake.head == (6, 3)
    assert snake.tail == (3, 3)
    assert not snake.collides


def test_length_is_clamped():
    assert len(Snake(length=0, size=10)) == 1
    long = Snake(length=50, size=10, offset=(0, 0))
    assert len(long) == 10
    assert len(set(long.positions)) == 10


def test_step_keeps_length():
    snake = Snake(length=4, size=10, offset=(3, 3))
    head = snake.step(Direction.RIGHT, 10)
    assert head == (7, 3)
    assert snake.positions == [(7, 3), (6, 3), (5, 3), (4, 3)]


@pytest.mark.parametrize(
    "start, direction, expected",
    [
        ((9, 5), Direction.RIGHT, (0, 5)),
        ((0, 5), Direction.LEFT, (9, 5)),
        ((5, 0), Direction.UP, (5, 9)),
        ((5, 9), Direction.DOWN, (5, 0)),
    ],
)
def test_step_wraps_around_edges(start, direction, expected):
    snake = Snake(segments=[start])
    assert snake.step(direction, 10) == expected


def test_growth_is_deferred_to_the_next_step():
    snake = Snake(length=3, size=10, offset=(0, 0))
    snake.mark_growth()
    assert len(snake) == 3
    assert snake.growing
    old_tail = snake.tail

    snake.step(Direction.RIGHT, 10)
    assert len(snake) == 4
    assert snake.tail == old_tail
    assert not snake.growing

    snake.step(Direction.RIGHT, 10)
    assert len(snake) == 4


def test_marking_twice_grows_once():
    snake = Snake(length=3, size=10, offset=(0, 0))
    snake.mark_growth()
    snake.mark_growth()
    snake.step(Direction.RIGHT, 10)
    snake.step(Direction.RIGHT, 10)
    assert len(snake) == 4


def test_single_segment_snake_grows():
    snake = Snake(segments=[(2, 2)])
    snake.mark_growth()
    snake.step(Direction.DOWN, 10)
    assert snake.positions == [(2, 3), (2, 2)]


def test_collides_when_head_lands_on_body():
    snake = Snake(segments=[(5, 5), (5, 6), (4, 6), (4, 5), (3, 5)])
    snake.step(Direction.DOWN, 10)
    assert snake.collides


def test_moving_into_the_vacated_tail_is_safe():
    snake = Snake(segments=[(5, 5), (5, 6), (6, 6), (6, 5)])
    snake.step(Direction.RIGHT, 10)
    assert not snake.collides


def test_moving_into_a_growing_tail_collides():
    snake = Snake(segments=[(5, 5), (5, 6), (6, 6), (6, 5)])
    snake.mark_growth()
    snake.step(Direction.RIGHT, 10)
    assert snake.collides


def test_explicit_segments_require_one():
    with pytest.raises(ValueError):
        Snake(segments=[])


def test_explicit_segments_ignore_length_and_offset():
    snake = Snake(length=7, size=10, offset=(0, 0), segments=[(1, 1), (1, 2)])
    assert snake.positions == [(1, 1), (1, 2)]
    assert not snake.growing
