from torus_snake.config import BG, FOOD
from torus_snake.grid import Grid, Position, Shape


def test_one_cell_per_coordinate():
    grid = Grid(5)
    assert len(grid) == 25
    assert {c.position for c in grid} == {Position(x, y) for x in range(5) for y in range(5)}


def test_size_is_clamped_to_three():
    grid = Grid(1)
    assert grid.size == 3
    assert len(grid) == 9


def test_lookup_in_and_out_of_range():
    grid = Grid(4)
    assert grid.lookup(2, 1).position == (2, 1)
    assert grid.lookup(-1, 0) is None
    assert grid.lookup(0, 4) is None
    assert grid.lookup(4, 4) is None


def test_clear_resets_every_cell():
    grid = Grid(3)
    grid.lookup(1, 1).paint(FOOD, Shape.DISC)
    grid.clear()
    assert all(c.color == BG and c.shape is Shape.BLOCK for c in grid)


def test_wrap():
    grid = Grid(10)
    assert grid.wrap(10, -1) == (0, 9)
    assert grid.wrap(3, 4) == (3, 4)

