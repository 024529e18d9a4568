import pytest

from fdfview.colours import average_colour, hex_to_int
from fdfview.grid import Grid, Point
from fdfview.lines import (
    Direction,
    Line,
    down_x_pixels,
    down_y_pixels,
    make_line,
    up_x_pixels,
    up_y_pixels,
)


def _line(x, y, dx, dy):
    return Line(x=x, y=y, dx=dx, dy=dy, colour=0, direction=Direction.COLUMN)


def test_make_line_column_starts_at_left_neighbour():
    grid = Grid([[Point(0.4, 1.6, 0, "FF0000"), Point(7.2, 3.4, 0, "FF0000")]])
    line = make_line(grid, 0, 1, Direction.COLUMN)
    assert (line.x, line.y) == (0, 2)
    assert (line.dx, line.dy) == (7, 1)
    assert line.direction is Direction.COLUMN
    assert line.colour == hex_to_int("FF0000")


def test_make_line_rounds_halves_away_from_zero():
    grid = Grid([[Point(0.0, 0.0, 0), Point(2.5, 0.5, 0)]])
    line = make_line(grid, 0, 1, Direction.COLUMN)
    assert line.dx == 3
    assert line.dy == 1


def test_make_line_row_goes_to_point_above():
    grid = Grid([[Point(9.0, 1.0, 0, "00FF00")], [Point(3.0, 6.0, 0, "0000FF")]])
    line = make_line(grid, 1, 0, Direction.ROW)
    assert (line.x, line.y) == (3, 6)
    assert (line.dx, line.dy) == (6, -5)
    assert line.colour == average_colour("0000FF", "00FF00")


def test_down_x_horizontal_fills_gap():
    pixels = list(down_x_pixels(_line(2, 5, 8, 0), 10))
    assert pixels == [(x, 5) for x in range(3, 10)]


def test_down_y_vertical_fills_gap():
    pixels = list(down_y_pixels(_line(4, 1, 0, 6), 7))
    assert pixels == [(4, y) for y in range(2, 7)]


def test_down_x_steps_are_unit_and_bounded():
    line = _line(0, 0, 10, 4)
    pixels = list(down_x_pixels(line, 10))
    xs = [p[0] for p in pixels]
    ys = [p[1] for p in pixels]
    assert xs == list(range(1, 10))
    assert all(0 <= b - a <= 1 for a, b in zip([0] + ys, ys))
    assert 0 <= ys[-1] <= 4


def test_up_x_rises_monotonically():
    line = _line(0, 10, 9, -3)
    pixels = list(up_x_pixels(line, 9))
    assert [p[0] for p in pixels] == list(range(1, 9))
    ys = [10] + [p[1] for p in pixels]
    assert all(0 <= a - b <= 1 for a, b in zip(ys, ys[1:]))
    assert 7 <= ys[-1] <= 10


def test_up_y_rises_one_row_per_pixel():
    line = _line(0, 12, 3, -10)
    pixels = list(up_y_pixels(line, 2))
    assert [p[1] for p in pixels] == list(range(11, 2, -1))
    xs = [0] + [p[0] for p in pixels]
    assert all(0 <= b - a <= 1 for a, b in zip(xs, xs[1:]))
    assert xs[-1] <= 3


@pytest.mark.parametrize(
    "func, line, end",
    [
        (down_x_pixels, _line(5, 5, 1, 0), 6),
        (down_y_pixels, _line(5, 5, 0, 1), 6),
        (up_x_pixels, _line(5, 5, 1, -1), 6),
        (up_y_pixels, _line(5, 5, 0, -1), 4),
    ],
)
def test_adjacent_points_need_no_pixels(func, line, end):
    assert list(func(line, end)) == []