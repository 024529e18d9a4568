"""Stepping along the straight lines that join neighbouring map points."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from fdfview.colours import line_colour
from fdfview.grid import Grid


class Direction(Enum):
    """Which neighbour a line joins a point to."""

    ROW = "r"
    COLUMN = "c"


@dataclass(frozen=True)
class Line:
    """Start pixel, extent and colour of a line between two points."""

    x: int
    y: int
    dx: int
    dy: int
    colour: int
    direction: Direction


def _round(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _half(n: int) -> int:
    """Halve ``n``, truncating toward zero."""
    return math.trunc(n / 2)


def make_line(grid: Grid, row: int, col: int, direction: Direction) -> Line:
    """Describe the line from a point to its left or upper neighbour.

    A column line starts at the point to the left of ``(row, col)`` and ends
    at it; a row line starts at ``(row, col)`` and ends at the point above.
    """
    here = grid.points[row][col]
    if direction is Direction.COLUMN:
        neighbour = grid.points[row][col - 1]
        start, end = neighbour, here
    else:
        neighbour = grid.points[row - 1][col]
        start, end = here, neighbour
    x, y = _round(start.x), _round(start.y)
    return Line(
        x=x,
        y=y,
        dx=_round(end.x) - x,
        dy=_round(end.y) - y,
        colour=line_colour(here.colour, neighbour.colour),
        direction=direction,
    )


def up_x_pixels(line: Line, end: int) -> Iterator[tuple[int, int]]:
    """Pixels of a rising line that is longer in x than in y."""
    x, y, f = line.x, line.y, _half(line.dx)
    while x + 1 < end:
        x += 1
        f += line.dy
        if f <= 0:
            f += line.dx
            y -= 1
        yield x, y


def up_y_pixels(line: Line, end: int) -> Iterator[tuple[int, int]]:
    """Pixels of a rising line that is longer in y than in x."""
    x, y, f = line.x, line.y, _half(-line.dy)
    while y - 1 > end:
        y -= 1
        f -= line.dx
        if f <= 0:
            f -= line.dy
            x += 1
        yield x, y


def down_x_pixels(line: Line, end: int) -> Iterator[tuple[int, int]]:
    """Pixels of a falling line that is longer in x than in y."""
    x, y, f = line.x, line.y, _half(line.dx)
    while x + 1 < end:
        x += 1
        f -= line.dy
        if f <= 0:
            f += line.dx
            y += 1
        yield x, y


def down_y_pixels(line: Line, end: int) -> Iterator[tuple[int, int]]:
    """Pixels of a falling line that is at least as long in y as in x."""
    x, y, f = line.x, line.y, _half(line.dy)
    while y + 1 < end:
        y += 1
        f -= line.dx
        if f <= 0:
            f += line.dy
            x += 1
        yield x, y