"""Drawing a projected grid of points and its connecting lines."""

from __future__ import annotations

import math

from fdfview.colours import hex_to_int
from fdfview.grid import Grid
from fdfview.lines import (
    Direction,
    down_x_pixels,
    down_y_pixels,
    make_line,
    up_x_pixels,
    up_y_pixels,
)


def _round(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class Canvas:
    """A width by height image of packed ``0xRRGGBBAA`` pixels, initially clear."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("canvas dimensions must not be negative")
        self.width = width
        self.height = height
        self._pixels = [0] * (width * height)

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, colour: int) -> None:
        """Set the pixel at ``x``, ``y``; pixels outside the canvas are ignored."""
        if self._contains(x, y):
            self._pixels[y * self.width + x] = colour & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel at ``x``, ``y``; raises IndexError outside the canvas."""
        if not self._contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) lies outside the canvas")
        return self._pixels[y * self.width + x]

    def rgba_bytes(self) -> bytes:
        """Return the image as row-major R, G, B, A bytes."""
        return b"".join(p.to_bytes(4, "big") for p in self._pixels)


def line_pixels(
    grid: Grid, row: int, col: int, direction: Direction
) -> list[tuple[int, int, int]]:
    """Return ``(x, y, colour)`` for each pixel of a line to a neighbour."""
    line = make_line(grid, row, col, direction)
    if direction is Direction.COLUMN:
        target = grid.points[row][col]
    else:
        target = grid.points[row - 1][col]
    if line.dy < 0 and line.dx > -line.dy:
        pixels = up_x_pixels(line, _round(target.x))
    elif line.dy < 0 and line.dx < -line.dy:
        pixels = up_y_pixels(line, _round(target.y))
    elif line.dx > line.dy:
        pixels = down_x_pixels(line, _round(target.x))
    else:
        pixels = down_y_pixels(line, _round(target.y))
    return [(x, y, line.colour) for x, y in pixels]


def draw_image(grid: Grid, window_size: int) -> Canvas:
    """Draw every point of ``grid`` and the lines to its left and upper neighbours."""
    canvas = Canvas(window_size, window_size)
    for row, points in enumerate(grid.points):
        for col, point in enumerate(points):
            if 0 <= point.x < window_size and 0 <= point.y < window_size:
                canvas.put_pixel(
                    _round(point.x), _round(point.y), hex_to_int(point.colour)
                )
            neighbours = []
            if col > 0:
                neighbours.append(Direction.COLUMN)
            if row > 0:
                neighbours.append(Direction.ROW)
            for direction in neighbours:
                for x, y, colour in line_pixels(grid, row, col, direction):
                    canvas.put_pixel(x, y, colour)
    return canvas