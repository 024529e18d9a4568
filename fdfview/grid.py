"""Loading a height map and projecting its points isometrically."""

from __future__ import annotations

import errno
import math
import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from fdfview.chars import atoi
from fdfview.linereader import LineReader
from fdfview.textops import split

DEFAULT_WINDOW_SIZE = 1200
MARGIN = 100
DEFAULT_COLOUR = "FFFFFF"


class MapError(ValueError):
    """A map file that cannot be opened or is badly formed."""

    def __init__(self, message: str, code: int = errno.EINVAL) -> None:
        super().__init__(message)
        self.code = code


@dataclass
class Point:
    """A projected map point with its height and ``RRGGBB`` colour."""

    x: float
    y: float
    z: float
    colour: str = DEFAULT_COLOUR


@dataclass
class Grid:
    """Rows of projected points and the extent they cover."""

    points: list[list[Point]]
    window_size: int = DEFAULT_WINDOW_SIZE
    scale: float = 1.0
    min_x: float = field(default=0.0, init=False)
    max_x: float = field(default=0.0, init=False)
    min_y: float = field(default=0.0, init=False)
    max_y: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        self._update_extents()

    @property
    def width(self) -> int:
        return len(self.points[0]) if self.points else 0

    @property
    def height(self) -> int:
        return len(self.points)

    def _all_points(self) -> Iterator[Point]:
        for row in self.points:
            yield from row

    def _update_extents(self) -> None:
        xs = [p.x for p in self._all_points()]
        ys = [p.y for p in self._all_points()]
        if xs:
            self.min_x, self.max_x = min(xs), max(xs)
            self.min_y, self.max_y = min(ys), max(ys)

    def scale_to(self, dims: float) -> None:
        """Scale and centre the points so their larger extent spans ``dims``.

        A map whose points all coincide is placed in the centre.
        """
        span_x = self.max_x - self.min_x
        span_y = self.max_y - self.min_y
        span = span_x if span_x > span_y else span_y
        scale = dims / span if span else 0.0
        offset_x = (dims - scale * span_x) / 2
        offset_y = (dims - scale * span_y) / 2
        for point in self._all_points():
            point.x = scale * (point.x - self.min_x) + offset_x
            point.y = scale * (point.y - self.min_y) + offset_y
        self.scale = scale
        self._update_extents()


def width_count(line: str) -> int:
    """Count the space-separated values on ``line`` before its newline."""
    return sum(1 for token in line.split("\n", 1)[0].split(" ") if token)


def parse_colour(token: str) -> str:
    """Return the ``RRGGBB`` colour of a ``z[,0xCOLOUR]`` token.

    Tokens without a colour are white; short colours are padded with
    leading zeros and long ones cut to six characters.
    """
    comma = token.find(",")
    if comma < 0:
        return DEFAULT_COLOUR
    digits = token[comma + 3:]
    return digits[:6] if len(digits) >= 6 else digits.rjust(6, "0")


def isometric(row: int, col: int, z: float) -> tuple[float, float]:
    """Project the map cell at ``row``, ``col`` with height ``z``."""
    x = (col - row) * math.cos(math.pi / 6)
    y = (col + row) * math.sin(math.pi / 6) - z
    return x, y


def _make_point(row: int, col: int, token: str) -> Point:
    z = float(atoi(token))
    x, y = isometric(row, col, z)
    return Point(x, y, z, parse_colour(token))


def parse_map(
    lines: Iterable[str], window_size: int = DEFAULT_WINDOW_SIZE
) -> Grid:
    """Build a grid from map lines, scaled to fit ``window_size``.

    Raises MapError when the map is empty or its rows differ in width.
    """
    rows: list[str] = []
    width: int | None = None
    for line in lines:
        count = width_count(line)
        if width is None:
            width = count
        elif count != width:
            raise MapError("incorrect map formatting")
        rows.append(line)
    if width is None:
        raise MapError("file can't be read or is empty")
    if width == 0:
        raise MapError("incorrect map formatting")
    points = [
        [
            _make_point(row, col, token)
            for col, token in enumerate(split(line, " ")[:width])
        ]
        for row, line in enumerate(rows)
    ]
    grid = Grid(points, window_size)
    grid.scale_to(window_size - MARGIN)
    return grid


def load_grid(
    path: str | os.PathLike[str], window_size: int = DEFAULT_WINDOW_SIZE
) -> Grid:
    """Read the map file at ``path`` into a grid."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as stream:
            return parse_map(LineReader(stream), window_size)
    except OSError as exc:
        raise MapError("file can't be opened", exc.errno or errno.EIO) from exc