"""Reading height maps: whitespace-separated integer heights, one row per line."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from fdfview.chars import is_digit
from fdfview.lines import LineReader
from fdfview.numbers import atoi
from fdfview.strings import split


class MapError(ValueError):
    """Raised when a map file cannot be read or is malformed."""


@dataclass
class Point3D:
    """A grid point: column, row and height."""

    x: float
    y: float
    z: float


@dataclass
class HeightMap:
    """A grid of points; ``width`` is the number of columns drawn per row."""

    rows: List[List[Point3D]] = field(default_factory=list)
    width: int = 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def depth_range(self) -> Tuple[int, int]:
        """The lowest and highest heights, each clamped to include 0."""
        min_depth = 0
        max_depth = 0
        for row in self.rows:
            for point in row[: self.width]:
                z = int(point.z)
                min_depth = min(min_depth, z)
                max_depth = max(max_depth, z)
        return min_depth, max_depth


def str_is_valid(text: str) -> bool:
    """True when ``text`` is an optional '-' followed by digits.

    A single newline at the very end is allowed.
    """
    body = text[1:] if text.startswith("-") else text
    if body.endswith("\n"):
        body = body[:-1]
    return all(is_digit(ch) for ch in body)


def get_width(line: str) -> int:
    """Number of space-separated columns in ``line``."""
    return len(split(line, " "))


def parse_line(line: str, row: int, width: int) -> List[Point3D]:
    """Parse up to ``width`` columns of ``line`` into points on row ``row``."""
    points = []
    for x, column in enumerate(split(line, " ")[:width]):
        if not str_is_valid(column):
            raise MapError(f"invalid height {column.strip()!r} on row {row}")
        points.append(Point3D(float(x), float(row), float(atoi(column))))
    return points


def parse_map_lines(lines: Iterable[str]) -> HeightMap:
    """Build a height map from lines of text.

    The width is taken from the last line; an empty line, an invalid height
    or a row shorter than that width is an error.
    """
    height_map = HeightMap()
    for row, line in enumerate(lines):
        if line.startswith("\n"):
            raise MapError(f"empty line at row {row}")
        height_map.width = get_width(line)
        height_map.rows.append(parse_line(line, row, height_map.width))
    for row, points in enumerate(height_map.rows):
        if len(points) < height_map.width:
            raise MapError(
                f"row {row} has {len(points)} columns, expected {height_map.width}"
            )
    return height_map


def read_map_file(file_name: str) -> HeightMap:
    """Read and parse the map stored in ``file_name``."""
    try:
        with open(file_name, "rb") as stream:
            return parse_map_lines(LineReader(stream))
    except OSError as exc:
        raise MapError(f"cannot read {file_name}: {exc.strerror or exc}") from exc