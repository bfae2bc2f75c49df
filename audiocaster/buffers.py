"""Loading wall geometry from a vertex file."""

from __future__ import annotations

import itertools
import os
import re
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence

from .line_object import LineObject
from .vec2 import Vec2

MAX_VERTEX_COUNT = 200
MAX_LINE_COUNT = MAX_VERTEX_COUNT // 2
MAX_FILE_LENGTH = 10000

_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _leading_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group(1))


def parse_floats(text: str) -> list[float]:
    """Parse comma-separated numbers; each field is read up to its first non-numeric character."""
    return [_leading_float(part) for part in text.split(",")]


def coords_to_vertices(coords: Iterable[float]) -> list[Vec2]:
    """Pair up coordinates into points, dropping a trailing odd one."""
    values = iter(coords)
    pairs = zip(values, values)
    return [Vec2(x, y) for x, y in itertools.islice(pairs, MAX_VERTEX_COUNT)]


@dataclass
class LineBuffer:
    """The objects in the scene."""

    lines: list[LineObject] = field(default_factory=list)

    def load_data(self, vertices: Sequence[Vec2]) -> None:
        """Replace the lines with walls built from consecutive vertex pairs."""
        pairs = zip(vertices[0::2], vertices[1::2])
        self.lines = [
            LineObject(start, end) for start, end in itertools.islice(pairs, MAX_LINE_COUNT)
        ]

    def __iter__(self) -> Iterator[LineObject]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)


@dataclass
class VertexBuffer:
    """Vertices read from a file."""

    vertices: list[Vec2] = field(default_factory=list)

    def load_data(self, path: str | os.PathLike[str]) -> list[Vec2]:
        """Read vertices from the first line of *path*.

        Raises OSError if the file cannot be opened and ValueError if a
        field is not a number.
        """
        with open(path, encoding="utf-8") as stream:
            line = stream.readline().rstrip("\n")
        self.vertices = coords_to_vertices(parse_floats(line[: MAX_FILE_LENGTH - 1]))
        return self.vertices