"""Obstacle positions on the playing field."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from os import PathLike

MAX_OBSTACLES = 100


@dataclass(frozen=True)
class Point:
    """A cell on the playing field."""

    x: int
    y: int


def _int_pairs(text: str) -> Iterator[tuple[int, int]]:
    """Yield whitespace-separated integer pairs, stopping at the first bad token."""
    tokens = iter(text.split())
    for first in tokens:
        second = next(tokens, None)
        if second is None:
            return
        try:
            yield int(first), int(second)
        except ValueError:
            return


def parse_obstacles(text: str, width: int, height: int) -> list[Point]:
    """Parse "x y" pairs, keeping those strictly inside the field's border."""
    obstacles: list[Point] = []
    for x, y in _int_pairs(text):
        if len(obstacles) >= MAX_OBSTACLES:
            break
        if 0 < x < width - 1 and 0 < y < height - 1:
            obstacles.append(Point(x, y))
    return obstacles


def load_obstacles(
    path: str | PathLike[str], width: int, height: int
) -> list[Point]:
    """Load obstacles from a file; a missing or unreadable file gives none."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        return []
    return parse_obstacles(text, width, height)