"""Snake game state and rules."""

from __future__ import annotations

import random
from collections.abc import Iterable
from enum import Enum

from consnake.obstacles import Point

DEFAULT_WIDTH = 20
DEFAULT_HEIGHT = 20
INITIAL_SPEED = 10
FRAME_UNIT = 0.05


class Direction(Enum):
    """Movement direction, keyed by the control letter."""

    UP = "w"
    DOWN = "s"
    LEFT = "a"
    RIGHT = "d"

    @classmethod
    def from_key(cls, key: str) -> Direction | None:
        """Return the direction for a control key, or None for other keys."""
        try:
            return cls(key)
        except ValueError:
            return None

    def is_opposite(self, other: Direction) -> bool:
        return _OPPOSITES[self] is other

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


class Game:
    """A snake on a walled field with food and obstacles."""

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        obstacles: Iterable[Point] = (),
        rng: random.Random | None = None,
    ) -> None:
        if width < 3 or height < 3:
            raise ValueError(f"field {width}x{height} has no room inside its walls")
        self.width = width
        self.height = height
        self.obstacles = tuple(obstacles)
        self._rng = rng if rng is not None else random.Random()
        self.body = [Point(width // 2, height // 2)]
        self.direction = Direction.UP
        self.speed = INITIAL_SPEED
        self.over = False
        self.food = self.generate_food()

    @property
    def head(self) -> Point:
        return self.body[0]

    @property
    def length(self) -> int:
        return len(self.body)

    def generate_food(self) -> Point:
        """Place food at a random cell inside the walls."""
        self.food = Point(
            self._rng.randrange(self.width - 2) + 1,
            self._rng.randrange(self.height - 2) + 1,
        )
        return self.food

    def steer(self, key: str) -> Direction:
        """Turn according to a control key; reversing onto itself is ignored."""
        wanted = Direction.from_key(key)
        if wanted is not None and not wanted.is_opposite(self.direction):
            self.direction = wanted
        return self.direction

    def _blocked(self, cell: Point) -> bool:
        inside = 0 < cell.x < self.width - 1 and 0 < cell.y < self.height - 1
        return not inside or cell in self.body or cell in self.obstacles

    def step(self) -> bool:
        """Advance one frame. Returns False once the game is over."""
        if self.over:
            return False
        dx, dy = self.direction.delta
        nxt = Point(self.head.x + dx, self.head.y + dy)
        if self._blocked(nxt):
            self.over = True
            return False
        self.body.insert(0, nxt)
        if nxt == self.food:
            self.generate_food()
            if self.length % 2 == 0:
                self.speed -= 1
        else:
            self.body.pop()
        return True

    def _cell(self, x: int, y: int, body: set[Point], obstacles: set[Point]) -> str:
        if x in (0, self.width - 1) or y in (0, self.height - 1):
            return "#"
        point = Point(x, y)
        if point == self.food:
            return "*"
        text = ("O" if point in body else "") + ("X" if point in obstacles else "")
        return text or " "

    def render(self) -> str:
        """Draw the field: '#' walls, 'O' snake, '*' food, 'X' obstacles."""
        body, obstacles = set(self.body), set(self.obstacles)
        return "".join(
            "".join(self._cell(x, y, body, obstacles) for x in range(self.width))
            + "\n"
            for y in range(self.height)
        )

    def delay(self) -> float:
        """Seconds to wait between frames at the current speed."""
        return max(self.speed, 0) * FRAME_UNIT