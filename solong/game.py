"""Game state and player movement."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

KEY_W = 119
KEY_A = 97
KEY_S = 115
KEY_D = 100
KEY_ESC = 65307
KEY_UP = 65362
KEY_DOWN = 65364
KEY_LEFT = 65361
KEY_RIGHT = 65363

TILE_SIZE = 40

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTABLE = "C"


class MapError(Exception):
    """Raised when a map cannot be loaded or is not playable."""


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class MoveOutcome(Enum):
    BLOCKED = "blocked"
    MOVED = "moved"
    WON = "won"


_KEY_DIRECTIONS = {
    KEY_W: Direction.UP,
    KEY_UP: Direction.UP,
    KEY_S: Direction.DOWN,
    KEY_DOWN: Direction.DOWN,
    KEY_A: Direction.LEFT,
    KEY_LEFT: Direction.LEFT,
    KEY_D: Direction.RIGHT,
    KEY_RIGHT: Direction.RIGHT,
}


def direction_for_key(keycode: int) -> Optional[Direction]:
    """Return the movement a key code stands for, or None."""
    return _KEY_DIRECTIONS.get(keycode)


@dataclass
class Game:
    """A map being played: the grid, the player's place and the score."""

    rows: list
    map_name: str = ""
    x: int = field(default=0, init=False)
    y: int = field(default=0, init=False)
    steps_taken: int = field(default=0, init=False)
    collectable_count: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.rows = [list(row) for row in self.rows]
        for y, row in enumerate(self.rows):
            if PLAYER in row:
                self.x, self.y = row.index(PLAYER), y
                break
        self.count_collectables()

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def lines(self) -> Iterable[str]:
        """Yield the current grid, one string per row."""
        return ("".join(row) for row in self.rows)

    def tile(self, x: int, y: int) -> str:
        if x < 0 or y < 0:
            raise IndexError(f"position ({x}, {y}) is outside the map")
        return self.rows[y][x]

    def count_collectables(self) -> int:
        """Recount the collectables left on the map and store the result."""
        self.collectable_count = sum(row.count(COLLECTABLE) for row in self.rows)
        return self.collectable_count

    def move(self, direction: Direction) -> MoveOutcome:
        """Try to move the player one tile in ``direction``."""
        nx, ny = self.x + direction.dx, self.y + direction.dy
        target = self.tile(nx, ny)
        if target == WALL:
            return MoveOutcome.BLOCKED
        if target == EXIT:
            if self.collectable_count != 0:
                return MoveOutcome.BLOCKED
            return MoveOutcome.WON
        if target not in (FLOOR, COLLECTABLE):
            return MoveOutcome.BLOCKED
        if target == COLLECTABLE:
            self.collectable_count -= 1
        self.rows[ny][nx] = PLAYER
        self.rows[self.y][self.x] = FLOOR
        self.x, self.y = nx, ny
        self.steps_taken += 1
        return MoveOutcome.MOVED