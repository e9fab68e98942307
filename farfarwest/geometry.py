"""Integer grid geometry, directions and the game's layout and timing constants."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Iterator, Tuple

Vec2 = Tuple[int, int]


class Direction(enum.IntEnum):
    """The four cardinal directions; their values index rotation tables."""

    CENTER = -1
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


class Orientation(enum.IntEnum):
    """The eight compass orientations plus the center."""

    CENTER = -1
    NORTH = 0
    NORTH_EAST = 1
    EAST = 2
    SOUTH_EAST = 3
    SOUTH = 4
    SOUTH_WEST = 5
    WEST = 6
    NORTH_WEST = 7


_DIRECTION_DISPLACEMENTS: dict[Direction, Vec2] = {
    Direction.CENTER: (0, 0),
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}

_ORIENTATION_DISPLACEMENTS: dict[Orientation, Vec2] = {
    Orientation.CENTER: (0, 0),
    Orientation.NORTH: (0, -1),
    Orientation.NORTH_EAST: (1, -1),
    Orientation.EAST: (1, 0),
    Orientation.SOUTH_EAST: (1, 1),
    Orientation.SOUTH: (0, 1),
    Orientation.SOUTH_WEST: (-1, 1),
    Orientation.WEST: (-1, 0),
    Orientation.NORTH_WEST: (-1, -1),
}


def displacement(value: Direction | Orientation) -> Vec2:
    """Unit step for a direction or an orientation (y grows downwards)."""
    if isinstance(value, Orientation):
        return _ORIENTATION_DISPLACEMENTS[value]
    return _DIRECTION_DISPLACEMENTS[Direction(value)]


def undisplacement(vector: Vec2) -> Direction:
    """Cardinal direction whose unit step is ``vector``."""
    vector = tuple(vector)
    for direction in (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT):
        if _DIRECTION_DISPLACEMENTS[direction] == vector:
            return direction
    raise ValueError(f"not a cardinal displacement: {vector[0]},{vector[1]}")


def direction_from_angle(angle: float) -> Direction:
    """Cardinal direction closest to ``angle`` (radians, y grows downwards)."""
    angle = math.atan2(math.sin(angle), math.cos(angle))
    quarter = math.pi / 4
    if -quarter <= angle < quarter:
        return Direction.RIGHT
    if quarter <= angle < 3 * quarter:
        return Direction.DOWN
    if -3 * quarter <= angle < -quarter:
        return Direction.UP
    return Direction.LEFT


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def sign(vector: Vec2) -> Vec2:
    """Component-wise sign of a vector."""
    return (_sign(vector[0]), _sign(vector[1]))


def manhattan_distance(lhs: Vec2, rhs: Vec2) -> int:
    return abs(lhs[0] - rhs[0]) + abs(lhs[1] - rhs[1])


def chebyshev_distance(lhs: Vec2, rhs: Vec2) -> int:
    return max(abs(lhs[0] - rhs[0]), abs(lhs[1] - rhs[1]))


@dataclass(frozen=True)
class Rect:
    """Axis-aligned integer rectangle, half-open on its far sides."""

    position: Vec2
    size: Vec2

    @classmethod
    def from_size(cls, size: Vec2) -> Rect:
        return cls((0, 0), tuple(size))

    @classmethod
    def from_position_size(cls, position: Vec2, size: Vec2) -> Rect:
        return cls(tuple(position), tuple(size))

    @classmethod
    def from_center_size(cls, center: Vec2, size: Vec2) -> Rect:
        return cls((center[0] - size[0] // 2, center[1] - size[1] // 2), tuple(size))

    def contains(self, point: Vec2) -> bool:
        x, y = self.position
        w, h = self.size
        return x <= point[0] < x + w and y <= point[1] < y + h

    def position_at(self, orientation: Orientation) -> Vec2:
        """Corner, edge middle or center of the rectangle."""
        dx, dy = displacement(Orientation(orientation))
        w, h = self.size
        return (self.position[0] + (dx + 1) * w // 2, self.position[1] + (dy + 1) * h // 2)

    def grow_by(self, amount: int) -> Rect:
        x, y = self.position
        w, h = self.size
        return Rect((x - amount, y - amount), (w + 2 * amount, h + 2 * amount))

    def extend_to(self, point: Vec2) -> Rect:
        x, y = self.position
        w, h = self.size
        min_x, min_y = min(x, point[0]), min(y, point[1])
        max_x, max_y = max(x + w, point[0]), max(y + h, point[1])
        return Rect((min_x, min_y), (max_x - min_x, max_y - min_y))

    def positions(self) -> Iterator[Vec2]:
        """Every cell of the rectangle, row by row."""
        x, y = self.position
        w, h = self.size
        for j in range(y, y + h):
            for i in range(x, x + w):
                yield (i, j)


# World and console layout.

WORLD_BASIC_SIZE = 4096
WORLD_SIZE: Vec2 = (WORLD_BASIC_SIZE, WORLD_BASIC_SIZE)
WORLD_CENTER: Vec2 = (WORLD_BASIC_SIZE // 2, WORLD_BASIC_SIZE // 2)

CONSOLE_SIZE: Vec2 = (96, 54)

GAME_BOX_POSITION: Vec2 = (0, 0)
GAME_BOX_SIZE: Vec2 = (72, 48)
GAME_BOX = Rect.from_position_size(GAME_BOX_POSITION, GAME_BOX_SIZE)

MESSAGE_BOX_POSITION: Vec2 = (0, 48)
MESSAGE_BOX_SIZE: Vec2 = (72, 6)
MESSAGE_BOX = Rect.from_position_size(MESSAGE_BOX_POSITION, MESSAGE_BOX_SIZE)

CHARACTER_BOX_POSITION: Vec2 = (72, 0)
CHARACTER_BOX_SIZE: Vec2 = (24, 27)
CHARACTER_BOX = Rect.from_position_size(CHARACTER_BOX_POSITION, CHARACTER_BOX_SIZE)

CONTEXTUAL_BOX_POSITION: Vec2 = (72, 27)
CONTEXTUAL_BOX_SIZE: Vec2 = (24, 27)
CONTEXTUAL_BOX = Rect.from_position_size(CONTEXTUAL_BOX_POSITION, CONTEXTUAL_BOX_SIZE)

MINIMAP_FACTOR = 16
MAX_HEALTH = 10

# Durations, in game seconds.

TRAIN_TIME = 5
STRAIGHT_WALK_TIME = 15
DIAGONAL_WALK_TIME = 21
HERO_IDLE_TIME = 60
GRAZE_TIME = 100
IDLE_TIME = 100