"""Railway network: stations, trains and the expanded track used at runtime."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence

from .geometry import Vec2, manhattan_distance, sign

TRAIN_LENGTH = 11
TRAIN_CAR_SPACING = 3


@dataclass
class StationState:
    """A stop on the railway: its track index and how long trains wait there."""

    index: int
    stop_time: int


@dataclass
class TrainState:
    """A train, located by the track index of its head."""

    railway_index: int


@dataclass
class NetworkState:
    """The persistent part of the network: sparse railway points, stations, trains."""

    railway: list[Vec2] = field(default_factory=list)
    stations: list[StationState] = field(default_factory=list)
    trains: list[TrainState] = field(default_factory=list)


@dataclass
class NetworkRuntime:
    """The railway expanded to every cell, as a closed loop."""

    railway: list[Vec2] = field(default_factory=list)

    def _length(self) -> int:
        if not self.railway:
            raise ValueError("the railway is empty")
        return len(self.railway)

    def next_position(self, current: int, advance: int = 1) -> int:
        """Track index ``advance`` cells ahead of ``current``, wrapping around."""
        return (current + advance) % self._length()

    def prev_position(self, current: int, advance: int = 1) -> int:
        """Track index ``advance`` cells behind ``current``, wrapping around."""
        length = self._length()
        return (current + length - advance) % length

    def bind(self, railway: Sequence[Vec2]) -> None:
        """Expand the sparse, axis-aligned railway loop into consecutive cells."""
        points = [tuple(point) for point in railway]
        if not points:
            raise ValueError("the railway is empty")

        expanded: list[Vec2] = []
        for current, following in zip(points, points[1:] + points[:1]):
            if current[0] != following[0] and current[1] != following[1]:
                raise ValueError(f"railway points are not aligned: {current} and {following}")
            step = sign((following[0] - current[0], following[1] - current[1]))
            position = current
            while True:
                expanded.append(position)
                position = (position[0] + step[0], position[1] + step[1])
                if position == following:
                    break

        if len(expanded) > 1 and manhattan_distance(expanded[-1], expanded[0]) != 1:
            raise ValueError("the railway does not form a closed loop")

        self.railway = expanded

    def train_cells(self, railway_index: int) -> Iterator[Vec2]:
        """Cells covered by a train whose head is at ``railway_index``."""
        for car in range(TRAIN_LENGTH):
            index = self.next_position(railway_index, car * TRAIN_CAR_SPACING)
            x, y = self.railway[index]
            for dx in (-1, 0, 1):
                for dy in (-1, 0, 1):
                    yield (x + dx, y + dy)