"""Runtime helpers derived from the world state: view, actor order, train occupancy."""

from __future__ import annotations

from typing import Iterable, Sequence

from .geometry import GAME_BOX_SIZE, Rect, Vec2, manhattan_distance
from .network import NetworkRuntime, TrainState


def sort_by_distance(positions: Sequence[Vec2], origin: Vec2) -> list[int]:
    """Indices of ``positions`` ordered by Manhattan distance to ``origin``."""
    if not positions:
        raise ValueError("no positions to sort")
    return sorted(range(len(positions)), key=lambda i: manhattan_distance(positions[i], origin))


def compute_view(center: Vec2) -> Rect:
    """Part of the world shown in the game box, centred on ``center``."""
    return Rect.from_center_size(center, GAME_BOX_SIZE)


def train_occupancy(runtime: NetworkRuntime, trains: Iterable[TrainState]) -> dict[Vec2, int]:
    """Map every cell covered by a train to that train's index."""
    occupancy: dict[Vec2, int] = {}
    for train_index, train in enumerate(trains):
        for cell in runtime.train_cells(train.railway_index):
            occupancy[cell] = train_index
    return occupancy