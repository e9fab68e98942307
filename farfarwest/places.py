"""Placement of towns and farms, and where the railway enters and leaves each town."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, field

from .geometry import (
    Direction,
    Orientation,
    Rect,
    Vec2,
    direction_from_angle,
    displacement,
    manhattan_distance,
)
from .terrain import Region, Terrain

logger = logging.getLogger(__name__)

REDUCED_FACTOR = 3
RAIL_SPACING = 2

TOWN_MIN_DISTANCE_FROM_OTHER = 1500

FARMS_PER_TOWN = 5
FARM_RADIUS = 10
FARM_DIAMETER = 2 * FARM_RADIUS + 1
REDUCED_FARM_DIAMETER = FARM_DIAMETER // REDUCED_FACTOR
FARM_MIN_DISTANCE_FROM_OTHER = 200

_NO_DISTANCE = 2**31 - 1

# For each direction towards the world center: where the rail arrives and departs.
_RAIL_CORNERS: dict[Direction, tuple[Orientation, Orientation]] = {
    Direction.UP: (Orientation.NORTH_EAST, Orientation.NORTH_WEST),
    Direction.RIGHT: (Orientation.SOUTH_EAST, Orientation.NORTH_EAST),
    Direction.DOWN: (Orientation.SOUTH_WEST, Orientation.SOUTH_EAST),
    Direction.LEFT: (Orientation.NORTH_WEST, Orientation.SOUTH_WEST),
}


def to_map(position: Vec2) -> Vec2:
    """Map cell at the middle of a reduced cell."""
    return (REDUCED_FACTOR * position[0] + REDUCED_FACTOR // 2, REDUCED_FACTOR * position[1] + REDUCED_FACTOR // 2)


def to_reduced(position: Vec2) -> Vec2:
    """Reduced cell containing a map cell."""
    return (position[0] // REDUCED_FACTOR, position[1] // REDUCED_FACTOR)


@dataclass
class OuterTown:
    """A town in reduced coordinates, with the rail endpoints around it."""

    center: Vec2
    rail_arrival: Vec2 = (0, 0)
    rail_departure: Vec2 = (0, 0)


@dataclass
class WorldPlaces:
    """Towns and farms, in reduced coordinates."""

    towns: list[OuterTown] = field(default_factory=list)
    farms: list[Vec2] = field(default_factory=list)

    def min_distance_between_towns(self) -> int:
        distances = (
            manhattan_distance(lhs.center, rhs.center)
            for i, lhs in enumerate(self.towns)
            for rhs in self.towns[i + 1:]
        )
        return min(distances, default=_NO_DISTANCE)

    def min_distance_between_towns_and_farms(self) -> int:
        distances = [
            manhattan_distance(farm, other)
            for i, farm in enumerate(self.farms)
            for other in self.farms[i + 1:]
        ]
        distances.extend(
            manhattan_distance(farm, town.center) for farm in self.farms for town in self.towns
        )
        return min(distances, default=_NO_DISTANCE)


def can_have_place(terrain: Terrain, position: Vec2, radius: int) -> bool:
    """Whether the square of ``radius`` around ``position`` is all prairie."""
    if not terrain.valid(position):
        raise IndexError(f"position out of the terrain: {position}")

    if terrain[position].region != Region.PRAIRIE:
        return False

    x, y = position
    for j in range(y - radius, y + radius + 1):
        for i in range(x - radius, x + radius + 1):
            neighbor = (i, j)
            if not terrain.valid(neighbor) or terrain[neighbor].region != Region.PRAIRIE:
                return False

    return True


def rail_endpoints(center: Vec2, town_diameter: int, world_center: Vec2) -> tuple[Vec2, Vec2]:
    """Rail arrival and departure around a town, on the side facing the world center."""
    reduced_diameter = town_diameter // REDUCED_FACTOR
    town_space = Rect.from_center_size(center, (reduced_diameter, reduced_diameter))
    map_center = to_map(center)
    angle = math.atan2(world_center[1] - map_center[1], world_center[0] - map_center[0])
    direction = direction_from_angle(angle)

    def put_at(orientation: Orientation) -> Vec2:
        x, y = town_space.position_at(orientation)
        dx, dy = displacement(orientation)
        return (x + RAIL_SPACING * dx, y + RAIL_SPACING * dy)

    arrival, departure = _RAIL_CORNERS[direction]
    return put_at(arrival), put_at(departure)


def _random_position(rng: random.Random, bounds: Rect) -> Vec2:
    x, y = bounds.position
    w, h = bounds.size
    return (x + rng.randrange(w), y + rng.randrange(h))


def generate_places(
    terrain: Terrain,
    rng: random.Random,
    towns_count: int,
    town_radius: int,
    farms_count: int | None = None,
) -> WorldPlaces:
    """Draw towns and farms on the prairie, far enough from each other.

    ``farms_count`` defaults to five farms per town.
    """
    if towns_count < 1:
        raise ValueError(f"invalid towns count: {towns_count}")
    if town_radius < 0:
        raise ValueError(f"invalid town radius: {town_radius}")
    if farms_count is None:
        farms_count = towns_count * FARMS_PER_TOWN
    if farms_count < 0:
        raise ValueError(f"invalid farms count: {farms_count}")

    town_min_distance = TOWN_MIN_DISTANCE_FROM_OTHER
    farm_min_distance = FARM_MIN_DISTANCE_FROM_OTHER

    width, height = terrain.size
    reduced_world = Rect.from_size((width // REDUCED_FACTOR, height // REDUCED_FACTOR))
    world_center = (width // 2, height // 2)
    town_space_radius = town_radius + RAIL_SPACING * REDUCED_FACTOR

    def draw(radius: int) -> Vec2:
        while True:
            position = _random_position(rng, reduced_world)
            if can_have_place(terrain, to_map(position), radius):
                return position

    places = WorldPlaces()

    town_rounds = 0
    while True:
        places.towns = [OuterTown(draw(town_space_radius)) for _ in range(towns_count)]
        town_rounds += 1
        if places.min_distance_between_towns() * REDUCED_FACTOR > town_min_distance:
            break

    logger.info("Towns generated after %d rounds", town_rounds)

    town_diameter = 2 * town_radius + 1
    for town in places.towns:
        town.rail_arrival, town.rail_departure = rail_endpoints(town.center, town_diameter, world_center)

    farm_rounds = 0
    while True:
        places.farms = [draw(FARM_RADIUS) for _ in range(farms_count)]
        farm_rounds += 1
        if places.min_distance_between_towns_and_farms() * REDUCED_FACTOR > farm_min_distance:
            break

    logger.info("Farms generated after %d rounds", farm_rounds)

    return places