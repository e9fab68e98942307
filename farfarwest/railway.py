"""Railway network generation: a loop of rails through every town, with stations and trains."""

from __future__ import annotations

import heapq
import itertools
import logging
import math
import random
from typing import Callable, Iterator, Sequence

from .geometry import (
    TRAIN_TIME,
    Rect,
    Vec2,
    manhattan_distance,
    sign,
)
from .network import NetworkState, StationState, TrainState
from .places import REDUCED_FACTOR, REDUCED_FARM_DIAMETER, WorldPlaces, to_map, to_reduced
from .terrain import Block, RawCell, Terrain

logger = logging.getLogger(__name__)

DAY_TIME = 24 * 60 * 60
CLIFF_THRESHOLD = 2
SLOPE_FACTOR = 225.0
MAX_STOP_TIME = 2**16 - 1

_FOUR_NEIGHBORS: tuple[Vec2, ...] = ((0, -1), (-1, 0), (1, 0), (0, 1))

_EIGHT_NEIGHBORS: tuple[Vec2, ...] = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0), (1, 0),
    (-1, 1), (0, 1), (1, 1),
)

RouteCost = Callable[[Vec2, Vec2], float]


class GridMap:
    """Orthogonal grid of walkable cells with shortest-route search."""

    def __init__(self, size: Vec2) -> None:
        width, height = size
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid grid size: {width}x{height}")
        self.size: Vec2 = (width, height)
        self._blocked: set[Vec2] = set()

    def valid(self, position: Vec2) -> bool:
        return 0 <= position[0] < self.size[0] and 0 <= position[1] < self.size[1]

    def positions(self) -> Iterator[Vec2]:
        """Every position, row by row."""
        width, height = self.size
        for y in range(height):
            for x in range(width):
                yield (x, y)

    def walkable(self, position: Vec2) -> bool:
        """Whether ``position`` is inside the grid and may be crossed."""
        position = tuple(position)
        return self.valid(position) and position not in self._blocked

    def set_walkable(self, position: Vec2, walkable: bool) -> None:
        """Mark a cell as walkable or not; positions outside the grid are ignored."""
        position = tuple(position)
        if not self.valid(position):
            return
        if walkable:
            self._blocked.discard(position)
        else:
            self._blocked.add(position)

    def compute_route(self, origin: Vec2, target: Vec2, cost: RouteCost) -> list[Vec2]:
        """Cheapest orthogonal route from ``origin`` to ``target``, both included.

        ``cost`` gives the price of a step between two neighbouring cells and
        must be at least their distance. An empty list means no route exists.
        """
        origin = tuple(origin)
        target = tuple(target)
        if not self.valid(origin) or not self.valid(target):
            raise IndexError(f"route end outside the grid: {origin} -> {target}")
        if origin == target:
            return [origin]

        def heuristic(position: Vec2) -> float:
            return math.dist(position, target)

        counter = itertools.count()
        frontier: list[tuple[float, int, Vec2]] = [(heuristic(origin), next(counter), origin)]
        best: dict[Vec2, float] = {origin: 0.0}
        came_from: dict[Vec2, Vec2] = {}
        closed: set[Vec2] = set()

        while frontier:
            _, _, current = heapq.heappop(frontier)
            if current in closed:
                continue
            if current == target:
                route = [current]
                while current in came_from:
                    current = came_from[current]
                    route.append(current)
                route.reverse()
                return route
            closed.add(current)

            current_cost = best[current]
            for dx, dy in _FOUR_NEIGHBORS:
                neighbor = (current[0] + dx, current[1] + dy)
                if neighbor in closed or not self.walkable(neighbor):
                    continue
                new_cost = current_cost + cost(current, neighbor)
                if new_cost < best.get(neighbor, math.inf):
                    best[neighbor] = new_cost
                    came_from[neighbor] = current
                    heapq.heappush(frontier, (new_cost + heuristic(neighbor), next(counter), neighbor))

        return []


def compute_stop_times(railway_length: int, towns_count: int) -> list[int]:
    """Stop time of each station so that a full loop of the train lasts one day.

    ``railway_length`` counts the reduced railway points. The first station
    gets the remainder of the division between stations.
    """
    if towns_count < 1:
        raise ValueError(f"invalid towns count: {towns_count}")
    if railway_length < 0:
        raise ValueError(f"invalid railway length: {railway_length}")

    total_travel_time = railway_length * REDUCED_FACTOR * TRAIN_TIME
    if total_travel_time > DAY_TIME:
        raise ValueError(f"the railway is too long: {railway_length}")

    total_stop_time = DAY_TIME - total_travel_time
    stop_time, remaining = divmod(total_stop_time, towns_count)

    if stop_time + remaining > MAX_STOP_TIME:
        raise ValueError(f"stop time too long: {stop_time + remaining}")

    logger.info("Train stop time: %d (%d)", stop_time, stop_time + remaining)
    return [stop_time + remaining] + [stop_time] * (towns_count - 1)


def _between(start: Vec2, end: Vec2) -> Iterator[Vec2]:
    """Cells strictly between two aligned points."""
    step = sign((end[0] - start[0], end[1] - start[1]))
    position = (start[0] + step[0], start[1] + step[1])
    while position != end:
        yield position
        position = (position[0] + step[0], position[1] + step[1])


def _build_grid(terrain: Terrain) -> GridMap:
    width, height = terrain.size
    grid = GridMap((width // REDUCED_FACTOR, height // REDUCED_FACTOR))

    for position in grid.positions():
        x, y = to_map(position)
        cliffs = sum(
            1
            for j in range(y - 2, y + 3)
            for i in range(x - 2, x + 3)
            if (i, j) != (x, y) and terrain.valid((i, j)) and terrain[(i, j)].block == Block.CLIFF
        )
        grid.set_walkable(position, cliffs <= CLIFF_THRESHOLD)

    return grid


def generate_network(
    raw: Sequence[Sequence[RawCell]],
    terrain: Terrain,
    places: WorldPlaces,
    rng: random.Random,
    town_radius: int,
) -> NetworkState:
    """Lay a railway loop through every town, then place stations and trains.

    Blocks around the railway are removed from ``terrain``.
    """
    if not places.towns:
        raise ValueError("no town to connect")
    if town_radius < 0:
        raise ValueError(f"invalid town radius: {town_radius}")

    reduced_town_diameter = (2 * town_radius + 1) // REDUCED_FACTOR
    width, height = terrain.size
    reduced_center = to_reduced((width // 2, height // 2))

    grid = _build_grid(terrain)

    for town in places.towns:
        town_space = Rect.from_center_size(town.center, (reduced_town_diameter, reduced_town_diameter))
        for position in town_space.positions():
            grid.set_walkable(position, False)
        for position in _between(town.rail_arrival, town.rail_departure):
            grid.set_walkable(position, False)

    for farm in places.farms:
        farm_space = Rect.from_center_size(farm, (REDUCED_FARM_DIAMETER, REDUCED_FARM_DIAMETER)).grow_by(1)
        for position in farm_space.positions():
            grid.set_walkable(to_reduced(position), False)

    def altitude(position: Vec2) -> float:
        x, y = to_map(position)
        return raw[y][x].altitude

    def cost(position: Vec2, neighbor: Vec2) -> float:
        distance = math.dist(position, neighbor)
        slope = abs(altitude(position) - altitude(neighbor)) / distance
        return distance * (1.0 + SLOPE_FACTOR * slope * slope)

    def town_angle(index: int) -> float:
        cx, cy = places.towns[index].center
        return math.atan2(cy - reduced_center[1], cx - reduced_center[0])

    ordered = sorted(range(len(places.towns)), key=town_angle)

    paths: list[list[Vec2]] = []

    for i, current_index in enumerate(ordered):
        town = places.towns[current_index]
        paths.append(list(_between(town.rail_arrival, town.rail_departure)))

        next_index = ordered[(i + 1) % len(ordered)]
        route = grid.compute_route(town.rail_departure, places.towns[next_index].rail_arrival, cost)
        if not route:
            raise RuntimeError(f"no railway route between towns {current_index} and {next_index}")

        for x, y in route:
            grid.set_walkable((x, y), False)
            for dx, dy in _EIGHT_NEIGHBORS:
                grid.set_walkable((x + dx, y + dy), False)

        logger.info("Points between %d and %d: %d", current_index, next_index, len(route))
        paths.append(route)

    reduced_railway: list[Vec2] = []
    for path in paths:
        for position in path:
            if reduced_railway and manhattan_distance(reduced_railway[-1], position) != 1:
                raise RuntimeError(f"railway is broken at {position}")
            reduced_railway.append(position)

    if manhattan_distance(reduced_railway[-1], reduced_railway[0]) != 1:
        raise RuntimeError("the railway does not form a closed loop")

    if rng.random() < 0.5:
        reduced_railway.reverse()

    network = NetworkState(railway=[to_map(position) for position in reduced_railway])

    stop_times = compute_stop_times(len(network.railway), len(places.towns))
    railway_indices = {position: index for index, position in reversed(list(enumerate(network.railway)))}

    for town, stop_time in zip(places.towns, stop_times):
        middle = (
            (town.rail_departure[0] + town.rail_arrival[0]) // 2,
            (town.rail_departure[1] + town.rail_arrival[1]) // 2,
        )
        station = to_map(middle)
        index = railway_indices.get(station)
        if index is None:
            raise RuntimeError(f"station {station} is not on the railway")
        network.stations.append(StationState(REDUCED_FACTOR * index, stop_time))

    network.trains = [TrainState(station.index) for station in network.stations]

    for x, y in network.railway:
        for dx, dy in _EIGHT_NEIGHBORS:
            neighbor = (x + dx, y + dy)
            if terrain.valid(neighbor):
                terrain[neighbor].block = Block.NONE

    logger.info("Railway length: %d", len(network.railway) * REDUCED_FACTOR)
    return network


def compute_starting_position(network: NetworkState, center: Vec2) -> Vec2:
    """Hero start: just beside the station closest to ``center``, away from it."""
    if not network.stations:
        raise ValueError("the network has no station")

    def station_position(station: StationState) -> Vec2:
        return network.railway[station.index // REDUCED_FACTOR]

    closest = min(network.stations, key=lambda station: manhattan_distance(center, station_position(station)))
    x, y = station_position(closest)
    dx, dy = sign((x - center[0], y - center[1]))
    return (x + 2 * dx, y + 2 * dy)